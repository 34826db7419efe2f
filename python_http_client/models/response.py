from httpx import Headers
from httpx import Response as HttpxResponse
from pydantic import BaseModel, ConfigDict


def dump_headers(headers: Headers) -> str:
    """Debug representation of the full header set.

    Repeated headers are kept, every name maps to the list of its values:

    >>> dump_headers(Headers([("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]))
    "{'set-cookie': ['a=1', 'b=2']}"
    """
    grouped: dict[str, list[str]] = {}
    for name, value in headers.multi_items():
        grouped.setdefault(name.lower(), []).append(value)
    return repr(grouped)


class Response(BaseModel):
    """The response of an API call.

    Holds the status code, the raw body text and a printable dump of the
    response headers. The body is not parsed, decode it yourself when JSON is
    expected.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str = ""
    headers: str = "{}"

    @classmethod
    def from_httpx(cls, response: HttpxResponse) -> "Response":
        return cls(
            status_code=response.status_code,
            body=response.text,
            headers=dump_headers(response.headers),
        )