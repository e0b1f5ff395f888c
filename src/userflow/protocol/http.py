"""Transport seam between the encoders and the HTTP runtime.

Encoders produce an :class:`EncodedResponse`: status code, header set and the
serialized body. Turning that into a framework response is the only thing the
runtime adapter does.
"""
from dataclasses import dataclass, field

from fastapi import Response

from userflow.protocol.constants import JSON_CONTENT_TYPE


@dataclass(frozen=True)
class EncodedResponse:
    """A fully serialized webhook response ready for transmission."""

    status_code: int
    body: str
    headers: dict[str, str] = field(
        default_factory=lambda: {"Content-Type": JSON_CONTENT_TYPE}
    )

    def to_response(self) -> Response:
        """Create a FastAPI response carrying status, headers and body as-is."""
        response = Response(status_code=self.status_code, content=self.body.encode("utf-8"))
        for name, value in self.headers.items():
            response.headers[name] = value
        return response
