"""Uniform response envelope returned by every gateway operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response


@dataclass(frozen=True)
class Envelope:
    """HTTP status plus body, independent of the web framework.

    String bodies are sent as ``text/plain``; anything else as JSON.
    """

    status_code: int
    body: Any

    @classmethod
    def ok(cls, body: Any) -> Envelope:
        return cls(200, body)

    @classmethod
    def bad_request(cls, message: str) -> Envelope:
        return cls(400, message)

    @classmethod
    def internal_error(cls, message: str) -> Envelope:
        return cls(500, message)

    def to_response(self) -> Response:
        if isinstance(self.body, str):
            return PlainTextResponse(self.body, status_code=self.status_code)
        return JSONResponse(jsonable_encoder(self.body), status_code=self.status_code)
