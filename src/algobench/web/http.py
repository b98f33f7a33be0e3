# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""HTTP/1.1 request parsing and response encoding over asyncio streams.

Just enough HTTP for a local JSON API: one request per connection, a
Content-Length body, and ``Connection: close`` responses.
"""

from __future__ import annotations

import asyncio
from asyncio import StreamReader
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

import orjson
from pydantic import BaseModel

__all__ = [
    "BadRequest",
    "HttpRequest",
    "HttpResponse",
    "json_response",
    "read_request",
]

_MAX_HEADER_LINES = 100


class BadRequest(Exception):
    """Raised when a request cannot be parsed or is not acceptable."""

    def __init__(self, message: str, status: int = 400) -> None:
        super().__init__(message)
        self.status = status


@dataclass(slots=True)
class HttpRequest:
    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(slots=True)
class HttpResponse:
    status: int
    body: bytes
    content_type: str = "application/json"
    headers: dict[str, str] = field(default_factory=dict)

    def to_bytes(self) -> bytes:
        reason = HTTPStatus(self.status).phrase
        head = [
            f"HTTP/1.1 {self.status} {reason}",
            f"Content-Type: {self.content_type}",
            f"Content-Length: {len(self.body)}",
            "Connection: close",
        ]
        head.extend(f"{name}: {value}" for name, value in self.headers.items())
        return ("\r\n".join(head) + "\r\n\r\n").encode("latin-1") + self.body


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def json_response(status: int, **fields: Any) -> HttpResponse:
    """Build a JSON response from keyword fields.

    Pydantic models anywhere in the fields are dumped in JSON mode.
    """
    return HttpResponse(status, orjson.dumps(fields, default=_default))


async def read_request(
    reader: StreamReader, timeout: float, max_body_bytes: int
) -> HttpRequest | None:
    """Read one HTTP request from the stream.

    Returns:
        The parsed request, or None if the client closed without sending one

    Raises:
        BadRequest: On a malformed request line or headers, or a body that is too large
        TimeoutError: If the client is too slow
    """
    request_line = await asyncio.wait_for(reader.readline(), timeout=timeout)
    if not request_line:
        return None

    # Example: "POST /api/benchmark HTTP/1.1\r\n"
    parts = request_line.decode("latin-1").split()
    if len(parts) < 2:
        raise BadRequest("Bad Request")
    method, target = parts[0].upper(), parts[1]
    path = target.split("?", 1)[0]

    headers: dict[str, str] = {}
    for _ in range(_MAX_HEADER_LINES):
        line = await asyncio.wait_for(reader.readline(), timeout=timeout)
        if line in (b"\r\n", b"\n", b""):
            break
        name, sep, value = line.decode("latin-1").partition(":")
        if not sep:
            raise BadRequest(f"Malformed header line: {line!r}")
        headers[name.strip().lower()] = value.strip()
    else:
        raise BadRequest("Too many header lines")

    try:
        length = int(headers.get("content-length", "0") or "0")
    except ValueError:
        raise BadRequest("Invalid Content-Length") from None
    if length < 0:
        raise BadRequest("Invalid Content-Length")
    if length > max_body_bytes:
        raise BadRequest(
            f"Request body of {length} bytes exceeds limit of {max_body_bytes}",
            status=413,
        )

    body = b""
    if length:
        try:
            body = await asyncio.wait_for(reader.readexactly(length), timeout=timeout)
        except asyncio.IncompleteReadError:
            raise BadRequest("Request body shorter than Content-Length") from None

    return HttpRequest(method=method, path=path, headers=headers, body=body)
