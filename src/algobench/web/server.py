# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Minimal asyncio HTTP server exposing the benchmark engine as a JSON API.

Routes:
    GET  /                     List of routes
    GET  /healthz              Liveness probe
    POST /api/benchmark        Run one benchmark: {"algorithm", "arrayType", "size", "runs"}
    POST /api/benchmark/all    Clear results, then run the search and sort sweeps: {"runs"}
    GET  /api/results          All stored results
    POST /api/clear            Clear stored results
    GET  /api/export/csv       Download results as CSV
    GET  /api/export/md        Download results as Markdown

Benchmarks block, so they run in a worker thread. A single lock serializes
every operation that touches the result store, which keeps the engine's
single-writer assumption intact when requests overlap.

Configuration via environment variables:
    ALGOBENCH_WEB_HOST=127.0.0.1
    ALGOBENCH_WEB_PORT=8080
    ALGOBENCH_WEB_REQUEST_TIMEOUT=5.0
    ALGOBENCH_WEB_MAX_BODY_BYTES=65536
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from asyncio import StreamReader, StreamWriter
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

import orjson
from pydantic import ValidationError

from algobench.common.environment import Environment
from algobench.common.exceptions import AlgoBenchError, UnknownAlgorithmError
from algobench.engine.models import BenchmarkConfig
from algobench.engine.runner import BenchmarkRunner
from algobench.exporters import (
    BaseExporter,
    CsvExporter,
    ExporterConfig,
    MarkdownExporter,
)
from algobench.web.http import (
    BadRequest,
    HttpRequest,
    HttpResponse,
    json_response,
    read_request,
)
from algobench.web.models import BenchmarkAllRequest, BenchmarkRequest

logger = logging.getLogger(__name__)

__all__ = ["BenchmarkWebServer", "run_server"]

Handler = Callable[[HttpRequest], Awaitable[HttpResponse]]


class BenchmarkWebServer:
    """JSON web API over a BenchmarkRunner. See module docstring for routes."""

    def __init__(
        self,
        runner: BenchmarkRunner | None = None,
        host: str | None = None,
        port: int | None = None,
    ) -> None:
        self.runner = runner if runner is not None else BenchmarkRunner()
        self.host = host if host is not None else Environment.WEB.HOST
        self.port = port if port is not None else Environment.WEB.PORT
        self._server: asyncio.Server | None = None
        self._lock = asyncio.Lock()
        self._routes: dict[str, dict[str, Handler]] = {
            "/": {"GET": self._handle_index},
            "/healthz": {"GET": self._handle_health},
            "/api/benchmark": {"POST": self._handle_benchmark},
            "/api/benchmark/all": {"POST": self._handle_benchmark_all},
            "/api/results": {"GET": self._handle_get_results},
            "/api/clear": {"POST": self._handle_clear_results},
            "/api/export/csv": {"GET": self._handle_export_csv},
            "/api/export/md": {"GET": self._handle_export_markdown},
        }

    @property
    def is_running(self) -> bool:
        return self._server is not None

    async def start(self) -> None:
        """Bind and start accepting connections.

        When port is 0 the OS picks a free port; ``self.port`` is updated to it.
        """
        if self._server is not None:
            logger.debug("Web server already running. Ignoring start request.")
            return
        try:
            self._server = await asyncio.start_server(
                self._handle_connection, host=self.host, port=self.port
            )
        except OSError as e:
            logger.error(f"Web server failed to bind to {self.host}:{self.port}: {e!r}")
            raise
        self.port = self._server.sockets[0].getsockname()[1]
        logger.info(f"Web server started on http://{self.host}:{self.port}")

    async def stop(self) -> None:
        if self._server is None:
            logger.debug("Web server is not running. Ignoring stop request.")
            return
        server = self._server
        self._server = None
        server.close()
        await server.wait_closed()
        logger.info("Web server stopped.")

    async def serve_forever(self) -> None:
        await self.start()
        assert self._server is not None
        try:
            await self._server.serve_forever()
        finally:
            await self.stop()

    async def _handle_connection(self, reader: StreamReader, writer: StreamWriter) -> None:
        """Read one request, dispatch it, write the response, close."""
        try:
            try:
                request = await read_request(
                    reader,
                    timeout=Environment.WEB.REQUEST_TIMEOUT,
                    max_body_bytes=Environment.WEB.MAX_BODY_BYTES,
                )
            except BadRequest as e:
                response = json_response(e.status, success=False, message=str(e))
            else:
                if request is None:
                    return
                response = await self.dispatch(request)
            writer.write(response.to_bytes())
            await writer.drain()
        except TimeoutError:
            logger.warning("Web request timed out")
        except ConnectionError as e:
            logger.debug(f"Client disconnected: {e!r}")
        finally:
            writer.close()
            with contextlib.suppress(ConnectionError):
                await writer.wait_closed()

    async def dispatch(self, request: HttpRequest) -> HttpResponse:
        """Route a parsed request to its handler."""
        methods = self._routes.get(request.path)
        if methods is None:
            return json_response(404, success=False, message="Not Found")
        handler = methods.get(request.method)
        if handler is None:
            return json_response(405, success=False, message="Method not allowed")
        try:
            response = await handler(request)
        except Exception as e:
            logger.exception(f"Unhandled error serving {request.method} {request.path}")
            return json_response(500, success=False, message=f"Internal error: {e}")
        logger.debug(f"{request.method} {request.path} -> {response.status}")
        return response

    async def _handle_index(self, request: HttpRequest) -> HttpResponse:
        routes = [
            {"path": path, "methods": sorted(methods)}
            for path, methods in self._routes.items()
        ]
        return json_response(200, success=True, routes=routes)

    async def _handle_health(self, request: HttpRequest) -> HttpResponse:
        return HttpResponse(200, b"ok", content_type="text/plain")

    async def _handle_benchmark(self, request: HttpRequest) -> HttpResponse:
        try:
            payload = BenchmarkRequest.model_validate(_load_json(request))
            config = BenchmarkConfig(
                algorithm=payload.algorithm,
                distribution=payload.array_type,
                size=payload.size,
                runs=payload.runs,
                target=payload.size // 2,
            )
        except (BadRequest, ValueError) as e:
            return json_response(400, success=False, message=f"Invalid request: {e}")

        async with self._lock:
            try:
                result = await asyncio.to_thread(self.runner.run_one, config)
            except UnknownAlgorithmError as e:
                return json_response(400, success=False, message=f"Benchmark failed: {e}")
            except AlgoBenchError as e:
                logger.error(f"Benchmark failed: {e}")
                return json_response(500, success=False, message=f"Benchmark failed: {e}")

        return json_response(200, success=True, results=[result])

    async def _handle_benchmark_all(self, request: HttpRequest) -> HttpResponse:
        try:
            payload = BenchmarkAllRequest.model_validate(_load_json(request))
        except (BadRequest, ValidationError) as e:
            return json_response(400, success=False, message=f"Invalid request: {e}")

        sizes = list(Environment.BENCHMARK.SWEEP_SIZES)
        async with self._lock:
            self.runner.clear_results()
            try:
                await asyncio.to_thread(self.runner.run_all, sizes, payload.runs)
            except AlgoBenchError as e:
                logger.error(f"Benchmark sweep failed: {e}")
                return json_response(
                    500, success=False, message=f"Benchmark sweep failed: {e}"
                )
            results = self.runner.get_results()

        return json_response(200, success=True, results=list(results))

    async def _handle_get_results(self, request: HttpRequest) -> HttpResponse:
        return json_response(200, success=True, results=list(self.runner.get_results()))

    async def _handle_clear_results(self, request: HttpRequest) -> HttpResponse:
        async with self._lock:
            self.runner.clear_results()
        return json_response(200, success=True, message="Results cleared")

    async def _handle_export_csv(self, request: HttpRequest) -> HttpResponse:
        return self._export(CsvExporter)

    async def _handle_export_markdown(self, request: HttpRequest) -> HttpResponse:
        return self._export(MarkdownExporter)

    def _export(self, exporter_cls: type[BaseExporter]) -> HttpResponse:
        results = self.runner.get_results()
        if not results:
            return json_response(400, success=False, message="No results to export")
        exporter = exporter_cls(
            ExporterConfig(
                results=results,
                file_prefix="benchmark_results",
                generated_at=datetime.now(),
            )
        )
        return HttpResponse(
            200,
            exporter.generate_content().encode("utf-8"),
            content_type=exporter.media_type,
            headers={
                "Content-Disposition": f"attachment; filename={exporter.get_file_name()}"
            },
        )


def _load_json(request: HttpRequest) -> Any:
    if not request.body:
        raise BadRequest("Invalid JSON request: empty body")
    try:
        return orjson.loads(request.body)
    except orjson.JSONDecodeError as e:
        raise BadRequest(f"Invalid JSON request: {e}") from e


def run_server(
    host: str | None = None,
    port: int | None = None,
    runner: BenchmarkRunner | None = None,
) -> None:
    """Run the web API until interrupted."""
    server = BenchmarkWebServer(runner, host=host, port=port)
    try:
        asyncio.run(server.serve_forever())
    except KeyboardInterrupt:
        logger.info("Web server interrupted. Shutting down.")
