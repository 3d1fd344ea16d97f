"""Async client for the Dart analysis server (JSON over stdio)."""

from __future__ import annotations

import asyncio
import contextlib
import itertools
import json
import logging
from collections import defaultdict
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Protocol, TypeAlias

from dartsym.models.declarations import ElementDeclarationsResult

logger = logging.getLogger(__name__)

_STREAM_LIMIT = 16 * 1024 * 1024

EventListener: TypeAlias = Callable[[dict[str, Any]], None]


class AnalysisServerError(Exception):
    """An error response, timeout or lost connection to the analysis server."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class LineWriter(Protocol):
    def write(self, data: bytes) -> None: ...

    async def drain(self) -> None: ...


class AnalysisServerClient:
    """Request/response client for a running analysis server process."""

    def __init__(
        self,
        dart_vm: Path,
        snapshot: Path,
        *,
        request_timeout: float = 30.0,
    ) -> None:
        self._command = [str(dart_vm), str(snapshot)]
        self._request_timeout = request_timeout
        self._process: asyncio.subprocess.Process | None = None
        self._writer: LineWriter | None = None
        self._reader_task: asyncio.Task[None] | None = None
        self._ids = itertools.count(1)
        self._pending: dict[str, asyncio.Future[dict[str, Any]]] = {}
        self._listeners: dict[str, list[EventListener]] = defaultdict(list)
        self.on_event("server.connected", _log_connected)

    async def __aenter__(self) -> AnalysisServerClient:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()

    async def start(self) -> None:
        """Spawn the analysis server and start reading its output."""
        logger.info("Starting analysis server: %s", " ".join(self._command))
        self._process = await asyncio.create_subprocess_exec(
            *self._command,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
            limit=_STREAM_LIMIT,
        )
        assert self._process.stdin is not None
        assert self._process.stdout is not None
        self.connect_streams(self._process.stdout, self._process.stdin)

    def connect_streams(self, reader: asyncio.StreamReader, writer: LineWriter) -> None:
        """Attach to an already-open pair of streams."""
        self._writer = writer
        self._reader_task = asyncio.create_task(self._read_loop(reader))

    async def stop(self) -> None:
        """Ask the server to shut down and wait for the process to exit."""
        if self._process is not None and self._process.returncode is None:
            try:
                await self.server_shutdown()
            except (AnalysisServerError, OSError) as exc:
                logger.warning("Analysis server did not shut down cleanly: %s", exc)
            finally:
                if self._process.returncode is None:
                    with contextlib.suppress(ProcessLookupError):
                        self._process.terminate()
                await self._process.wait()
        if self._reader_task is not None:
            self._reader_task.cancel()
            try:
                await self._reader_task
            except asyncio.CancelledError:
                pass
            self._reader_task = None
        self._fail_pending("SERVER_STOPPED", "Analysis server was stopped")
        self._writer = None
        self._process = None

    def on_event(self, event: str, listener: EventListener) -> None:
        """Register ``listener`` for notifications named ``event``."""
        self._listeners[event].append(listener)

    async def send_request(
        self, method: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send a request and wait for its result."""
        if self._writer is None:
            raise AnalysisServerError("NOT_RUNNING", "Analysis server is not running")

        request_id = str(next(self._ids))
        message: dict[str, Any] = {"id": request_id, "method": method}
        if params is not None:
            message["params"] = params

        future: asyncio.Future[dict[str, Any]] = asyncio.get_running_loop().create_future()
        self._pending[request_id] = future
        try:
            self._writer.write(json.dumps(message).encode("utf-8") + b"\n")
            await self._writer.drain()
            return await asyncio.wait_for(future, self._request_timeout)
        except TimeoutError as exc:
            raise AnalysisServerError("TIMEOUT", f"{method} timed out") from exc
        finally:
            self._pending.pop(request_id, None)

    async def search_element_declarations(
        self, pattern: str, max_results: int
    ) -> ElementDeclarationsResult:
        result = await self.send_request(
            "search.getElementDeclarations",
            {"pattern": pattern, "maxResults": max_results},
        )
        return ElementDeclarationsResult.model_validate(result)

    async def analysis_set_analysis_roots(
        self, included: list[str], excluded: list[str] | None = None
    ) -> None:
        await self.send_request(
            "analysis.setAnalysisRoots",
            {"included": included, "excluded": excluded or []},
        )

    async def server_shutdown(self) -> None:
        await self.send_request("server.shutdown")

    def handle_message(self, raw: str | bytes) -> None:
        """Dispatch one line of server output to a pending request or listeners."""
        try:
            message = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring non-JSON output from analysis server: %r", raw)
            return
        if not isinstance(message, dict):
            return

        if "id" in message:
            future = self._pending.get(str(message["id"]))
            if future is None or future.done():
                logger.debug("Response for unknown request %s", message["id"])
                return
            error = message.get("error")
            if error:
                future.set_exception(
                    AnalysisServerError(
                        str(error.get("code", "UNKNOWN")), str(error.get("message", ""))
                    )
                )
            else:
                future.set_result(message.get("result") or {})
        elif "event" in message:
            for listener in self._listeners.get(message["event"], []):
                listener(message.get("params") or {})

    async def _read_loop(self, reader: asyncio.StreamReader) -> None:
        while True:
            line = await reader.readline()
            if not line:
                break
            if line.strip():
                self.handle_message(line)
        logger.info("Analysis server output closed")
        self._writer = None
        self._fail_pending("SERVER_EXITED", "Analysis server exited")

    def _fail_pending(self, code: str, message: str) -> None:
        for future in self._pending.values():
            if not future.done():
                future.set_exception(AnalysisServerError(code, message))
        self._pending.clear()


def _log_connected(params: dict[str, Any]) -> None:
    logger.info("Connected to Dart analysis server version %s", params.get("version", "?"))
