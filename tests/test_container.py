"""Tests for service container wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

from dartsym.config import Config
from dartsym.services.container import SdkNotFoundError, ServiceContainer
from dartsym.services.symbol_service import WorkspaceSymbolService


@pytest.mark.asyncio
async def test_service_container_wiring_and_close(monkeypatch, tmp_path: Path) -> None:
    created: dict[str, object] = {}

    class FakeAnalysisServer:
        def __init__(self, dart_vm: Path, snapshot: Path, *, request_timeout: float) -> None:
            created["command"] = (dart_vm, snapshot)
            created["timeout"] = request_timeout

        async def start(self) -> None:
            created["started"] = True

        async def analysis_set_analysis_roots(self, included: list[str]) -> None:
            created["roots"] = included

        async def stop(self) -> None:
            created["stopped"] = True

    monkeypatch.setattr("dartsym.services.container.find_dart_sdk", lambda path: tmp_path)
    monkeypatch.setattr("dartsym.services.container.AnalysisServerClient", FakeAnalysisServer)

    config = Config(workspace_roots=(tmp_path / "ws",), request_timeout=5.0)
    container = await ServiceContainer.create(config)

    assert created["started"] is True
    assert created["roots"] == [str((tmp_path / "ws").resolve())]
    assert created["timeout"] == 5.0
    assert created["command"][0].parent == tmp_path / "bin"  # type: ignore[index]
    assert isinstance(container.symbol_service, WorkspaceSymbolService)

    await container.close()
    assert created["stopped"] is True


@pytest.mark.asyncio
async def test_service_container_without_sdk(monkeypatch) -> None:
    monkeypatch.setattr("dartsym.services.container.find_dart_sdk", lambda path: None)
    with pytest.raises(SdkNotFoundError):
        await ServiceContainer.create(Config())


@pytest.mark.asyncio
async def test_service_container_stops_server_when_roots_fail(monkeypatch, tmp_path: Path) -> None:
    stopped: list[bool] = []

    class FailingAnalysisServer:
        def __init__(self, *args: object, **kwargs: object) -> None:
            pass

        async def start(self) -> None:
            return

        async def analysis_set_analysis_roots(self, included: list[str]) -> None:
            raise RuntimeError("boom")

        async def stop(self) -> None:
            stopped.append(True)

    monkeypatch.setattr("dartsym.services.container.find_dart_sdk", lambda path: tmp_path)
    monkeypatch.setattr("dartsym.services.container.AnalysisServerClient", FailingAnalysisServer)

    with pytest.raises(RuntimeError):
        await ServiceContainer.create(Config(workspace_roots=(tmp_path,)))
    assert stopped == [True]
