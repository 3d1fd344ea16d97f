"""Service container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dartsym.data.analysis_server import AnalysisServerClient
from dartsym.data.documents import FileSystemWorkspace
from dartsym.data.sdk import analysis_server_snapshot_path, dart_vm_path, find_dart_sdk
from dartsym.services.symbol_service import WorkspaceSymbolService

if TYPE_CHECKING:
    from pathlib import Path

    from dartsym.config import Config


class SdkNotFoundError(Exception):
    """No usable Dart SDK could be located."""


@dataclass
class ServiceContainer:
    """Holds all application services. Built once at startup, immutable."""

    sdk_root: Path
    analysis_server: AnalysisServerClient
    workspace: FileSystemWorkspace
    symbol_service: WorkspaceSymbolService

    @classmethod
    async def create(cls, config: Config) -> ServiceContainer:
        """Async factory that finds the SDK, starts the server and wires services."""
        sdk_root = find_dart_sdk(config.sdk_path)
        if sdk_root is None:
            raise SdkNotFoundError(
                "Could not find a Dart SDK. Add it to your PATH or pass --sdk."
            )

        analysis_server = AnalysisServerClient(
            dart_vm_path(sdk_root),
            analysis_server_snapshot_path(sdk_root),
            request_timeout=config.request_timeout,
        )
        await analysis_server.start()
        if config.workspace_roots:
            try:
                await analysis_server.analysis_set_analysis_roots(config.analysis_roots)
            except Exception:
                await analysis_server.stop()
                raise

        workspace = FileSystemWorkspace(config.workspace_roots)
        symbol_service = WorkspaceSymbolService(
            analysis_server, workspace, max_results=config.max_results
        )

        return cls(
            sdk_root=sdk_root,
            analysis_server=analysis_server,
            workspace=workspace,
            symbol_service=symbol_service,
        )

    async def close(self) -> None:
        """Shut down all services."""
        await self.analysis_server.stop()
