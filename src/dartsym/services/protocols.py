"""Protocol definitions for services."""

from __future__ import annotations

from typing import Protocol

from result import Result

from dartsym.models.symbols import ResolutionError, SymbolEntry
from dartsym.services.cancellation import CancellationToken


class WorkspaceSymbolServiceProtocol(Protocol):
    """Interface for workspace symbol search."""

    async def provide_workspace_symbols(
        self, query: str, token: CancellationToken | None = None
    ) -> list[SymbolEntry] | None: ...

    async def resolve_workspace_symbol(
        self, entry: SymbolEntry, token: CancellationToken | None = None
    ) -> Result[SymbolEntry, ResolutionError]: ...
