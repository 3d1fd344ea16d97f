"""Workspace symbol search with lazily resolved locations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from dartsym.config import DEFAULT_MAX_RESULTS
from dartsym.models.symbols import (
    ResolutionError,
    SymbolEntry,
    UnresolvedLocation,
)
from dartsym.services.cancellation import OperationCancelledError, run_cancellable
from dartsym.services.display_paths import display_path
from dartsym.services.pattern import build_fuzzy_pattern
from dartsym.services.symbol_entries import build_symbol_entry

if TYPE_CHECKING:
    from dartsym.data.protocols import DeclarationIndexProtocol, WorkspaceProtocol
    from dartsym.services.cancellation import CancellationToken

logger = logging.getLogger(__name__)


class WorkspaceSymbolService:
    """Search declarations by fuzzy name and resolve selected results."""

    def __init__(
        self,
        index: DeclarationIndexProtocol,
        workspace: WorkspaceProtocol,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        self._index = index
        self._workspace = workspace
        self._max_results = max_results

    async def provide_workspace_symbols(
        self, query: str, token: CancellationToken | None = None
    ) -> list[SymbolEntry] | None:
        """Search for symbols matching ``query``.

        Returns ``None`` for an empty query (no search is made) and an empty
        list when the search fails or is cancelled. Entries keep the index's
        order and carry unresolved locations.
        """
        if len(query) == 0:
            return None

        pattern = build_fuzzy_pattern(query)
        try:
            results = await run_cancellable(
                self._index.search_element_declarations(pattern, self._max_results), token
            )
        except OperationCancelledError:
            logger.debug("Symbol search for %r cancelled", query)
            return []
        except Exception as exc:
            logger.warning("Symbol search for %r failed: %s", query, exc)
            return []

        if token is not None and token.is_cancellation_requested:
            return []

        entries: list[SymbolEntry] = []
        for declaration in results.declarations:
            if not 0 <= declaration.file_index < len(results.files):
                logger.warning(
                    "Skipping %s: file index %d out of range (%d files)",
                    declaration.name,
                    declaration.file_index,
                    len(results.files),
                )
                continue
            file = results.files[declaration.file_index]
            root = self._workspace.find_workspace_root(file)
            entries.append(build_symbol_entry(declaration, file, display_path(file, root)))
        return entries

    async def resolve_workspace_symbol(
        self, entry: SymbolEntry, token: CancellationToken | None = None
    ) -> Result[SymbolEntry, ResolutionError]:
        """Attach a concrete location to ``entry``, opening its document once.

        Entries without an unresolved location (already resolved, or not built
        by this service) are returned unchanged.
        """
        location = entry.location
        if not isinstance(location, UnresolvedLocation):
            return Ok(entry)

        try:
            document = await run_cancellable(
                self._workspace.open_document(location.file), token
            )
        except OperationCancelledError:
            return Err(ResolutionError(location.file, "cancelled"))
        except OSError as exc:
            logger.info("Cannot open %s: %s", location.file, exc)
            return Err(ResolutionError(location.file, exc.strerror or str(exc)))

        if token is not None and token.is_cancellation_requested:
            return Err(ResolutionError(location.file, "cancelled"))

        entry.location = location.resolve(
            document.uri,
            self._workspace.to_display_range(document, location.offset, location.length),
        )
        return Ok(entry)
