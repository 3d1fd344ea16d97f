"""Protocol definitions for the external collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dartsym.data.documents import TextDocument
    from dartsym.models.declarations import ElementDeclarationsResult
    from dartsym.models.symbols import Range


class DeclarationIndexProtocol(Protocol):
    """Black-box declaration search (the analysis server)."""

    async def search_element_declarations(
        self, pattern: str, max_results: int
    ) -> ElementDeclarationsResult: ...


class WorkspaceProtocol(Protocol):
    """Workspace roots and the text documents inside them."""

    def find_workspace_root(self, path: str) -> str | None: ...

    async def open_document(self, path: str) -> TextDocument: ...

    def to_display_range(self, document: TextDocument, offset: int, length: int) -> Range: ...
