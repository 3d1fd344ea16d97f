"""Filesystem-backed workspace and text documents."""

from __future__ import annotations

import asyncio
import bisect
import logging
from dataclasses import dataclass, field
from pathlib import Path

from dartsym.models.symbols import Position, Range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextDocument:
    """An opened source file with a line index for offset conversion."""

    path: Path
    text: str
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)
    _length: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Offsets are counted in UTF-16 code units, as the analysis server reports them.
        starts = [0]
        units = 0
        for char in self.text:
            units += 2 if ord(char) > 0xFFFF else 1
            if char == "\n":
                starts.append(units)
        object.__setattr__(self, "_line_starts", tuple(starts))
        object.__setattr__(self, "_length", units)

    @property
    def uri(self) -> str:
        return self.path.as_uri()

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Convert a UTF-16 offset into a position, clamped to the document."""
        offset = max(0, min(offset, self._length))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line=line, character=offset - self._line_starts[line])


class FileSystemWorkspace:
    """Workspace made of one or more root folders on the local filesystem."""

    def __init__(self, roots: list[Path] | tuple[Path, ...]) -> None:
        self._roots = [root.resolve() for root in roots]

    @property
    def roots(self) -> list[Path]:
        return list(self._roots)

    def find_workspace_root(self, path: str) -> str | None:
        """Return the deepest workspace root containing ``path``."""
        target = Path(path)
        matches = [root for root in self._roots if target.is_relative_to(root)]
        if not matches:
            return None
        return str(max(matches, key=lambda root: len(root.parts)))

    async def open_document(self, path: str) -> TextDocument:
        """Read ``path`` off the event loop. Raises ``OSError`` if it cannot be read."""
        file_path = Path(path)
        text = await asyncio.to_thread(file_path.read_text, encoding="utf-8", errors="replace")
        logger.debug("Opened %s (%d chars)", file_path, len(text))
        return TextDocument(path=file_path, text=text)

    def to_display_range(self, document: TextDocument, offset: int, length: int) -> Range:
        return Range(
            start=document.position_at(offset),
            end=document.position_at(offset + length),
        )
