"""Shared fixtures for dartsym tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from dartsym.data.documents import FileSystemWorkspace, TextDocument
from dartsym.models.declarations import ElementDeclarationsResult

SAMPLE_SOURCE = """class Foo {
  Foo();
  Foo.named(this.value);

  final String value;

  void bar(int x) {}
}
"""


class FakeIndex:
    """Declaration index that records calls and returns a canned result."""

    def __init__(self, result: ElementDeclarationsResult | None = None) -> None:
        self.result = result or ElementDeclarationsResult()
        self.calls: list[tuple[str, int]] = []

    async def search_element_declarations(
        self, pattern: str, max_results: int
    ) -> ElementDeclarationsResult:
        self.calls.append((pattern, max_results))
        return self.result


class CountingWorkspace(FileSystemWorkspace):
    """Filesystem workspace that counts document opens."""

    def __init__(self, roots: list[Path]) -> None:
        super().__init__(roots)
        self.opened: list[str] = []

    async def open_document(self, path: str) -> TextDocument:
        self.opened.append(path)
        return await super().open_document(path)


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """A small Dart project with one source file."""
    root = tmp_path / "my_app"
    (root / "lib").mkdir(parents=True)
    (root / "lib" / "foo.dart").write_text(SAMPLE_SOURCE)
    return root


@pytest.fixture
def workspace(workspace_root: Path) -> CountingWorkspace:
    return CountingWorkspace([workspace_root])


@pytest.fixture
def foo_file(workspace_root: Path) -> str:
    return str((workspace_root / "lib" / "foo.dart").resolve())


@pytest.fixture
def sample_result(foo_file: str) -> ElementDeclarationsResult:
    """Declarations as the analysis server would report them for ``foo.dart``."""
    bar_offset = SAMPLE_SOURCE.index("void bar")
    return ElementDeclarationsResult.model_validate(
        {
            "declarations": [
                {
                    "name": "Foo",
                    "kind": "CLASS",
                    "fileIndex": 0,
                    "offset": 6,
                    "line": 1,
                    "column": 7,
                    "codeOffset": 0,
                    "codeLength": len(SAMPLE_SOURCE) - 1,
                },
                {
                    "name": "named",
                    "kind": "CONSTRUCTOR",
                    "fileIndex": 0,
                    "offset": 27,
                    "line": 3,
                    "column": 7,
                    "codeOffset": 23,
                    "codeLength": 22,
                    "className": "Foo",
                    "parameters": "(this.value)",
                },
                {
                    "name": "bar",
                    "kind": "METHOD",
                    "fileIndex": 0,
                    "offset": bar_offset + 5,
                    "line": 7,
                    "column": 8,
                    "codeOffset": bar_offset,
                    "codeLength": len("void bar(int x) {}"),
                    "className": "Foo",
                    "parameters": "(int x)",
                },
                {
                    "name": "listEquals",
                    "kind": "FUNCTION",
                    "fileIndex": 1,
                    "offset": 120,
                    "line": 10,
                    "column": 6,
                    "codeOffset": 100,
                    "codeLength": 40,
                    "parameters": "<T>(List<T>? a, List<T>? b)",
                },
            ],
            "files": [
                foo_file,
                "/home/me/.pub-cache/hosted/pub.dev/collection-1.18.0/lib/src/equality.dart",
            ],
        }
    )
