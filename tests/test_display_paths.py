"""Tests for display path canonicalization."""

from __future__ import annotations

from pathlib import Path

from dartsym.models.paths import PackageReference, UnknownPath, WorkspaceRelative
from dartsym.services.display_paths import canonicalize_path, display_path


class TestWorkspaceRelative:
    def test_file_under_root(self, tmp_path: Path) -> None:
        root = tmp_path / "ws"
        result = canonicalize_path(str(root / "lib" / "foo.dart"), str(root))
        assert result == WorkspaceRelative("lib/foo.dart")
        assert result.display == "lib/foo.dart"

    def test_file_outside_root_falls_through(self) -> None:
        result = canonicalize_path("/elsewhere/lib/foo.dart", "/ws", sep="/")
        assert isinstance(result, UnknownPath)

    def test_sibling_with_common_prefix_is_not_inside(self) -> None:
        assert display_path("/ws-other/lib/a.dart", "/ws", sep="/") is None

    def test_windows_separators(self) -> None:
        result = canonicalize_path(r"C:\src\app\lib\main.dart", r"C:\src\app", sep="\\")
        assert result == WorkspaceRelative("lib/main.dart")


class TestPackageReference:
    def test_hosted_package(self) -> None:
        result = canonicalize_path(
            "/cache/hosted/pub.dev/collection-1.15.0/lib/src/a.dart", None, sep="/"
        )
        assert result == PackageReference(name="collection", path="src/a.dart")
        assert result.display == "package:collection/src/a.dart"

    def test_git_package(self) -> None:
        assert (
            display_path("/home/me/.pub-cache/git/http-0.13.0/lib/http.dart", sep="/")
            == "package:http/http.dart"
        )

    def test_path_without_lib_prefix(self) -> None:
        assert (
            display_path("/cache/hosted/pub.dev/args-2.4.2/bin/tool.dart", sep="/")
            == "package:args/bin/tool.dart"
        )

    def test_underscored_name(self) -> None:
        assert (
            display_path("/cache/hosted/pub.dev/flutter_lints-3.0.1/lib/x.dart", sep="/")
            == "package:flutter_lints/x.dart"
        )

    def test_windows_pub_cache(self) -> None:
        path = r"C:\Users\me\AppData\Local\Pub\Cache\hosted\pub.dev\path-1.9.0\lib\src\context.dart"
        assert display_path(path, sep="\\") == "package:path/src/context.dart"

    def test_workspace_match_wins_over_package_layout(self) -> None:
        path = "/cache/hosted/pub.dev/collection-1.15.0/lib/src/a.dart"
        assert display_path(path, "/cache/hosted/pub.dev/collection-1.15.0", sep="/") == (
            "lib/src/a.dart"
        )


class TestUnknownPath:
    def test_unrelated_path(self) -> None:
        result = canonicalize_path("/usr/lib/dart/sdk/core.dart", None, sep="/")
        assert isinstance(result, UnknownPath)
        assert result.display is None

    def test_hosted_without_registry_segment(self) -> None:
        assert display_path("/cache/hosted/collection-1.15.0", sep="/") is None
