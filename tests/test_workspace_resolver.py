"""
Unit Tests — Workspace Root Resolver
====================================
Default-base selection from host state, via StaticWorkspace and a
hand-rolled host object implementing the HostWorkspace protocol.
"""
import pytest
from typing import Optional

from pathview.core.platform import POSIX_FLAVOR, WINDOWS_FLAVOR
from pathview.models.workspace import WorkspaceSnapshot
from pathview.workspace.resolver import (
    HostWorkspace,
    StaticWorkspace,
    find_owning_root,
    resolve_base_for_context,
    resolve_default_base,
)


class FakeEditor:
    """Mimics an editor host: one focused document, ordered folders."""

    def __init__(self, active: Optional[str], folders: list[str]):
        self.active = active
        self.folders = folders
        self.calls = 0

    def get_active_document_path(self) -> Optional[str]:
        self.calls += 1
        return self.active

    def list_root_directories(self) -> list[str]:
        return self.folders


@pytest.fixture
def workspace():
    return StaticWorkspace.of(
        roots=["/test/workspace", "/test/workspaceFolder"],
        active_document="/test/workspaceFolder/file.ts",
    )


# ---------------------------------------------------------------------------
# 1. resolve_default_base
# ---------------------------------------------------------------------------
class TestResolveDefaultBase:

    def test_root_of_active_document(self, workspace):
        assert resolve_default_base(workspace, "/default", POSIX_FLAVOR) == "/test/workspaceFolder"

    def test_fallback_when_nothing_open(self):
        ws = StaticWorkspace()
        assert resolve_default_base(ws, "/default/path", POSIX_FLAVOR) == "/default/path"

    def test_first_root_without_active_document(self):
        ws = StaticWorkspace.of(roots=["/test/workspace", "/test/other"])
        assert resolve_default_base(ws, "/default", POSIX_FLAVOR) == "/test/workspace"

    def test_first_root_when_active_document_is_outside(self):
        ws = StaticWorkspace.of(roots=["/test/workspace"], active_document="/tmp/scratch.py")
        assert resolve_default_base(ws, "/default", POSIX_FLAVOR) == "/test/workspace"

    def test_fallback_when_active_document_but_no_roots(self):
        ws = StaticWorkspace.of(active_document="/tmp/scratch.py")
        assert resolve_default_base(ws, "/default", POSIX_FLAVOR) == "/default"

    def test_works_with_any_host(self):
        editor = FakeEditor("/repo/src/app.py", ["/docs", "/repo"])
        assert resolve_default_base(editor, "/default", POSIX_FLAVOR) == "/repo"
        assert editor.calls == 1


# ---------------------------------------------------------------------------
# 2. Root matching
# ---------------------------------------------------------------------------
class TestFindOwningRoot:

    def test_name_prefix_is_not_ownership(self):
        ws = StaticWorkspace.of(roots=["/test/workspace"])
        assert find_owning_root(ws, "/test/workspaceFolder/file.ts", POSIX_FLAVOR) is None

    def test_deepest_root_wins(self):
        ws = StaticWorkspace.of(roots=["/repo", "/repo/packages/core"])
        owner = find_owning_root(ws, "/repo/packages/core/src/a.py", POSIX_FLAVOR)
        assert owner == "/repo/packages/core"

    def test_windows_case_insensitive(self):
        ws = StaticWorkspace.of(roots=["C:\\Work\\Repo"])
        assert find_owning_root(ws, "c:\\work\\repo\\a.ts", WINDOWS_FLAVOR) == "C:\\Work\\Repo"

    def test_posix_case_sensitive(self):
        ws = StaticWorkspace.of(roots=["/Work/Repo"])
        assert find_owning_root(ws, "/work/repo/a.ts", POSIX_FLAVOR) is None

    def test_absent_path(self, workspace):
        assert find_owning_root(workspace, None, POSIX_FLAVOR) is None


# ---------------------------------------------------------------------------
# 3. resolve_base_for_context
# ---------------------------------------------------------------------------
class TestResolveBaseForContext:

    def test_context_wins_over_active_document(self, workspace):
        base = resolve_base_for_context(workspace, "/test/workspace/lib/x.ts", "/default", POSIX_FLAVOR)
        assert base == "/test/workspace"

    def test_no_context_uses_default_resolution(self, workspace):
        base = resolve_base_for_context(workspace, None, "/default", POSIX_FLAVOR)
        assert base == "/test/workspaceFolder"

    def test_context_outside_roots(self):
        ws = StaticWorkspace()
        assert resolve_base_for_context(ws, "/elsewhere/a.txt", "/default", POSIX_FLAVOR) == "/default"


# ---------------------------------------------------------------------------
# 4. Host protocol and snapshot model
# ---------------------------------------------------------------------------
class TestHostProtocol:

    def test_static_workspace_satisfies_protocol(self):
        assert isinstance(StaticWorkspace(), HostWorkspace)

    def test_fake_editor_satisfies_protocol(self):
        assert isinstance(FakeEditor(None, []), HostWorkspace)

    def test_snapshot_drops_blank_roots(self):
        snapshot = WorkspaceSnapshot(roots=["/a", "", "  ", "/b"])
        assert snapshot.roots == ["/a", "/b"]

    def test_static_workspace_returns_copy_of_roots(self):
        ws = StaticWorkspace.of(roots=["/a"])
        ws.list_root_directories().append("/b")
        assert ws.list_root_directories() == ["/a"]
