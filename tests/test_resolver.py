"""Tests for local specifier resolution."""

from pathlib import Path

from depgraph.analysis.resolver import resolve_local
from depgraph.scanner.filesystem import MemoryFileSystem


def _fs(*paths):
    return MemoryFileSystem({p: "" for p in paths})


def test_exact_file():
    fs = _fs("/root/src/index.ts", "/root/src/util.js")
    assert resolve_local("./util.js", Path("/root/src/index.ts"), fs) == Path("/root/src/util.js")


def test_extension_is_appended():
    fs = _fs("/root/src/index.ts", "/root/src/util.ts")
    assert resolve_local("./util", Path("/root/src/index.ts"), fs) == Path("/root/src/util.ts")


def test_extension_order_is_fixed():
    fs = _fs("/root/src/index.ts", "/root/src/util.js", "/root/src/util.ts", "/root/src/util.tsx")
    assert resolve_local("./util", Path("/root/src/index.ts"), fs) == Path("/root/src/util.ts")


def test_directory_index():
    fs = _fs("/root/src/index.ts", "/root/src/lib/index.ts")
    assert resolve_local("./lib", Path("/root/src/index.ts"), fs) == Path("/root/src/lib/index.ts")


def test_sibling_file_beats_directory_index():
    fs = _fs("/root/src/index.ts", "/root/src/lib.js", "/root/src/lib/index.ts")
    assert resolve_local("./lib", Path("/root/src/index.ts"), fs) == Path("/root/src/lib.js")


def test_parent_directory():
    fs = _fs("/root/src/a/b.ts", "/root/src/shared.ts")
    assert resolve_local("../shared", Path("/root/src/a/b.ts"), fs) == Path("/root/src/shared.ts")


def test_absolute_specifier():
    fs = _fs("/root/src/index.ts", "/opt/lib/x.ts")
    assert resolve_local("/opt/lib/x", Path("/root/src/index.ts"), fs) == Path("/opt/lib/x.ts")


def test_not_found():
    fs = _fs("/root/src/index.ts")
    assert resolve_local("./missing", Path("/root/src/index.ts"), fs) is None


def test_directory_without_index_is_not_found():
    fs = _fs("/root/src/index.ts", "/root/src/empty/readme.md")
    assert resolve_local("./empty", Path("/root/src/index.ts"), fs) is None


def test_real_filesystem(tmp_path):
    (tmp_path / "src" / "lib").mkdir(parents=True)
    (tmp_path / "src" / "index.ts").write_text("")
    (tmp_path / "src" / "lib" / "index.tsx").write_text("")
    found = resolve_local("./lib", tmp_path / "src" / "index.ts")
    assert found == tmp_path / "src" / "lib" / "index.tsx"
