import os
from pathlib import Path

import pytest

from pkgsync.collect.artifacts import collect_artifacts


EXTS = [".wasm", ".js", ".ts"]


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")


def test_collect_filters_by_extension(tmp_path: Path):
    for rel in ("a.wasm", "sub/b.js", "sub/c.ts", "sub/d.txt", "README"):
        _touch(tmp_path / rel)

    found = collect_artifacts(str(tmp_path), EXTS)
    rel = sorted(os.path.relpath(p, tmp_path) for p in found)
    assert rel == ["a.wasm", os.path.join("sub", "b.js"), os.path.join("sub", "c.ts")]


def test_collect_descends_any_depth_without_duplicates(tmp_path: Path):
    expected = set()
    for rel in ("x.js", "a/x.js", "a/b/x.js", "a/b/c/d/x.wasm", "a/b/c/d/skip.map"):
        _touch(tmp_path / rel)
        if not rel.endswith(".map"):
            expected.add(str(tmp_path / rel))

    found = collect_artifacts(str(tmp_path), EXTS)
    assert len(found) == len(set(found))
    assert set(found) == expected


def test_collect_keeps_root_prefix(tmp_path: Path):
    _touch(tmp_path / "pkg" / "mod.js")
    found = collect_artifacts(str(tmp_path / "pkg"), EXTS)
    assert found == [os.path.join(str(tmp_path / "pkg"), "mod.js")]


def test_collect_subdirectories_before_current_level(tmp_path: Path):
    _touch(tmp_path / "top.js")
    _touch(tmp_path / "nested" / "inner.js")

    found = collect_artifacts(str(tmp_path), EXTS)
    assert found == [str(tmp_path / "nested" / "inner.js"), str(tmp_path / "top.js")]


def test_collect_uses_last_suffix_only(tmp_path: Path):
    for rel in ("types.d.ts", "bundle.js.map", ".js"):
        _touch(tmp_path / rel)

    found = collect_artifacts(str(tmp_path), EXTS)
    assert found == [str(tmp_path / "types.d.ts")]


def test_collect_skips_directories_named_like_artifacts(tmp_path: Path):
    (tmp_path / "snippets.js").mkdir()
    _touch(tmp_path / "snippets.js" / "inline.js")

    found = collect_artifacts(str(tmp_path), EXTS)
    assert found == [str(tmp_path / "snippets.js" / "inline.js")]


def test_collect_empty_tree(tmp_path: Path):
    assert collect_artifacts(str(tmp_path), EXTS) == []


def test_collect_missing_root_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        collect_artifacts(str(tmp_path / "missing"), EXTS)


def test_collect_root_is_a_file_raises(tmp_path: Path):
    _touch(tmp_path / "file.js")
    with pytest.raises(NotADirectoryError):
        collect_artifacts(str(tmp_path / "file.js"), EXTS)


def test_collect_broken_symlink_raises(tmp_path: Path):
    os.symlink(tmp_path / "nowhere", tmp_path / "dangling.js")
    with pytest.raises(FileNotFoundError):
        collect_artifacts(str(tmp_path), EXTS)


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs a non-root POSIX user")
def test_collect_unreadable_directory_raises(tmp_path: Path):
    locked = tmp_path / "locked"
    _touch(locked / "hidden.js")
    locked.chmod(0o000)
    try:
        with pytest.raises(PermissionError):
            collect_artifacts(str(tmp_path), EXTS)
    finally:
        locked.chmod(0o755)
