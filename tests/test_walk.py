import pytest

from auditor.utils import DirectoryNotFoundError, iter_source_files, resolve_target


def write(path, text="x\n"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_excluded_directories_are_pruned(tmp_path):
    write(tmp_path / "app.js")
    write(tmp_path / "node_modules" / "lib" / "index.js")
    write(tmp_path / ".git" / "config")
    write(tmp_path / "dist" / "bundle.js")
    write(tmp_path / "nested" / "build" / "out.js")

    files = list(iter_source_files(tmp_path))

    assert files == [tmp_path / "app.js"]


def test_extension_filter_and_sorted_order(tmp_path):
    write(tmp_path / "b.ts")
    write(tmp_path / "a.tsx")
    write(tmp_path / "styles.css")
    write(tmp_path / "sub" / "c.js")

    files = list(iter_source_files(tmp_path, extensions=(".tsx", ".ts", ".js")))

    assert [path.relative_to(tmp_path).as_posix() for path in files] == ["a.tsx", "b.ts", "sub/c.js"]


def test_exclude_file_globs(tmp_path):
    write(tmp_path / "server.js")
    write(tmp_path / "server.test.js")
    write(tmp_path / "server.spec.js")

    files = list(iter_source_files(tmp_path, exclude_files=("*test*", "*spec*")))

    assert files == [tmp_path / "server.js"]


def test_empty_tree_yields_nothing(tmp_path):
    assert list(iter_source_files(tmp_path)) == []


def test_resolve_target_prefers_src(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert str(resolve_target()) == "."

    (tmp_path / "src").mkdir()
    assert str(resolve_target()) == "src"


def test_resolve_target_missing_directory(tmp_path):
    missing = tmp_path / "nope"

    with pytest.raises(DirectoryNotFoundError) as excinfo:
        resolve_target(str(missing))

    assert str(excinfo.value) == f"Error: directory '{missing}' not found"


def test_resolve_target_rejects_files(tmp_path):
    target = write(tmp_path / "file.js")

    with pytest.raises(DirectoryNotFoundError):
        resolve_target(str(target))
