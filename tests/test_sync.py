import json
from io import StringIO

import pytest
from rich.console import Console

from docsync.config import SyncPaths
from docsync.packages import FlatPackage, PackageDescriptor
from docsync.sync import ReadmeSyncer, copy_readme_with_frontmatter, ensure_directories, write_category_file


@pytest.fixture
def console():
    return Console(file=StringIO(), width=200)


@pytest.fixture
def syncer(paths, console):
    return ReadmeSyncer(paths, console=console)


def test_ensure_directories_creates_missing(tmp_path):
    existing = tmp_path / "existing"
    existing.mkdir()
    missing = tmp_path / "a" / "b" / "c"

    created = ensure_directories(existing, missing)

    assert created == [missing]
    assert missing.is_dir()


def test_copy_readme_missing_source(tmp_path):
    dest = tmp_path / "out.md"
    assert copy_readme_with_frontmatter(tmp_path / "README.md", dest, "pkg", "NPM") is False
    assert not dest.exists()


def test_copy_readme_preserves_line_endings(tmp_path):
    src = tmp_path / "README.md"
    src.write_bytes(b"# Title\r\n\r\nBody\r\n")
    dest = tmp_path / "out.md"

    assert copy_readme_with_frontmatter(src, dest, "pkg", "NPM") is True
    assert dest.read_bytes().endswith(b"---\n\n# Title\r\n\r\nBody\r\n")
    assert b'title: "Title"\n' in dest.read_bytes()


def test_write_category_file_is_write_once(tmp_path):
    path = tmp_path / "_category_.json"

    assert write_category_file(path, "NPM Packages", 1) is True
    assert json.loads(path.read_text()) == {
        "label": "NPM Packages",
        "position": 1,
        "collapsible": True,
        "collapsed": False,
    }

    original = path.read_text()
    assert write_category_file(path, "Renamed", 9) is False
    assert path.read_text() == original


def test_run_copies_readmes(syncer, paths):
    result = syncer.run()

    assert result.npm_count == 3
    assert result.composer_count == 2
    assert sorted(p.name for p in paths.npm_docs_dir.glob("*.md")) == ["Alert_Box.md", "alert-box.md", "my-cool-lib.md"]
    assert sorted(p.name for p in paths.composer_docs_dir.glob("*.md")) == ["nethmi-logger.md", "package-01.md"]
    assert [d.name for d in result.skipped] == ["no-readme"]


def test_run_document_contents(syncer, paths):
    syncer.run()

    alert = (paths.npm_docs_dir / "alert-box.md").read_text(encoding="utf-8")
    assert alert == (
        "---\n"
        "sidebar_position: 1\n"
        'title: "Alert Box"\n'
        'description: "Documentation for alert-box NPM package"\n'
        "---\n\n"
        "# Alert Box\n\nShows alerts.\n"
    )

    cool = (paths.npm_docs_dir / "my-cool-lib.md").read_text(encoding="utf-8")
    assert 'title: "My Cool Lib"' in cool

    nested = (paths.composer_docs_dir / "nethmi-logger.md").read_text(encoding="utf-8")
    assert 'description: "Documentation for nethmi/logger Composer package"' in nested


def test_run_never_writes_excluded_packages(syncer, paths):
    syncer.run()

    written = {p.stem for p in paths.npm_docs_dir.glob("*.md")} | {p.stem for p in paths.composer_docs_dir.glob("*.md")}
    for name in ("node_modules", "temp", ".cache", "vendor-acme", "project_tmp", "package-01 copy", "no-readme", "nethmi-mailer"):
        assert name not in written


def test_run_is_idempotent(paths, console):
    ReadmeSyncer(paths, console=console).run()
    first = {p: p.read_bytes() for p in paths.npm_docs_dir.parent.rglob("*") if p.is_file()}

    ReadmeSyncer(paths, console=console).run()
    second = {p: p.read_bytes() for p in paths.npm_docs_dir.parent.rglob("*") if p.is_file()}

    assert first == second


def test_run_creates_category_files_once(paths, console):
    result = ReadmeSyncer(paths, console=console).run()
    assert len(result.categories_created) == 2

    category = paths.composer_docs_dir / "_category_.json"
    category.write_text('{"label": "Custom"}')

    result = ReadmeSyncer(paths, console=console).run()
    assert result.categories_created == []
    assert category.read_text() == '{"label": "Custom"}'


def test_run_with_missing_sources(tmp_path, console):
    paths = SyncPaths.from_roots(tmp_path / "empty", tmp_path / "docs")
    result = ReadmeSyncer(paths, console=console).run()

    assert (result.npm_count, result.composer_count) == (0, 0)
    assert paths.npm_docs_dir.is_dir()
    assert paths.composer_docs_dir.is_dir()
    assert "directory not found" in console.file.getvalue()


def test_collisions_keep_first_writer(syncer, paths, tmp_path):
    paths.npm_docs_dir.mkdir(parents=True)
    first_src = tmp_path / "first" / "README.md"
    second_src = tmp_path / "second" / "README.md"
    for src, text in ((first_src, "# First\n"), (second_src, "# Second\n")):
        src.parent.mkdir()
        src.write_text(text)

    dest = paths.npm_docs_dir / "same.md"
    first = PackageDescriptor(FlatPackage("same"), first_src, dest, "NPM")
    second = PackageDescriptor(FlatPackage("same"), second_src, dest, "NPM")

    assert syncer._sync_all([first, second]) == 1
    assert syncer.result.collisions == [second]
    assert dest.read_text().endswith("# First\n")


def test_summary_output(syncer, console):
    syncer.run()
    output = console.file.getvalue()

    assert "Synced 3 NPM package(s)" in output
    assert "Synced 2 Composer package(s)" in output
    assert "Copied: nethmi/logger -> nethmi-logger.md" in output
