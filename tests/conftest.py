from pathlib import Path

import pytest

from docsync.config import SyncPaths


def write_package(directory: Path, readme=None, manifest=None):
    directory.mkdir(parents=True, exist_ok=True)
    if readme is not None:
        (directory / "README.md").write_text(readme, encoding="utf-8")
    if manifest is not None:
        (directory / manifest).write_text("{}", encoding="utf-8")
    return directory


@pytest.fixture
def workspace(tmp_path):
    """A small monorepo with NPM, Composer and root-level packages."""
    root = tmp_path / "workspace"
    npm = root / "NPM_Package"
    composer = root / "COMPOSER_Package"

    write_package(npm / "alert-box", readme="# Alert Box\n\nShows alerts.\n")
    write_package(npm / "my-cool-lib", readme="Just some text, no heading.\n")
    write_package(npm / "no-readme")
    write_package(npm / "node_modules", readme="# Dependency\n")
    write_package(npm / "temp", readme="# Temp\n")
    write_package(npm / ".cache", readme="# Hidden\n")

    write_package(composer / "package-01", readme="# Package 01\n")
    write_package(composer / "nethmi" / "logger", readme="# Logger\n")
    write_package(composer / "nethmi" / "mailer")
    write_package(composer / "vendor" / "acme", readme="# Vendored\n")
    write_package(composer / "project_tmp", readme="# Project tmp\n")
    write_package(composer / "package-01 copy", readme="# Copy\n")

    write_package(root / "Alert_Box", readme="# Root Alert Box\n", manifest="package.json")
    return root


@pytest.fixture
def paths(workspace, tmp_path):
    return SyncPaths.from_roots(workspace, tmp_path / "site" / "packages")
