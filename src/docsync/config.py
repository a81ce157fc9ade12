import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

config = {
    # Source layout, relative to the workspace root
    "npm_packages_dir": "NPM_Package",
    "composer_packages_dir": "COMPOSER_Package",
    "root_package_dir": "Alert_Box",
    "root_package_manifest": "package.json",
    "readme_name": "README.md",
    # Destination layout, relative to the docs root
    "npm_docs_dir": "npm-packages",
    "composer_docs_dir": "composer-packages",
    "category_file_name": "_category_.json",
    "sidebar_position": 1,
    # Directory filters
    "hidden_prefix": ".",
    "copy_marker": " copy",
    "excluded_dirs": frozenset({"node_modules", "vendor", "temp", "project", "project_tmp"}),
    "categories": {
        "npm": {"label": "NPM Packages", "position": 1},
        "composer": {"label": "Composer Packages", "position": 2},
    },
}

WORKSPACE_ROOT_ENV = "DOCSYNC_WORKSPACE_ROOT"
DOCS_ROOT_ENV = "DOCSYNC_DOCS_ROOT"


@dataclass(frozen=True)
class SyncPaths:
    """Source and destination directories for one sync run."""

    workspace_root: Path
    npm_packages_dir: Path
    composer_packages_dir: Path
    root_package_dir: Path
    npm_docs_dir: Path
    composer_docs_dir: Path

    @classmethod
    def from_roots(cls, workspace_root: Path, docs_root: Path) -> "SyncPaths":
        workspace_root = Path(workspace_root)
        docs_root = Path(docs_root)
        return cls(
            workspace_root=workspace_root,
            npm_packages_dir=workspace_root / config["npm_packages_dir"],
            composer_packages_dir=workspace_root / config["composer_packages_dir"],
            root_package_dir=workspace_root / config["root_package_dir"],
            npm_docs_dir=docs_root / config["npm_docs_dir"],
            composer_docs_dir=docs_root / config["composer_docs_dir"],
        )

    @classmethod
    def from_scripts_dir(cls, scripts_dir: Path) -> "SyncPaths":
        """Resolve paths for a build hook living in ``<repo>/docs/docs/scripts``.

        The workspace root is four levels above the scripts directory and the
        generated pages go to the sibling ``packages`` directory.
        """
        scripts_dir = Path(scripts_dir).resolve()
        return cls.from_roots(scripts_dir.parents[3], scripts_dir.parent / "packages")

    @classmethod
    def from_env(cls, default_workspace: Path, default_docs: Optional[Path] = None) -> "SyncPaths":
        """Build paths from environment overrides, falling back to the given defaults."""
        workspace_root = Path(os.environ.get(WORKSPACE_ROOT_ENV, str(default_workspace)))
        docs_env = os.environ.get(DOCS_ROOT_ENV)
        if docs_env:
            docs_root = Path(docs_env)
        elif default_docs is not None:
            docs_root = Path(default_docs)
        else:
            docs_root = default_docs_root(workspace_root)
        return cls.from_roots(workspace_root, docs_root)

    @property
    def docs_dirs(self):
        return [self.npm_docs_dir, self.composer_docs_dir]


def default_docs_root(workspace_root: Path) -> Path:
    return Path(workspace_root) / "docs" / "docs" / "packages"
