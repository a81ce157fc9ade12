"""
Discovery of package directories under the NPM and Composer source roots.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from loguru import logger

from docsync.config import SyncPaths, config

NPM = "NPM"
COMPOSER = "Composer"


@dataclass(frozen=True)
class FlatPackage:
    name: str

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def doc_stem(self) -> str:
        return self.name


@dataclass(frozen=True)
class NestedPackage:
    """A package one level below a vendor directory, e.g. ``nethmi/logger``."""

    parent: str
    child: str

    @property
    def display_name(self) -> str:
        return f"{self.parent}/{self.child}"

    @property
    def doc_stem(self) -> str:
        return f"{self.parent}-{self.child}"


PackageName = Union[FlatPackage, NestedPackage]


@dataclass(frozen=True)
class PackageDescriptor:
    package: PackageName
    readme_path: Path
    doc_path: Path
    package_type: str

    @property
    def name(self) -> str:
        return self.package.display_name


def is_excluded(name: str) -> bool:
    """Check whether a directory name should never be treated as a package."""
    return (
        name.startswith(config["hidden_prefix"])
        or name in config["excluded_dirs"]
        or config["copy_marker"] in name
    )


def list_package_dirs(root: Path) -> List[str]:
    """Return the sorted names of candidate package directories directly under ``root``."""
    root = Path(root)
    if not root.is_dir():
        return []
    return sorted(entry.name for entry in root.iterdir() if entry.is_dir() and not is_excluded(entry.name))


def _descriptor(package: PackageName, source_dir: Path, docs_dir: Path, package_type: str) -> PackageDescriptor:
    return PackageDescriptor(
        package=package,
        readme_path=source_dir / config["readme_name"],
        doc_path=docs_dir / f"{package.doc_stem}.md",
        package_type=package_type,
    )


def discover_npm_packages(paths: SyncPaths) -> List[PackageDescriptor]:
    """Collect NPM package descriptors, including the root-level NPM package.

    Every surviving directory gets a descriptor even if it has no README, so
    the copier can report the missing file. The root-level package is only
    included when it carries both a ``package.json`` and a README.
    """
    descriptors = []

    if paths.npm_packages_dir.is_dir():
        for name in list_package_dirs(paths.npm_packages_dir):
            descriptors.append(_descriptor(FlatPackage(name), paths.npm_packages_dir / name, paths.npm_docs_dir, NPM))
    else:
        logger.warning(f"NPM packages directory not found: {paths.npm_packages_dir}")

    root_dir = paths.root_package_dir
    manifest = root_dir / config["root_package_manifest"]
    readme = root_dir / config["readme_name"]
    if root_dir.is_dir():
        if manifest.exists() and readme.exists():
            descriptors.append(_descriptor(FlatPackage(root_dir.name), root_dir, paths.npm_docs_dir, NPM))
        else:
            logger.debug(f"Skipping {root_dir.name}: not an NPM package with a README")

    return descriptors


def discover_composer_packages(paths: SyncPaths) -> List[PackageDescriptor]:
    """Collect Composer package descriptors for flat and vendor-nested packages.

    Only packages that actually have a README are returned.
    """
    root = paths.composer_packages_dir
    if not root.is_dir():
        logger.warning(f"Composer packages directory not found: {root}")
        return []

    parents = list_package_dirs(root)
    descriptors = []

    for name in parents:
        descriptor = _descriptor(FlatPackage(name), root / name, paths.composer_docs_dir, COMPOSER)
        if descriptor.readme_path.exists():
            descriptors.append(descriptor)

    for parent in parents:
        for child in list_package_dirs(root / parent):
            descriptor = _descriptor(NestedPackage(parent, child), root / parent / child, paths.composer_docs_dir, COMPOSER)
            if descriptor.readme_path.exists():
                descriptors.append(descriptor)

    return descriptors
