"""
Copy package README files into the documentation tree.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger
from rich.console import Console

from docsync.config import SyncPaths, config
from docsync.frontmatter import compose_document
from docsync.packages import COMPOSER, NPM, PackageDescriptor, discover_composer_packages, discover_npm_packages

RULE = "─" * 41


def ensure_directories(*dirs: Path) -> List[Path]:
    """Create any missing directory (with parents) and return the ones created."""
    created = []
    for directory in dirs:
        directory = Path(directory)
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created directory: {directory}")
            created.append(directory)
    return created


def _read_verbatim(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write_verbatim(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def copy_readme_with_frontmatter(src: Path, dest: Path, package_name: str, package_type: str) -> bool:
    """Copy a README to ``dest`` with Docusaurus frontmatter prepended.

    Returns False without touching ``dest`` if the README does not exist.
    Write errors are not caught.
    """
    src = Path(src)
    if not src.exists():
        logger.warning(f"README not found: {src}")
        return False

    content = _read_verbatim(src)
    _write_verbatim(Path(dest), compose_document(content, package_name, package_type))
    logger.debug(f"Copied {src} -> {dest}")
    return True


def write_category_file(path: Path, label: str, position: int) -> bool:
    """Write a ``_category_.json`` descriptor unless one already exists."""
    path = Path(path)
    if path.exists():
        return False

    category = {
        "label": label,
        "position": position,
        "collapsible": True,
        "collapsed": False,
    }
    path.write_text(json.dumps(category, indent=2), encoding="utf-8")
    logger.info(f"Created category file: {path}")
    return True


@dataclass
class SyncResult:
    npm_count: int = 0
    composer_count: int = 0
    copied: List[Path] = field(default_factory=list)
    skipped: List[PackageDescriptor] = field(default_factory=list)
    collisions: List[PackageDescriptor] = field(default_factory=list)
    categories_created: List[Path] = field(default_factory=list)


class ReadmeSyncer:
    """Runs one README sync over a workspace."""

    def __init__(self, paths: SyncPaths, console: Optional[Console] = None):
        self.paths = paths
        self.console = console or Console()
        self.result = SyncResult()
        self._written: Dict[Path, PackageDescriptor] = {}

    def create_category_files(self) -> List[Path]:
        created = []
        targets = {
            "npm": self.paths.npm_docs_dir,
            "composer": self.paths.composer_docs_dir,
        }
        for key, docs_dir in targets.items():
            category = config["categories"][key]
            path = docs_dir / config["category_file_name"]
            if write_category_file(path, category["label"], category["position"]):
                self.console.print(f"[green]✅ Created {category['label']} category file[/green]")
                created.append(path)
        self.result.categories_created.extend(created)
        return created

    def _sync_descriptor(self, descriptor: PackageDescriptor) -> bool:
        previous = self._written.get(descriptor.doc_path)
        if previous is not None:
            logger.warning(
                f"Skipping {descriptor.name}: {descriptor.doc_path.name} was already written for {previous.name}"
            )
            self.result.collisions.append(descriptor)
            return False

        if not copy_readme_with_frontmatter(descriptor.readme_path, descriptor.doc_path, descriptor.name, descriptor.package_type):
            self.console.print(f"[yellow]⚠️  README not found: {descriptor.readme_path}[/yellow]")
            self.result.skipped.append(descriptor)
            return False

        self._written[descriptor.doc_path] = descriptor
        self.result.copied.append(descriptor.doc_path)
        self.console.print(f"[green]✅ Copied: {descriptor.name} -> {descriptor.doc_path.name}[/green]")
        return True

    def _sync_all(self, descriptors: List[PackageDescriptor]) -> int:
        return sum(1 for descriptor in descriptors if self._sync_descriptor(descriptor))

    def sync_npm_packages(self) -> int:
        self.console.print("\n[bold]📦 Syncing NPM Packages...[/bold]")
        self.console.print(RULE)

        if not self.paths.npm_packages_dir.is_dir():
            self.console.print(f"[yellow]⚠️  NPM packages directory not found: {self.paths.npm_packages_dir}[/yellow]")

        count = self._sync_all(discover_npm_packages(self.paths))
        self.result.npm_count += count
        self.console.print(f"\n[green]✅ Synced {count} {NPM} package(s)[/green]\n")
        return count

    def sync_composer_packages(self) -> int:
        self.console.print("\n[bold]📦 Syncing Composer Packages...[/bold]")
        self.console.print(RULE)

        if not self.paths.composer_packages_dir.is_dir():
            self.console.print(
                f"[yellow]⚠️  Composer packages directory not found: {self.paths.composer_packages_dir}[/yellow]"
            )
            return 0

        count = self._sync_all(discover_composer_packages(self.paths))
        self.result.composer_count += count
        self.console.print(f"\n[green]✅ Synced {count} {COMPOSER} package(s)[/green]\n")
        return count

    def run(self) -> SyncResult:
        """Ensure output dirs, write category files, then sync NPM and Composer READMEs."""
        self.result = SyncResult()
        self._written = {}

        self.console.print("[bold]🚀 Starting README sync...[/bold]")
        self.console.print(RULE)

        ensure_directories(*self.paths.docs_dirs)
        self.create_category_files()
        self.sync_npm_packages()
        self.sync_composer_packages()

        self.console.print("[bold]✨ README sync complete![/bold]")
        self.console.print(f"   {NPM} packages: {self.result.npm_count}")
        self.console.print(f"   {COMPOSER} packages: {self.result.composer_count}")
        if self.result.collisions:
            self.console.print(f"[yellow]   Skipped {len(self.result.collisions)} colliding package(s)[/yellow]")
        self.console.print(RULE)
        return self.result
