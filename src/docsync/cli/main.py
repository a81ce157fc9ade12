"""Command line interface for docsync."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from docsync.config import DOCS_ROOT_ENV, WORKSPACE_ROOT_ENV, SyncPaths, default_docs_root
from docsync.logging_setup import configure_logging
from docsync.packages import discover_composer_packages, discover_npm_packages
from docsync.sync import ReadmeSyncer

app = typer.Typer(name="docsync", help="Sync package README files into the Docusaurus docs tree", add_completion=False)
console = Console()


def resolve_paths(workspace_root: Optional[Path], docs_root: Optional[Path]) -> SyncPaths:
    workspace_root = workspace_root or Path.cwd()
    return SyncPaths.from_roots(workspace_root, docs_root or default_docs_root(workspace_root))


WorkspaceOption = typer.Option(
    None,
    "--workspace-root",
    "-w",
    envvar=WORKSPACE_ROOT_ENV,
    exists=True,
    file_okay=False,
    help="Directory holding NPM_Package, COMPOSER_Package and Alert_Box",
)
DocsOption = typer.Option(
    None,
    "--docs-root",
    "-d",
    envvar=DOCS_ROOT_ENV,
    file_okay=False,
    help="Directory receiving npm-packages/ and composer-packages/",
)


@app.command("sync")
def sync(
    workspace_root: Optional[Path] = WorkspaceOption,
    docs_root: Optional[Path] = DocsOption,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Copy every package README into the docs tree."""
    configure_logging(verbose)
    paths = resolve_paths(workspace_root, docs_root)
    ReadmeSyncer(paths, console=console).run()


@app.command("discover")
def discover(
    workspace_root: Optional[Path] = WorkspaceOption,
    docs_root: Optional[Path] = DocsOption,
):
    """List the packages a sync would process without writing anything."""
    configure_logging(False)
    paths = resolve_paths(workspace_root, docs_root)

    table = Table(title="Discovered packages")
    table.add_column("Type")
    table.add_column("Package")
    table.add_column("README")
    table.add_column("Destination")

    for descriptor in discover_npm_packages(paths) + discover_composer_packages(paths):
        has_readme = "yes" if descriptor.readme_path.exists() else "[yellow]missing[/yellow]"
        table.add_row(descriptor.package_type, descriptor.name, has_readme, descriptor.doc_path.name)

    console.print(table)


def main():
    """Main entry point for the docsync CLI."""
    app()


if __name__ == "__main__":
    main()
