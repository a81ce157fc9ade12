#!/usr/bin/env python3
"""Build hook that syncs package READMEs into the Docusaurus docs tree.

Meant to live in ``<repo>/docs/docs/scripts``: the workspace root and the
output ``packages`` directory are resolved relative to this file, unless
``DOCSYNC_WORKSPACE_ROOT`` / ``DOCSYNC_DOCS_ROOT`` override them.
"""

from pathlib import Path

from docsync.config import SyncPaths
from docsync.logging_setup import configure_logging
from docsync.sync import ReadmeSyncer


def main():
    configure_logging()
    defaults = SyncPaths.from_scripts_dir(Path(__file__).parent)
    paths = SyncPaths.from_env(defaults.workspace_root, defaults.npm_docs_dir.parent)
    ReadmeSyncer(paths).run()


if __name__ == "__main__":
    main()
