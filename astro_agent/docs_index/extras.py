"""Overlay of user-maintained docs onto the fetched tree."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

EXTRA_DOCS_DIR_NAME = ".astro-docs-extra"


def merge_extra_docs(
    project_dir: str,
    docs_path: Path,
    extra_dir_name: str = EXTRA_DOCS_DIR_NAME,
) -> bool:
    """
    Copy every entry of the extras directory into the docs directory.

    Top-level entries replace same-named entries in the docs tree
    wholesale; directories are not deep-merged.

    Args:
        project_dir: Project working directory
        docs_path: Fetched docs directory
        extra_dir_name: Name of the extras directory under project_dir

    Returns:
        True if at least one entry was merged
    """
    extra_path = Path(project_dir) / extra_dir_name
    if not extra_path.is_dir():
        return False

    docs_path = Path(docs_path)
    docs_path.mkdir(parents=True, exist_ok=True)

    merged = False
    for source in sorted(extra_path.iterdir()):
        destination = docs_path / source.name

        if destination.is_dir() and not destination.is_symlink():
            shutil.rmtree(destination)
        elif destination.exists() or destination.is_symlink():
            destination.unlink()

        if source.is_dir():
            shutil.copytree(source, destination)
        else:
            shutil.copy2(source, destination)

        logger.debug("Merged extra docs entry %s", source.name)
        merged = True

    return merged
