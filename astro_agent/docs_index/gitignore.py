"""Keeps the fetched docs directory out of version control."""

import logging
import re
from pathlib import Path

from .models import GitignoreStatus

logger = logging.getLogger(__name__)

GITIGNORE_HEADER = "# astro-agent"
DOCS_DIR_NAME = ".astro-docs"


def ensure_gitignore_entry(project_dir: str, docs_dir_name: str = DOCS_DIR_NAME) -> GitignoreStatus:
    """
    Add the docs directory to .gitignore unless already ignored.

    Args:
        project_dir: Project working directory
        docs_dir_name: Docs directory to ignore

    Returns:
        GitignoreStatus telling whether the file was written
    """
    gitignore_path = Path(project_dir) / ".gitignore"

    content = ""
    if gitignore_path.exists():
        with open(gitignore_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()

    entry_pattern = re.compile(rf"^\s*{re.escape(docs_dir_name)}(?:/.*)?$")
    if any(entry_pattern.match(line) for line in content.splitlines()):
        return GitignoreStatus(path=str(gitignore_path), updated=False, already_present=True)

    needs_newline = bool(content) and not content.endswith("\n")
    header = "" if GITIGNORE_HEADER in content else f"{GITIGNORE_HEADER}\n"
    new_content = content + ("\n" if needs_newline else "") + header + f"{docs_dir_name}/\n"

    with open(gitignore_path, "w", encoding="utf-8", newline="") as f:
        f.write(new_content)
    logger.info("Added %s/ to %s", docs_dir_name, gitignore_path)

    return GitignoreStatus(path=str(gitignore_path), updated=True, already_present=False)
