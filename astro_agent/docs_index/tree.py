"""Documentation tree building.

Walks the docs directory for markdown files and groups them into a
section tree at most three directories deep. Anything nested deeper
is collapsed into the third level to keep the index compact.
"""

from pathlib import Path
from typing import Dict, List, Tuple

from .models import ROOT_SECTION, DocFile, DocSection


DOC_EXTENSIONS = (".md", ".mdx")

# Directory landing pages, redundant with their directory name
LANDING_PAGES = frozenset({"index.md", "index.mdx"})


def collation_key(value: str) -> Tuple[str, str]:
    """Sort key shared by every level of the tree."""
    return (value.casefold(), value)


def collect_doc_files(root: Path) -> List[DocFile]:
    """
    Find all markdown docs under root.

    Args:
        root: Documentation root directory

    Returns:
        DocFiles with forward-slash relative paths, sorted by path
    """
    root = Path(root)
    paths = []

    for path in root.rglob("*"):
        if not path.is_file():
            continue
        if not path.name.endswith(DOC_EXTENSIONS):
            continue
        if path.name in LANDING_PAGES:
            continue
        paths.append(path.relative_to(root).as_posix())

    return [DocFile(relative_path=p) for p in sorted(paths)]


def build_doc_tree(files: List[DocFile]) -> List[DocSection]:
    """
    Group doc files into top-level sections.

    A file one directory deep belongs to its top-level section, two
    deep to a subsection, and three or more deep to a sub-subsection
    named after its third path segment.

    Args:
        files: Docs relative to the docs root

    Returns:
        Sorted top-level sections
    """
    sections: Dict[str, DocSection] = {}

    for doc in files:
        parts = doc.relative_path.split("/")

        if len(parts) == 1:
            section = sections.setdefault(ROOT_SECTION, DocSection(name=ROOT_SECTION))
            section.files.append(doc)
            continue

        section = sections.setdefault(parts[0], DocSection(name=parts[0]))

        if len(parts) == 2:
            section.files.append(doc)
            continue

        subsection = section.get_subsection(parts[1])
        if len(parts) == 3:
            subsection.files.append(doc)
        else:
            subsection.get_subsection(parts[2]).files.append(doc)

    ordered = sorted(sections.values(), key=lambda s: collation_key(s.name))
    for section in ordered:
        _sort_section(section)
    return ordered


def _sort_section(section: DocSection) -> None:
    """Sort files and subsections of a section, recursively."""
    section.files.sort(key=lambda f: collation_key(f.relative_path))
    section.subsections.sort(key=lambda s: collation_key(s.name))
    for subsection in section.subsections:
        _sort_section(subsection)
