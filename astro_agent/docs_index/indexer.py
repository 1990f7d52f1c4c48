"""Compact docs index generation.

The index is a single pipe-delimited line: a short preamble telling
the agent where the docs live, followed by one `dir:{files}` entry
per directory.
"""

from typing import Dict, Iterator, List

from .models import DocFile, DocSection


INDEX_TITLE = "Astro Docs Index"
READ_DOCS_INSTRUCTION = (
    "STOP. What you remember about Astro is WRONG for this project. "
    "Always search docs and read before any task."
)
REGENERATE_COMMAND = "npx github:sungkhum/astro-agent agents-md"


def generate_docs_index(docs_path: str, sections: List[DocSection], output_file: str) -> str:
    """
    Serialize the section tree into the index string.

    Args:
        docs_path: Docs root as shown to the agent, e.g. ./.astro-docs
        sections: Tree built by build_doc_tree
        output_file: Target file name, used in the regenerate hint

    Returns:
        Index string without a trailing newline
    """
    parts = [
        f"[{INDEX_TITLE}]",
        f"root: {docs_path}",
        READ_DOCS_INSTRUCTION,
        f"If docs missing, run this command first: {REGENERATE_COMMAND} --output {output_file}",
    ]

    grouped = group_by_directory(iter_section_files(sections))
    for directory, names in grouped.items():
        parts.append(f"{directory}:{{{','.join(names)}}}")

    return "|".join(parts)


def iter_section_files(sections: List[DocSection]) -> Iterator[DocFile]:
    """Yield files depth-first: a section's own files, then its subsections."""
    for section in sections:
        yield from section.files
        yield from iter_section_files(section.subsections)


def group_by_directory(files: Iterator[DocFile]) -> Dict[str, List[str]]:
    """Group file names by directory, keeping first-seen directory order."""
    grouped: Dict[str, List[str]] = {}
    for doc in files:
        grouped.setdefault(doc.directory, []).append(doc.name)
    return grouped
