"""Documentation index for AI coding agents.

Pulls the Astro docs for the project's major version, summarizes the
markdown tree into a compact index, and injects it into agent
instruction files such as AGENTS.md and CLAUDE.md.

Key features:
- Version detection from package.json
- Shallow git fetch with guaranteed cleanup of the staging directory
- Deterministic three-level section tree
- Idempotent marker-block injection
"""

from .models import (
    ROOT_SECTION,
    DetectResult,
    DocFile,
    DocSection,
    FetchResult,
    GitignoreStatus,
    InjectionReport,
)
from .versions import parse_major_version, resolve_docs_ref
from .detector import VersionDetector, detect_framework_version
from .fetcher import DOCS_REPO_URL, DocsFetcher, GitDocsFetcher, pull_docs
from .extras import EXTRA_DOCS_DIR_NAME, merge_extra_docs
from .tree import build_doc_tree, collect_doc_files
from .indexer import generate_docs_index
from .injector import END_MARKER, START_MARKER, inject_index
from .gitignore import ensure_gitignore_entry

__all__ = [
    # Models
    "ROOT_SECTION",
    "DetectResult",
    "DocFile",
    "DocSection",
    "FetchResult",
    "GitignoreStatus",
    "InjectionReport",
    # Versions
    "parse_major_version",
    "resolve_docs_ref",
    "VersionDetector",
    "detect_framework_version",
    # Fetching
    "DOCS_REPO_URL",
    "DocsFetcher",
    "GitDocsFetcher",
    "pull_docs",
    "EXTRA_DOCS_DIR_NAME",
    "merge_extra_docs",
    # Indexing
    "build_doc_tree",
    "collect_doc_files",
    "generate_docs_index",
    # Injection
    "START_MARKER",
    "END_MARKER",
    "inject_index",
    "ensure_gitignore_entry",
]
