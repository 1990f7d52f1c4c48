"""Data models for the documentation index."""

from dataclasses import dataclass, field
from typing import List, Optional


# Section name for files that live directly under the docs root
ROOT_SECTION = "."


@dataclass(frozen=True)
class DocFile:
    """A markdown document, addressed relative to the docs root."""

    relative_path: str  # always forward-slash separated

    @property
    def name(self) -> str:
        """Get the file name without its directory."""
        return self.relative_path.rsplit("/", 1)[-1]

    @property
    def directory(self) -> str:
        """Get the containing directory, or '.' for root files."""
        if "/" not in self.relative_path:
            return ROOT_SECTION
        return self.relative_path.rsplit("/", 1)[0]


@dataclass
class DocSection:
    """A directory node in the documentation tree."""

    name: str
    files: List[DocFile] = field(default_factory=list)
    subsections: List["DocSection"] = field(default_factory=list)

    def get_subsection(self, name: str) -> "DocSection":
        """Get a child section by name, creating it if missing."""
        for subsection in self.subsections:
            if subsection.name == name:
                return subsection
        subsection = DocSection(name=name)
        self.subsections.append(subsection)
        return subsection


@dataclass
class DetectResult:
    """Outcome of reading the framework version from package.json."""

    version: Optional[int] = None
    error: Optional[str] = None


@dataclass
class FetchResult:
    """Outcome of pulling the docs tree for a ref."""

    success: bool
    error: Optional[str] = None


@dataclass
class GitignoreStatus:
    """Outcome of ensuring the docs directory is git-ignored."""

    path: str
    updated: bool
    already_present: bool


@dataclass
class InjectionReport:
    """Describes one target file written during a run."""

    output_file: str
    created: bool
    size_before: int
    size_after: int
