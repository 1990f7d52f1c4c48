"""Shared fixtures for astro-agent tests."""

from pathlib import Path
from typing import Dict, List, Optional

import pytest

from astro_agent.docs_index import DocsFetcher, FetchResult


def write_files(root: Path, files: Dict[str, str]) -> None:
    """Create files under root from a {relative_path: content} mapping."""
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


class FakeFetcher(DocsFetcher):
    """Docs fetcher that writes a fixed tree instead of cloning."""

    def __init__(self, files: Optional[Dict[str, str]] = None, error: Optional[str] = None):
        self.files = files or {}
        self.error = error
        self.calls: List[tuple] = []

    def fetch(self, ref: str, destination: Path) -> FetchResult:
        self.calls.append((ref, destination))
        if self.error:
            return FetchResult(success=False, error=self.error)
        write_files(Path(destination), self.files)
        return FetchResult(success=True)


@pytest.fixture
def sample_docs() -> Dict[str, str]:
    """A small docs tree shaped like the Astro docs repo."""
    return {
        "README.md": "# Docs",
        "src/content/docs/en/index.mdx": "landing",
        "src/content/docs/en/install.mdx": "install",
        "src/content/docs/en/guides/routing.mdx": "routing",
        "src/content/docs/en/guides/index.md": "guides landing",
        "src/content/docs/en/reference/api.mdx": "api",
        "src/content/docs/en/reference/cli/flags.md": "flags",
        "astro.config.mjs": "export default {}",
    }


@pytest.fixture
def fake_fetcher(sample_docs) -> FakeFetcher:
    """Fetcher that produces the sample docs tree."""
    return FakeFetcher(sample_docs)


@pytest.fixture
def make_fetcher():
    """Factory for fetchers with a custom tree or failure."""
    return FakeFetcher


@pytest.fixture
def write_tree():
    """Helper that creates files from a {relative_path: content} mapping."""
    return write_files
