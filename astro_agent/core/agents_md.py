"""The agents-md run: fetch docs, build the index, inject it.

Steps run strictly in order and no target file is touched before the
docs tree has been fetched and indexed.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from astro_agent.config.settings import Settings
from astro_agent.docs_index import (
    DocsFetcher,
    GitDocsFetcher,
    GitignoreStatus,
    InjectionReport,
    VersionDetector,
    build_doc_tree,
    collect_doc_files,
    ensure_gitignore_entry,
    generate_docs_index,
    inject_index,
    merge_extra_docs,
    parse_major_version,
    resolve_docs_ref,
)

logger = logging.getLogger(__name__)


class BadInputError(Exception):
    """User input that cannot be acted on; reported without retry."""

    pass


@dataclass
class AgentsMdOptions:
    """Options accepted by the agents-md command."""

    version: Optional[str] = None
    ref: Optional[str] = None
    output: Optional[str] = None


@dataclass
class AgentsMdResult:
    """Summary of a completed agents-md run."""

    ref: str
    docs_path: Path
    reports: List[InjectionReport] = field(default_factory=list)
    merged_extras: bool = False
    gitignore: Optional[GitignoreStatus] = None


def parse_outputs(output: Optional[str], defaults: List[str]) -> List[str]:
    """Split a comma-separated --output value, falling back to defaults."""
    if not output:
        return list(defaults)

    outputs = [item.strip() for item in output.split(",") if item.strip()]
    return outputs or list(defaults)


def resolve_ref(
    options: AgentsMdOptions,
    project_dir: Path,
    settings: Settings,
    prompt_version: Optional[Callable[[], int]] = None,
) -> str:
    """
    Work out which docs ref to fetch.

    An explicit --ref wins, then --version, then the version found in
    package.json, then the interactive prompt.

    Raises:
        BadInputError: If the version is unrecognized or unsupported
    """
    if options.ref:
        return options.ref

    versions = settings.versions
    major: Optional[int] = None

    if options.version:
        major = parse_major_version(options.version)
        if not major:
            raise BadInputError(f"Unrecognized Astro version: {options.version}")
    else:
        detected = VersionDetector(str(project_dir), versions.package_name).detect()
        if detected.version:
            major = detected.version
        else:
            logger.info("Version detection failed: %s", detected.error)

    if not major and prompt_version is not None:
        major = prompt_version()

    resolved = None
    if major:
        resolved = resolve_docs_ref(
            major,
            legacy_max_major=versions.legacy_max_major,
            legacy_ref=versions.legacy_ref,
            mainline_ref=versions.mainline_ref,
        )

    if not resolved:
        raise BadInputError(
            f"Unsupported Astro major version: {major}. "
            "Use --ref to specify a docs branch/tag/commit."
        )
    return resolved


def run_agents_md(
    options: AgentsMdOptions,
    project_dir: Path,
    settings: Settings,
    fetcher: Optional[DocsFetcher] = None,
    prompt_version: Optional[Callable[[], int]] = None,
    on_fetch_start: Optional[Callable[[str], None]] = None,
) -> AgentsMdResult:
    """
    Fetch docs and inject the index into every target file.

    Args:
        options: Command options
        project_dir: Project working directory
        settings: Loaded settings
        fetcher: Docs source, defaults to a git fetcher
        prompt_version: Asks the user for a major version when none is known
        on_fetch_start: Called with the ref right before fetching

    Returns:
        AgentsMdResult describing what was written

    Raises:
        BadInputError: On bad version input or a failed fetch
    """
    project_dir = Path(project_dir)
    outputs = parse_outputs(options.output, settings.output.default_files)
    docs_dir_name = settings.docs.docs_dir
    docs_path = project_dir / docs_dir_name
    docs_link_path = f"./{docs_dir_name}"

    ref = resolve_ref(options, project_dir, settings, prompt_version)

    if fetcher is None:
        fetcher = GitDocsFetcher(
            repo_url=settings.docs.repo_url,
            timeout=settings.docs.fetch_timeout,
        )

    if on_fetch_start is not None:
        on_fetch_start(ref)
    logger.info("Fetching docs for ref %s into %s", ref, docs_path)

    fetch_result = fetcher.fetch(ref, docs_path)
    if not fetch_result.success:
        raise BadInputError(f"Failed to pull Astro docs: {fetch_result.error}")

    merged_extras = merge_extra_docs(str(project_dir), docs_path, settings.docs.extra_dir)

    doc_files = collect_doc_files(docs_path)
    sections = build_doc_tree(doc_files)
    logger.info("Indexed %d doc files in %d sections", len(doc_files), len(sections))

    result = AgentsMdResult(ref=ref, docs_path=docs_path, merged_extras=merged_extras)

    for output_file in outputs:
        output_path = project_dir / output_file

        content = ""
        created = True
        if output_path.exists():
            with open(output_path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
            created = False

        index_content = generate_docs_index(docs_link_path, sections, output_file)
        updated = inject_index(content, index_content)
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(updated)

        report = InjectionReport(
            output_file=output_file,
            created=created,
            size_before=len(content.encode("utf-8")),
            size_after=len(updated.encode("utf-8")),
        )
        logger.info("%s %s", "Created" if created else "Updated", output_path)
        result.reports.append(report)

    result.gitignore = ensure_gitignore_entry(str(project_dir), docs_dir_name)
    return result
