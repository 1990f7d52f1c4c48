"""Tests for the agents-md run orchestration."""

import json

import pytest

from astro_agent.config.settings import Settings
from astro_agent.core.agents_md import (
    AgentsMdOptions,
    BadInputError,
    parse_outputs,
    resolve_ref,
    run_agents_md,
)
from astro_agent.docs_index.injector import END_MARKER, START_MARKER


class TestParseOutputs:
    """Test parse_outputs."""

    def test_defaults(self):
        assert parse_outputs(None, ["AGENTS.md", "CLAUDE.md"]) == ["AGENTS.md", "CLAUDE.md"]

    def test_comma_separated(self):
        assert parse_outputs(" CLAUDE.md , AGENTS.md,", ["X.md"]) == ["CLAUDE.md", "AGENTS.md"]

    def test_blank_falls_back(self):
        assert parse_outputs(" , ", ["AGENTS.md"]) == ["AGENTS.md"]


class TestResolveRef:
    """Test resolve_ref."""

    def test_explicit_ref_wins(self, tmp_path):
        options = AgentsMdOptions(ref="abc123", version="4")

        assert resolve_ref(options, tmp_path, Settings()) == "abc123"

    def test_version_option(self, tmp_path):
        assert resolve_ref(AgentsMdOptions(version="4.x"), tmp_path, Settings()) == "v4"
        assert resolve_ref(AgentsMdOptions(version="5"), tmp_path, Settings()) == "main"

    def test_unrecognized_version(self, tmp_path):
        with pytest.raises(BadInputError, match="Unrecognized Astro version: latest"):
            resolve_ref(AgentsMdOptions(version="latest"), tmp_path, Settings())

    def test_detects_from_package_json(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"dependencies": {"astro": "^4.1.0"}}))

        assert resolve_ref(AgentsMdOptions(), tmp_path, Settings()) == "v4"

    def test_prompts_when_detection_fails(self, tmp_path):
        calls = []

        def prompt():
            calls.append(True)
            return 5

        assert resolve_ref(AgentsMdOptions(), tmp_path, Settings(), prompt) == "main"
        assert calls == [True]

    def test_no_version_and_no_prompt(self, tmp_path):
        with pytest.raises(BadInputError, match="Use --ref"):
            resolve_ref(AgentsMdOptions(), tmp_path, Settings())

    def test_uses_configured_boundary(self, tmp_path):
        settings = Settings()
        settings.versions.legacy_max_major = 5
        settings.versions.legacy_ref = "v5"

        assert resolve_ref(AgentsMdOptions(version="5"), tmp_path, settings) == "v5"


class TestRunAgentsMd:
    """Test run_agents_md end to end with a fake fetcher."""

    def test_creates_default_outputs(self, tmp_path, fake_fetcher):
        result = run_agents_md(AgentsMdOptions(ref="main"), tmp_path, Settings(), fetcher=fake_fetcher)

        assert result.ref == "main"
        assert fake_fetcher.calls == [("main", tmp_path / ".astro-docs")]
        assert [r.output_file for r in result.reports] == ["AGENTS.md", "CLAUDE.md"]
        assert all(r.created for r in result.reports)

        agents = (tmp_path / "AGENTS.md").read_text()
        assert agents.startswith(f"{START_MARKER}\n[Astro Docs Index]|root: ./.astro-docs|")
        assert agents.endswith(f"{END_MARKER}\n")
        assert "--output AGENTS.md" in agents
        assert "--output CLAUDE.md" in (tmp_path / "CLAUDE.md").read_text()

    def test_index_contents(self, tmp_path, fake_fetcher):
        run_agents_md(
            AgentsMdOptions(ref="main", output="AGENTS.md"), tmp_path, Settings(), fetcher=fake_fetcher
        )

        index = (tmp_path / "AGENTS.md").read_text().splitlines()[1]
        # Everything below src/content/docs collapses into one section, so
        # directories appear in the order their files sort
        assert index.split("|")[4:] == [
            ".:{README.md}",
            "src/content/docs/en/guides:{routing.mdx}",
            "src/content/docs/en:{install.mdx}",
            "src/content/docs/en/reference:{api.mdx}",
            "src/content/docs/en/reference/cli:{flags.md}",
        ]

    def test_updates_existing_file(self, tmp_path, fake_fetcher):
        existing = f"# Project rules\n\n{START_MARKER}\nold\n{END_MARKER}\n\nMore rules\n"
        (tmp_path / "AGENTS.md").write_text(existing)

        result = run_agents_md(
            AgentsMdOptions(ref="main", output="AGENTS.md"), tmp_path, Settings(), fetcher=fake_fetcher
        )

        [report] = result.reports
        assert report.created is False
        assert report.size_before == len(existing.encode("utf-8"))
        content = (tmp_path / "AGENTS.md").read_text()
        assert content.startswith(f"# Project rules\n\n{START_MARKER}\n[Astro Docs Index]")
        assert content.endswith(f"{END_MARKER}\n\nMore rules\n")
        assert "old" not in content

    def test_rerun_is_stable(self, tmp_path, fake_fetcher):
        options = AgentsMdOptions(ref="main", output="AGENTS.md")
        run_agents_md(options, tmp_path, Settings(), fetcher=fake_fetcher)
        first = (tmp_path / "AGENTS.md").read_bytes()

        run_agents_md(options, tmp_path, Settings(), fetcher=fake_fetcher)

        assert (tmp_path / "AGENTS.md").read_bytes() == first

    def test_merges_extras_before_indexing(self, tmp_path, fake_fetcher):
        extras = tmp_path / ".astro-docs-extra" / "team"
        extras.mkdir(parents=True)
        (extras / "conventions.md").write_text("ours")

        result = run_agents_md(
            AgentsMdOptions(ref="main", output="AGENTS.md"), tmp_path, Settings(), fetcher=fake_fetcher
        )

        assert result.merged_extras is True
        assert "team:{conventions.md}" in (tmp_path / "AGENTS.md").read_text()

    def test_updates_gitignore(self, tmp_path, fake_fetcher):
        result = run_agents_md(AgentsMdOptions(ref="main"), tmp_path, Settings(), fetcher=fake_fetcher)

        assert result.gitignore.updated is True
        assert ".astro-docs/" in (tmp_path / ".gitignore").read_text()

    def test_fetch_failure_writes_nothing(self, tmp_path, make_fetcher):
        fetcher = make_fetcher(error='Could not find documentation for ref "v9".')

        with pytest.raises(BadInputError) as exc_info:
            run_agents_md(AgentsMdOptions(ref="v9"), tmp_path, Settings(), fetcher=fetcher)

        assert str(exc_info.value) == (
            'Failed to pull Astro docs: Could not find documentation for ref "v9".'
        )
        assert not (tmp_path / "AGENTS.md").exists()
        assert not (tmp_path / ".gitignore").exists()

    def test_announces_fetch(self, tmp_path, fake_fetcher):
        announced = []

        run_agents_md(
            AgentsMdOptions(version="4"), tmp_path, Settings(),
            fetcher=fake_fetcher, on_fetch_start=announced.append,
        )

        assert announced == ["v4"]
