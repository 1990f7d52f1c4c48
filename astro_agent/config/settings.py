"""Configuration settings for astro-agent."""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml


DEFAULT_CONFIG_FILE = ".astro-agent.yaml"


@dataclass
class DocsConfig:
    """Docs repository and local directory configuration."""

    repo_url: str = "https://github.com/withastro/docs.git"
    docs_dir: str = ".astro-docs"
    extra_dir: str = ".astro-docs-extra"
    fetch_timeout: Optional[int] = None  # seconds, None waits for git


@dataclass
class VersionsConfig:
    """Mapping from Astro major versions to docs refs."""

    package_name: str = "astro"
    legacy_max_major: int = 4  # majors up to this use legacy_ref
    legacy_ref: str = "v4"
    mainline_ref: str = "main"


@dataclass
class OutputConfig:
    """Target files that receive the index."""

    default_files: List[str] = field(default_factory=lambda: ["AGENTS.md", "CLAUDE.md"])


@dataclass
class Settings:
    """Main settings configuration."""

    docs: DocsConfig = field(default_factory=DocsConfig)
    versions: VersionsConfig = field(default_factory=VersionsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "Settings":
        """Load settings from YAML file with environment variable expansion."""
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        # Expand environment variables
        data = cls._expand_env_vars(data)

        docs = dict(data.get("docs") or {})
        if "fetch_timeout" in docs:
            docs["fetch_timeout"] = cls._parse_int(docs["fetch_timeout"], "docs.fetch_timeout", None)

        versions = dict(data.get("versions") or {})
        if "legacy_max_major" in versions:
            versions["legacy_max_major"] = cls._parse_int(
                versions["legacy_max_major"],
                "versions.legacy_max_major",
                VersionsConfig().legacy_max_major,
            )

        return cls(
            docs=DocsConfig(**docs),
            versions=VersionsConfig(**versions),
            output=cls._parse_output_config(data.get("output", {})),
        )

    @staticmethod
    def _expand_env_vars(data: Any) -> Any:
        """Recursively expand environment variables in configuration."""
        if isinstance(data, dict):
            return {k: Settings._expand_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [Settings._expand_env_vars(item) for item in data]
        elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
            env_var = data[2:-1]
            return os.environ.get(env_var, "")
        return data

    @staticmethod
    def _parse_int(value: Any, key: str, default: Optional[int]) -> Optional[int]:
        """Coerce a numeric setting. Env-expanded values arrive as strings, empty means unset."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return default
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise ValueError(f"Invalid integer for {key}: {value!r}")

    @staticmethod
    def _parse_output_config(data: Dict[str, Any]) -> OutputConfig:
        """Parse output configuration, accepting a comma-separated string."""
        files = data.get("default_files", OutputConfig().default_files)
        if isinstance(files, str):
            files = [item.strip() for item in files.split(",") if item.strip()]
        if not files:
            files = OutputConfig().default_files
        return OutputConfig(default_files=list(files))


def load_settings(config_path: str = DEFAULT_CONFIG_FILE) -> Settings:
    """Load settings from configuration file."""
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    return Settings.from_yaml(config_path)
