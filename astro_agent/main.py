"""
astro-agent CLI - Main entry point for the agents-md command.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.prompt import Prompt

from astro_agent.config.settings import DEFAULT_CONFIG_FILE, Settings, load_settings
from astro_agent.core import debug
from astro_agent.core.agents_md import AgentsMdOptions, BadInputError, run_agents_md
from astro_agent.ui.console import (
    console,
    format_size,
    print_error,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="astro-agent",
    help="astro-agent - Astro documentation index for AI coding agents",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def cli() -> None:
    """Download Astro docs and index them for AI coding agents."""


def _load_project_settings(project_dir: Path, config_path: Optional[str]) -> Settings:
    """Load settings from --config, or the project's default config file if present."""
    if config_path:
        return load_settings(config_path)

    default_path = project_dir / DEFAULT_CONFIG_FILE
    if default_path.exists():
        return load_settings(str(default_path))
    return Settings()


def prompt_for_version() -> int:
    """Ask which Astro major version to pull docs for."""
    try:
        answer = Prompt.ask(
            "Astro major version for docs (5 = main, 4 = v4)",
            choices=["5", "4"],
            default="5",
            console=console,
        )
    except (KeyboardInterrupt, EOFError):
        print_warning("\nCancelled.")
        raise typer.Exit(0)
    return int(answer)


@app.command(name="agents-md")
def agents_md(
    version: Optional[str] = typer.Option(
        None,
        "--version",
        "-v",
        help="Astro major version (e.g., 4, 5)",
    ),
    ref: Optional[str] = typer.Option(
        None,
        "--ref",
        "-r",
        help="Docs repo git ref (branch/tag/commit)",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Target markdown file(s), comma-separated",
    ),
    project_dir: str = typer.Option(
        ".",
        "--project",
        "-p",
        help="Project directory to work with",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Path to settings file (default: {DEFAULT_CONFIG_FILE} in the project)",
    ),
    debug_mode: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable verbose debug logging to the temp directory",
    ),
) -> None:
    """Download docs and inject a compressed index into AGENTS.md/CLAUDE.md."""
    if debug_mode:
        debug.enable_debug()
        console.print(f"[yellow]Debug mode enabled - logging to {escape(str(debug.get_log_file()))}[/yellow]\n")

    project = Path(project_dir).resolve()

    try:
        settings = _load_project_settings(project, config_path)
    except (FileNotFoundError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1)

    docs_dir_name = settings.docs.docs_dir

    def announce_fetch(docs_ref: str) -> None:
        console.print(
            f"\nDownloading [cyan]Astro[/cyan] documentation ([cyan]{escape(docs_ref)}[/cyan]) "
            f"to [cyan]{escape(docs_dir_name)}[/cyan]..."
        )

    options = AgentsMdOptions(version=version, ref=ref, output=output)
    try:
        result = run_agents_md(
            options,
            project,
            settings,
            prompt_version=prompt_for_version,
            on_fetch_start=announce_fetch,
        )
    except BadInputError as e:
        debug.log_error("agents-md", e)
        print_error(str(e))
        raise typer.Exit(1)

    for report in result.reports:
        if report.created:
            action, size_info = "Created", format_size(report.size_after)
        else:
            action = "Updated"
            size_info = f"{format_size(report.size_before)} → {format_size(report.size_after)}"
        print_success(f"{action} [bold]{escape(report.output_file)}[/bold] ({size_info})")

    if result.merged_extras:
        print_success(f"Included extra docs from [bold]{escape(settings.docs.extra_dir)}[/bold]")
    if result.gitignore is not None and result.gitignore.updated:
        print_success(f"Added [bold]{escape(docs_dir_name)}[/bold] to .gitignore")

    console.print("")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
