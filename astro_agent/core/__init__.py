"""Core modules for running agents-md and logging."""

from .agents_md import (
    AgentsMdOptions,
    AgentsMdResult,
    BadInputError,
    parse_outputs,
    resolve_ref,
    run_agents_md,
)
from . import debug

__all__ = [
    "AgentsMdOptions",
    "AgentsMdResult",
    "BadInputError",
    "parse_outputs",
    "resolve_ref",
    "run_agents_md",
    "debug",
]
