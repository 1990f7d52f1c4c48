"""astro-agent: Astro documentation index for AI coding agents."""

__version__ = "0.1.0"
