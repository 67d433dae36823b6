"""CLI commands. Each public module here defines one `command`; see nearest_colour.registry."""
