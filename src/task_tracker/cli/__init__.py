"""Command-line entrypoint and command registry."""
