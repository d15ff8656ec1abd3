"""Entry point for ``python -m depgraph``."""

from depgraph.cli import cli

cli()
