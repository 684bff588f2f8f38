"""`python -m neoversion` runs the CLI."""

from neoversion.cli.main import run

run()
