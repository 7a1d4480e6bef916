"""Allow ``python -m aws_pass``."""

from aws_pass.presentation.cli import cli

cli(prog_name="aws-pass")
