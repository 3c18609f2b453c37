"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from commerce.domain.result import Result


def unwrap(result: Result):
    """Return the Result's value or abort the command with its error."""
    if result.is_failure:
        raise click.ClickException(str(result.error))
    return result.value
