"""Subcommand modules for numfield.

Provides register_commands() which uses deferred imports to keep
``numfield --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root CLI group."""
    from numfield.commands.edit import edit
    from numfield.commands.key import key
    from numfield.commands.paste import paste
    from numfield.commands.pattern import pattern
    from numfield.commands.sanitize import finalize, sanitize

    cli.add_command(pattern)
    cli.add_command(sanitize)
    cli.add_command(finalize)
    cli.add_command(edit)
    cli.add_command(paste)
    cli.add_command(key)
