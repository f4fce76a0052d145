"""AndroidCommand — a Click command that can print usage examples.

``--help`` stays short; ``--examples`` prints a block of complete
invocations and exits before any argument validation runs.
"""

from __future__ import annotations

from typing import Any

import click


class AndroidCommand(click.Command):
    """``click.Command`` with an optional, eager ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    is_eager=True,
                    expose_value=False,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
