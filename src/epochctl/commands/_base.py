"""Click command class for epochctl.

Adds two things on top of :class:`click.Command`:

* ``--examples`` prints usage examples and exits, keeping ``--help`` short.
* Bare negative integers (``epochctl -86400``) are read as arguments
  instead of unknown short options, so pre-1970 epochs need no ``--``.
"""

from __future__ import annotations

import re
from typing import Any

import click

_NEGATIVE_INT = re.compile(r"-\d+")


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


def _value_option_names(cmd: click.Command) -> set[str]:
    names: set[str] = set()
    for param in cmd.params:
        if isinstance(param, click.Option) and not param.is_flag and not param.count:
            names.update(param.opts)
    return names


def shift_negative_numbers(cmd: click.Command, args: list[str]) -> list[str]:
    """Move bare negative integers behind ``--`` so they parse as arguments.

    A negative number that is the value of an option (``-d -5``) stays
    where it is. Arguments already containing ``--`` are left alone.

    Examples:
        >>> shift_negative_numbers(click.Command("x"), ["-q", "-86400"])
        ['-q', '--', '-86400']
    """
    if "--" in args:
        return args
    takes_value = _value_option_names(cmd)
    kept: list[str] = []
    negatives: list[str] = []
    previous: str | None = None
    for arg in args:
        if _NEGATIVE_INT.fullmatch(arg) and previous not in takes_value:
            negatives.append(arg)
        else:
            kept.append(arg)
        previous = arg
    if not negatives:
        return args
    return [*kept, "--", *negatives]


class EpochCommand(click.Command):
    """Click Command with ``--examples`` and negative-epoch arguments."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, shift_negative_numbers(self, args))
