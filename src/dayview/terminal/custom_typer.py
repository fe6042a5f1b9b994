# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose command names list their aliases, e.g. "day, d"."""

    _ALIAS_SEPARATOR = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._resolve(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name
        resolved = self._resolve(name or "")
        if resolved != name and resolved in self.commands:
            # already registered under its full name
            return
        super().add_command(cmd, name)

    def _resolve(self, alias: str) -> str:
        for registered in self.commands:
            if alias in self._ALIAS_SEPARATOR.split(registered):
                return registered
        return alias


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Aliased group listing the calendar commands first."""

    command_order = (
        "day, d",
        "week, w",
        "config, c",
        "version, ve",
    )

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.command_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
