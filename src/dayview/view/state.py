# SPDX-License-Identifier: MIT

"""Per-invocation display switches set by the global CLI options."""

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether views print the dayview banner above their output."""
    return _show_header_var.get()
