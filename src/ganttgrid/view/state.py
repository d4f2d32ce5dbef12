# SPDX-License-Identifier: MIT

"""Per-invocation display switches shared by the views."""

from contextvars import ContextVar

# Set from the config file and overridden by --no-header
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()
