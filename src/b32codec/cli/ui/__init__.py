#!/usr/bin/env python3
from __future__ import annotations

from .state import THEME, UIContext, get_context

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    context.console.no_color = no_color
    context.console_err.no_color = no_color


__all__ = [
    "DEFAULT_CONTEXT",
    "THEME",
    "UIContext",
    "configure_ui",
    "console",
    "console_err",
]
