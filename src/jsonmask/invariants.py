"""Invariant markers for jsonmask internals."""

from __future__ import annotations

from typing import NoReturn

from jsonmask.exceptions import NeverThrown


def never(reason: str = "", **env: object) -> NoReturn:
    """Mark a code path as intentionally unreachable.

    The optional env payload is attached to the raised exception for the
    error report; it is not evaluated.
    """
    raise NeverThrown(reason or "never() marker reached", env=env)
