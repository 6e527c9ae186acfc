"""Exclusion selectors: interactive ways of extending the exclusion set."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ftg import FtgError
from ftg.exclusion import ExclusionSet


class ExclusionSelector(Protocol):
    """Protocol for choosing exclusions before rendering.

    Keeps the renderer independent of how exclusions are picked.
    """

    def select(self, root: Path, exclusions: ExclusionSet) -> ExclusionSet: ...


class UnsupportedSelector:
    """Selector for ``-i/--interactive``, which is not available yet."""

    message = "Interactive mode not implemented."

    def select(self, root: Path, exclusions: ExclusionSet) -> ExclusionSet:
        raise FtgError(self.message)
