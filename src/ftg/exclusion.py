"""Exact-name exclusion set and the built-in default exclusions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

DEFAULT_EXCLUSIONS: Final[tuple[str, ...]] = (
    "node_modules",
    ".next",
    ".vscode",
    ".idea",
    ".git",
    "target",
    "Cargo.lock",
)


def parse_name_list(value: str) -> list[str]:
    """Split a comma-separated ``--exclude`` value into names.

    Surrounding whitespace is stripped and empty items are dropped, so
    ``"dist, build,,"`` yields ``["dist", "build"]``.

    Args:
        value: Raw comma-separated option value.

    Returns:
        list[str]: Literal names in input order.
    """
    return [name.strip() for name in value.split(",") if name.strip()]


@dataclass(frozen=True, slots=True)
class ExclusionSet:
    """Immutable set of literal entry names to leave out of the tree.

    Names are matched against an entry's bare name, never its path, and
    never as a pattern.
    """

    names: frozenset[str] = field(default_factory=frozenset)

    def is_excluded(self, name: str) -> bool:
        """Return whether an entry named ``name`` should be left out.

        Files and directories are treated alike.
        """
        return name in self.names

    def with_names(self, names: Iterable[str]) -> ExclusionSet:
        return ExclusionSet(self.names | frozenset(names))

    def cleared(self) -> ExclusionSet:
        return ExclusionSet()

    def __len__(self) -> int:
        return len(self.names)


def build_exclusions(
    user_names: Iterable[str] = (),
    clear: bool = False,
    base: ExclusionSet | None = None,
) -> ExclusionSet:
    """Build the exclusion set used for one run.

    Args:
        user_names: Names supplied with ``-e/--exclude``.
        clear: Whether to drop everything accumulated in ``base`` before
            merging.
        base: Previously accumulated set. Defaults to an empty set.

    Returns:
        ExclusionSet: ``base`` (or empty when cleared) plus ``user_names``
        plus the built-in defaults.
    """
    exclusions = base or ExclusionSet()
    if clear:
        exclusions = exclusions.cleared()
    return exclusions.with_names(user_names).with_names(DEFAULT_EXCLUSIONS)
