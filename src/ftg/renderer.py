"""Box-drawing tree renderer writing ``[D]``/``[F]`` tagged lines to a sink."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Literal, Protocol

from ftg import FtgError
from ftg.exclusion import ExclusionSet
from ftg.scanner import Entry, EntryKind, Order, list_children

logger = logging.getLogger(__name__)

Lister = Callable[[Path], list[Entry]]


class TextSink(Protocol):
    """Anything accepting sequential text writes (open file, StringIO, stdout)."""

    def write(self, text: str, /) -> object: ...


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Box-drawing character set for tree rendering."""

    branch: str  # ├──
    last_branch: str  # └──
    vertical: str  # │
    space: str  # (indent)


UNICODE_GLYPHS = Glyphs(
    branch="├── ",
    last_branch="└── ",
    vertical="│   ",
    space="    ",
)

ASCII_GLYPHS = Glyphs(
    branch="|-- ",
    last_branch="\\-- ",
    vertical="|   ",
    space="    ",
)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options for tree rendering.

    Attributes:
        charset: Output charset, ``unicode`` or ``ascii``.
        order: Sibling order, ``asc``/``desc`` by name or ``none`` for
            operating-system order.
    """

    charset: Literal["unicode", "ascii"] = "unicode"
    order: Order = "asc"


@dataclass(slots=True)
class RenderStats:
    """Counters collected during one render.

    Attributes:
        directories: Directory lines emitted.
        files: File lines emitted.
        skipped: Directories whose contents could not be listed.
        write_errors: Lines the sink failed to accept.
    """

    directories: int = 0
    files: int = 0
    skipped: list[Path] = field(default_factory=list)
    write_errors: int = 0

    @property
    def complete(self) -> bool:
        return not self.skipped and not self.write_errors

    def report_line(self) -> str:
        """Build GNU tree-like summary line.

        Returns:
            str: Summary string with singular/plural inflection.
        """
        dir_word = "directory" if self.directories == 1 else "directories"
        file_word = "file" if self.files == 1 else "files"
        return f"{self.directories} {dir_word}, {self.files} {file_word}"


class TreeRenderer:
    """Render a directory tree below a root, skipping excluded names.

    The renderer only writes to a sink it is handed; opening and closing
    that sink is the caller's job.
    """

    def __init__(
        self,
        exclusions: ExclusionSet,
        options: RenderOptions | None = None,
        lister: Lister | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            exclusions: Names to leave out, files and directories alike.
            options: Rendering options. Defaults to ``RenderOptions()``.
            lister: Directory listing callable raising ``OSError`` on
                failure. Defaults to ``scanner.list_children``.
        """
        self._exclusions = exclusions
        self._options = options or RenderOptions()
        self._glyphs = (
            ASCII_GLYPHS if self._options.charset == "ascii" else UNICODE_GLYPHS
        )
        self._lister = lister or partial(list_children, order=self._options.order)

    def is_excluded(self, name: str) -> bool:
        return self._exclusions.is_excluded(name)

    def list_children(self, path: Path) -> list[Entry]:
        return self._lister(path)

    def list_root(self, root: Path) -> list[Entry]:
        """List the root directory.

        Args:
            root: Directory the tree is drawn for.

        Returns:
            list[Entry]: Root children.

        Raises:
            FtgError: If the root cannot be listed.
        """
        try:
            return self.list_children(root)
        except OSError as exc:
            raise FtgError(f"cannot read directory '{root}': {exc}") from exc

    def render(
        self,
        root: Path,
        sink: TextSink,
        entries: list[Entry] | None = None,
    ) -> RenderStats:
        """Write the tree below ``root`` to ``sink``.

        Args:
            root: Directory to draw.
            sink: Open text sink.
            entries: Root children when already listed by the caller.

        Returns:
            RenderStats: Line counts and recoverable failures.

        Raises:
            FtgError: If the root cannot be listed.
        """
        if entries is None:
            entries = self.list_root(root)
        stats = RenderStats()
        self.render_subtree(sink, "", entries, stats)
        return stats

    def render_line(
        self,
        sink: TextSink,
        name: str,
        kind: EntryKind,
        prefix: str,
        is_last: bool,
    ) -> bool:
        """Write one ``<prefix><connector>[<K>] <name>`` line.

        Returns:
            bool: ``False`` when the sink rejected the write.
        """
        connector = self._glyphs.last_branch if is_last else self._glyphs.branch
        try:
            sink.write(f"{prefix}{connector}[{kind}] {name}\n")
        except (OSError, UnicodeError) as exc:
            logger.error("Error writing entry %s: %s", name, exc)
            return False
        return True

    def render_subtree(
        self,
        sink: TextSink,
        prefix: str,
        entries: list[Entry],
        stats: RenderStats,
    ) -> None:
        """Render ``entries`` and everything below them depth-first.

        Excluded entries are dropped before last-sibling detection, so the
        ``└──`` connector always marks the last line actually drawn at a
        level, and excluded directories are never listed.

        Args:
            sink: Open text sink.
            prefix: Indentation carried from ancestor levels.
            entries: Sibling entries in display order.
            stats: Counters updated in place.
        """
        # Iterative DFS using an explicit stack.
        # Stack items: (entry, prefix, is_last_sibling)
        # Push children in reverse order so that the first child is popped first.
        stack: list[tuple[Entry, str, bool]] = []
        self._push_children(stack, entries, prefix)

        while stack:
            entry, entry_prefix, is_last = stack.pop()

            written = self.render_line(
                sink, entry.name, entry.kind, entry_prefix, is_last
            )
            if not written:
                stats.write_errors += 1

            if not entry.is_dir:
                stats.files += 1
                continue
            stats.directories += 1

            next_prefix = entry_prefix + (
                self._glyphs.space if is_last else self._glyphs.vertical
            )
            try:
                children = self.list_children(entry.path)
            except OSError as exc:
                logger.warning("Cannot read directory %s: %s", entry.path, exc)
                stats.skipped.append(entry.path)
                continue
            self._push_children(stack, children, next_prefix)

    def _push_children(
        self,
        stack: list[tuple[Entry, str, bool]],
        children: list[Entry],
        prefix: str,
    ) -> None:
        visible = [c for c in children if not self.is_excluded(c.name)]
        for i in range(len(visible) - 1, -1, -1):
            stack.append((visible[i], prefix, i == len(visible) - 1))
