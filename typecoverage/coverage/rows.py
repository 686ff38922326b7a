# ABOUTME: Committed type selections ("rows") and the compare/total aggregation over them.
# ABOUTME: Models row editing as an explicit Idle/Editing state and merges selections into one attacking set.

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from typecoverage.coverage.engine import dedupe_types

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    """How committed rows relate to the current selection."""

    COMPARE = "compare"
    TOTAL = "total"


@dataclass(frozen=True)
class Row:
    """A committed snapshot of an attacking type selection.

    Attributes:
        types: The selected attacking types, in selection order.
        summary_line: Export line computed when the row was committed.
    """

    types: tuple[str, ...]
    summary_line: str


@dataclass(frozen=True)
class Idle:
    """No row is being edited."""


@dataclass(frozen=True)
class Editing:
    """The row at `index` is being replaced by the current selection."""

    index: int


EditState = Idle | Editing


def effective_attacking_set(
    selected: Sequence[str],
    rows: Sequence[Row],
    mode: Mode,
    state: EditState,
    include_current_row: bool = False,
) -> list[str]:
    """Attacking types the engine should evaluate.

    Args:
        selected: The working selection.
        rows: Committed rows.
        mode: COMPARE evaluates the selection alone; TOTAL merges it with every row.
        state: Current edit state. In TOTAL mode the edited row is skipped
            unless `include_current_row` is set, since `selected` stands in for it.
        include_current_row: Also merge the row being edited.

    Returns:
        Deduplicated types in first-seen order: committed rows first, then the selection.
    """
    if mode is Mode.COMPARE:
        return dedupe_types(selected)

    merged: list[str] = []
    for idx, row in enumerate(rows):
        if isinstance(state, Editing) and state.index == idx and not include_current_row:
            continue
        merged.extend(row.types)
    merged.extend(selected)
    return dedupe_types(merged)


@dataclass
class RowBook:
    """Caller-owned storage for the working selection and committed rows."""

    rows: list[Row] = field(default_factory=list)
    selected: list[str] = field(default_factory=list)
    state: EditState = field(default_factory=Idle)

    @property
    def editing_index(self) -> int | None:
        """Index of the row being edited, or None when idle."""
        return self.state.index if isinstance(self.state, Editing) else None

    def toggle(self, type_name: str) -> None:
        """Add a type to the end of the selection, or remove it if already selected."""
        if type_name in self.selected:
            self.selected = [t for t in self.selected if t != type_name]
        else:
            self.selected = [*self.selected, type_name]

    def reset(self) -> None:
        """Clear the selection and leave edit mode."""
        self.selected = []
        self.state = Idle()

    def commit(self, summary_line: str) -> Row:
        """Store the current selection as a row.

        Replaces the edited row in place when editing, appends otherwise.
        Afterwards the selection is cleared and the book is idle.

        Args:
            summary_line: Export line describing the selection.

        Returns:
            The committed row.
        """
        row = Row(types=tuple(self.selected), summary_line=summary_line)
        if isinstance(self.state, Editing):
            self.rows[self.state.index] = row
            logger.debug("Replaced row %d with %s", self.state.index, ",".join(row.types))
        else:
            self.rows.append(row)
            logger.debug("Appended row %d with %s", len(self.rows) - 1, ",".join(row.types))
        self.reset()
        return row

    def delete(self, index: int) -> Row:
        """Remove a row.

        Deleting the edited row clears the selection and leaves edit mode.
        Deleting an earlier row shifts the edit index so it still points at
        the same row.

        Raises:
            IndexError: If `index` is out of range.
        """
        self._check_index(index)
        removed = self.rows.pop(index)

        if isinstance(self.state, Editing):
            if self.state.index == index:
                self.reset()
            elif self.state.index > index:
                self.state = Editing(self.state.index - 1)

        logger.debug("Deleted row %d", index)
        return removed

    def select_for_edit(self, index: int) -> None:
        """Load a row's types into the selection and start editing it.

        Raises:
            IndexError: If `index` is out of range.
        """
        self._check_index(index)
        self.selected = list(self.rows[index].types)
        self.state = Editing(index)
        logger.debug("Editing row %d", index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.rows):
            raise IndexError(f"Row index {index} out of range (have {len(self.rows)} rows)")
