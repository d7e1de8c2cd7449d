"""Snapshot history backing undo/redo.

A snapshot is a tuple of frozen employees, so storing it is a full
structural copy of the address book at commit time.

``commit()`` pushes the pre-mutation state and clears the redo stack.
``undo()`` and ``redo()`` swap the current state with the top of the
opposite stack. At most ``max_snapshots`` undo entries are kept; the
oldest are dropped first.
"""

from __future__ import annotations

from collections.abc import Sequence

from staffbook.domain.employee import Employee

Snapshot = tuple[Employee, ...]

DEFAULT_MAX_SNAPSHOTS = 20


class SnapshotHistory:
    """Undo and redo stacks of address book snapshots."""

    def __init__(
        self,
        undo: Sequence[Snapshot] = (),
        redo: Sequence[Snapshot] = (),
        *,
        max_snapshots: int = DEFAULT_MAX_SNAPSHOTS,
    ) -> None:
        if max_snapshots < 1:
            raise ValueError("max_snapshots must be at least 1")
        self.max_snapshots = max_snapshots
        self._undo: list[Snapshot] = [tuple(s) for s in undo][-max_snapshots:]
        self._redo: list[Snapshot] = [tuple(s) for s in redo][-max_snapshots:]

    @property
    def undo_snapshots(self) -> tuple[Snapshot, ...]:
        return tuple(self._undo)

    @property
    def redo_snapshots(self) -> tuple[Snapshot, ...]:
        return tuple(self._redo)

    def copy(self) -> SnapshotHistory:
        return SnapshotHistory(self._undo, self._redo, max_snapshots=self.max_snapshots)

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def commit(self, current: Snapshot) -> None:
        self._undo.append(tuple(current))
        if len(self._undo) > self.max_snapshots:
            del self._undo[0]
        self._redo.clear()

    def undo(self, current: Snapshot) -> Snapshot:
        """Return the previous snapshot; *current* becomes redoable."""
        if not self._undo:
            raise IndexError("no snapshot to undo")
        previous = self._undo.pop()
        self._redo.append(tuple(current))
        return previous

    def redo(self, current: Snapshot) -> Snapshot:
        """Return the most recently undone snapshot; *current* becomes undoable."""
        if not self._redo:
            raise IndexError("no snapshot to redo")
        following = self._redo.pop()
        self._undo.append(tuple(current))
        return following
