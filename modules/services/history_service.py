"""Undo/redo history over the logo form state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Union

from modules.pipelines.data_types import ImageHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormParams:
    """Serializable text fields of the form."""

    prompt: str
    company_name: str
    style: str


@dataclass(frozen=True, slots=True)
class HistoryState:
    """One snapshot of the form: text fields plus the attached image, if any."""

    params: FormParams
    base_image: Optional[ImageHandle] = None

    def with_params(self, **changes: str) -> "HistoryState":
        return replace(self, params=replace(self.params, **changes))

    def with_image(self, image: Optional[ImageHandle]) -> "HistoryState":
        return replace(self, base_image=image)

    def equivalent_to(self, other: "HistoryState") -> bool:
        """Params compared by value, images by name, size and mtime."""
        if self.params != other.params:
            return False
        if self.base_image is None or other.base_image is None:
            return self.base_image is None and other.base_image is None
        return self.base_image.same_file(other.base_image)


StateUpdate = Union[HistoryState, Callable[[HistoryState], HistoryState]]


class HistoryStore:
    """Linear undo log. Committing after an undo discards the redo branch."""

    def __init__(self, initial: HistoryState) -> None:
        self._states: List[HistoryState] = [initial]
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._states)

    @property
    def cursor(self) -> int:
        return self._cursor

    def current_state(self) -> HistoryState:
        return self._states[self._cursor]

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._states) - 1

    def undo(self) -> HistoryState:
        if self.can_undo():
            self._cursor -= 1
            logger.debug("undo -> %d/%d", self._cursor, len(self._states))
        return self.current_state()

    def redo(self) -> HistoryState:
        if self.can_redo():
            self._cursor += 1
            logger.debug("redo -> %d/%d", self._cursor, len(self._states))
        return self.current_state()

    def commit(self, update: StateUpdate) -> bool:
        """Record a new snapshot; returns False when it matched the current one."""
        current = self.current_state()
        next_state = update(current) if callable(update) else update
        if next_state.equivalent_to(current):
            return False

        del self._states[self._cursor + 1:]
        self._states.append(next_state)
        self._cursor = len(self._states) - 1
        logger.debug("commit -> %d/%d", self._cursor, len(self._states))
        return True
