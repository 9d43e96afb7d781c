"""Caller-owned topic/level selection state."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Dict, Optional

__all__ = ["SelectionState", "SelectionStore"]


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of the current topic and level; ``None`` means unset."""

    topic: Optional[str] = None
    level: Optional[str] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


class SelectionStore:
    """Holds the last-set topic and level.

    Values are stored as given, last write wins. Each store is independent;
    create one per UI flow instead of sharing module state.
    """

    def __init__(self, state: Optional[SelectionState] = None) -> None:
        self._state = state or SelectionState()

    def set_topic(self, topic: Optional[str]) -> None:
        self._state = replace(self._state, topic=topic)

    def set_level(self, level: Optional[str]) -> None:
        self._state = replace(self._state, level=level)

    def get_selections(self) -> SelectionState:
        return self._state

    def reset_selections(self) -> None:
        self._state = SelectionState()
