from __future__ import annotations

from enum import Enum


class Presence(Enum):
    ABSENT = "∅"
    PRESENT = "✓"

    def __str__(self) -> str:
        return self.value
