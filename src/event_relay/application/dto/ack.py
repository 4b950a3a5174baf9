from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AckResult:
    id: str
    acknowledged: bool
