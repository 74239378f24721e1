from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class MouseState:
    """Pointer input sampled once per tick.

    ``cursor`` is in window pixels (origin top left, y down) and is ``None``
    while the pointer is outside the window.
    """

    cursor: Optional[Tuple[float, float]] = None
    left: bool = False
    right: bool = False

    @staticmethod
    def idle() -> "MouseState":
        return MouseState()

    @property
    def engaged(self) -> bool:
        return self.cursor is not None and (self.left or self.right)
