from __future__ import annotations

import random


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_centered(self, extent: float) -> float:
        """Uniform sample in ``[-extent / 2, extent / 2)``."""
        return self.next_float() * extent - extent / 2.0
