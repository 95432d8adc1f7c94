"""Uniform random selection for path generation.

All random decisions of the generator go through a RandomPicker, so tests
can fix the seed or swap in a scripted picker with the same pick() method.
"""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomPicker:
    """Picks elements uniformly at random from non-empty sequences.

    Example:
        picker = RandomPicker(seed=42)
        picker.pick([GridPoint(1, 0), GridPoint(0, 1)])
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        """Initialize picker.

        Args:
            seed: Seed for a private random.Random (ignored if rng is given)
            rng: Existing random source to draw from
        """
        self._rng = rng or random.Random(seed)

    def pick(self, items: Sequence[T]) -> T:
        """Return one element chosen uniformly at random.

        Raises:
            ValueError: If items is empty.
        """
        if not items:
            raise ValueError("Cannot pick from an empty sequence")
        return self._rng.choice(items)
