"""Random source for the simulation."""

import random
from typing import Optional, Protocol, Sequence, TypeVar

from platypor.config import DEFAULT_RNG_SEED

T = TypeVar("T")


class Generator(Protocol):
    """The slice of ``random.Random`` the engines depend on."""

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


# Process-wide generator shared by every RandomSource built without one
_shared_generator = random.Random(DEFAULT_RNG_SEED)


class RandomSource:
    """All random draws of the engines go through here.

    Every draw is built on ``random()`` (continuous) or ``randrange()``
    (integer), so a test can substitute a scripted generator and know exactly
    which value each draw consumes. Continuous ranges are half-open:
    ``uniform(low, high)`` returns a value in ``[low, high)``.
    """

    def __init__(self, generator: Optional[Generator] = None) -> None:
        self._generator = generator if generator is not None else _shared_generator

    @classmethod
    def seeded(cls, seed: int) -> "RandomSource":
        """Build a source with its own deterministic generator."""
        return cls(random.Random(seed))

    def chance(self) -> float:
        """Draw in [0, 1)."""
        return self._generator.random()

    def uniform(self, low: float, high: float) -> float:
        """Draw in [low, high)."""
        return low + (high - low) * self._generator.random()

    def variation(self, spread: float) -> float:
        """Draw a symmetric variation in [-spread, +spread)."""
        return (self._generator.random() * 2 - 1) * spread

    def below(self, upper: int) -> int:
        """Draw an integer in [0, upper)."""
        return self._generator.randrange(upper)

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.below(len(items))]
