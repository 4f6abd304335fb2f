import random
from dataclasses import dataclass, field
from typing import Any, MutableSequence

import pytest
from typing_extensions import override

from randpass import RandomSource


@dataclass(slots=True)
class SeededRandomSource(RandomSource):
    """Deterministic stand-in for the OS CSPRNG."""

    seed: int = 0
    _rng: random.Random = field(init=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    @override
    def randbelow(self, n: int) -> int:
        return self._rng.randrange(n)

    @override
    def shuffle(self, seq: MutableSequence[Any]) -> None:
        self._rng.shuffle(seq)


@pytest.fixture
def rng() -> SeededRandomSource:
    return SeededRandomSource(seed=1337)


@pytest.fixture
def make_rng() -> type[SeededRandomSource]:
    return SeededRandomSource
