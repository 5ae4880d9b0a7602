from __future__ import annotations

from typing import Iterable, List

import pytest


class ConstantSource:
    """Random source that always returns the same value."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.calls = 0

    def next_uint(self) -> int:
        self.calls += 1
        return self.value


class ScriptedSource:
    """Random source that replays a fixed list of draws, then repeats the last one."""

    def __init__(self, draws: Iterable[int]) -> None:
        self.draws: List[int] = list(draws)
        self.calls = 0

    def next_uint(self) -> int:
        index = min(self.calls, len(self.draws) - 1)
        self.calls += 1
        return self.draws[index]


@pytest.fixture()
def zero_source() -> ConstantSource:
    return ConstantSource(0)
