"""Tests for the scroll-and-collect loop."""

from __future__ import annotations

import math
from typing import List, Sequence

import pytest

from hotel_scout.collector import average_price, collect_prices
from hotel_scout.models import STOP_DEADLINE, STOP_STAGNANT, STOP_TARGET


class _SizedSurface:
    """Surface whose n-th sample holds ``sizes[n]`` prices, then repeats the last size."""

    def __init__(self, sizes: Sequence[int]) -> None:
        self.sizes = list(sizes)
        self.scrolls = 0
        self.samples = 0

    async def scroll_to_bottom(self) -> None:
        self.scrolls += 1

    async def sample_prices(self) -> List[int]:
        size = self.sizes[min(self.samples, len(self.sizes) - 1)]
        self.samples += 1
        return [1000 + index for index in range(size)]


class _Sleeper:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.mark.anyio
async def test_fixed_growth_reaches_target_within_bound() -> None:
    growth, target = 7, 50
    surface = _SizedSurface([growth * n for n in range(1, 20)])

    state = await collect_prices(surface, target, settle_delay=0, sleep=_Sleeper())

    assert state.stop_reason == STOP_TARGET
    assert state.rounds == math.ceil(target / growth)
    assert len(state.current_sample) >= target
    assert surface.scrolls == surface.samples == state.rounds


@pytest.mark.anyio
async def test_stops_after_three_rounds_without_growth() -> None:
    surface = _SizedSurface([5, 12, 20])

    state = await collect_prices(surface, 50, settle_delay=0, sleep=_Sleeper())

    assert state.stop_reason == STOP_STAGNANT
    assert state.rounds == 6
    assert state.stagnant_rounds == 3
    assert state.previous_count == 20
    assert len(state.current_sample) == 20


@pytest.mark.anyio
async def test_growth_resets_the_stagnation_counter() -> None:
    surface = _SizedSurface([10, 10, 10, 11, 11, 11, 11])

    state = await collect_prices(surface, 50, settle_delay=0, sleep=_Sleeper())

    assert state.stop_reason == STOP_STAGNANT
    # 10 (growth), 10, 10 (two stagnant), 11 (reset), then three stagnant rounds.
    assert state.rounds == 7
    assert len(state.current_sample) == 11


@pytest.mark.anyio
async def test_empty_page_stagnates_immediately() -> None:
    surface = _SizedSurface([0])

    state = await collect_prices(surface, 50, settle_delay=0, sleep=_Sleeper())

    assert state.stop_reason == STOP_STAGNANT
    assert state.rounds == 3
    assert state.current_sample == []


@pytest.mark.anyio
async def test_sample_is_replaced_not_accumulated() -> None:
    surface = _SizedSurface([4, 2, 2, 2])

    state = await collect_prices(surface, 50, settle_delay=0, sleep=_Sleeper())

    assert len(state.current_sample) == 2
    assert state.rounds == 5


@pytest.mark.anyio
async def test_settle_delay_is_applied_every_round() -> None:
    sleeper = _Sleeper()
    surface = _SizedSurface([10, 25, 50])

    state = await collect_prices(surface, 50, settle_delay=1.25, sleep=sleeper)

    assert state.rounds == 3
    assert sleeper.delays == [1.25, 1.25, 1.25]


@pytest.mark.anyio
async def test_optional_deadline_stops_collection() -> None:
    surface = _SizedSurface([n for n in range(1, 100)])

    state = await collect_prices(surface, 500, settle_delay=0, max_duration=0, sleep=_Sleeper())

    assert state.stop_reason == STOP_DEADLINE
    assert state.rounds == 1


@pytest.mark.anyio
async def test_custom_stagnation_limit() -> None:
    surface = _SizedSurface([3])

    state = await collect_prices(
        surface, 50, settle_delay=0, max_stagnant_rounds=1, sleep=_Sleeper()
    )

    assert state.stop_reason == STOP_STAGNANT
    assert state.rounds == 2


def test_average_price() -> None:
    assert average_price([100, 200, 300]) == 200
    assert average_price([]) == 0.0
