"""Scroll-and-collect loop that grows the rendered price sample."""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, Protocol, Sequence

from .models import STOP_DEADLINE, STOP_STAGNANT, STOP_TARGET, CollectionState, PriceSample

LOGGER = logging.getLogger(__name__)

Sleeper = Callable[[float], Awaitable[None]]


class PriceSurface(Protocol):
    """The part of a page surface the collector drives."""

    async def scroll_to_bottom(self) -> None:
        ...

    async def sample_prices(self) -> PriceSample:
        ...


def average_price(sample: Sequence[int]) -> float:
    """Mean of ``sample``; an empty sample averages to ``0.0``."""

    if not sample:
        return 0.0
    return sum(sample) / len(sample)


def should_stop(state: CollectionState, target_sample_size: int, max_stagnant_rounds: int) -> Optional[str]:
    if len(state.current_sample) >= target_sample_size:
        return STOP_TARGET
    if state.stagnant_rounds >= max_stagnant_rounds:
        return STOP_STAGNANT
    return None


def record_sample(state: CollectionState, sample: PriceSample) -> None:
    """Replace the current sample and update the stagnation counter."""

    state.rounds += 1
    state.current_sample = list(sample)
    if len(sample) == state.previous_count:
        state.stagnant_rounds += 1
    else:
        state.stagnant_rounds = 0
    state.previous_count = len(sample)


async def collect_prices(
    surface: PriceSurface,
    target_sample_size: int,
    *,
    settle_delay: float = 3.0,
    max_stagnant_rounds: int = 3,
    max_duration: Optional[float] = None,
    sleep: Sleeper = asyncio.sleep,
) -> CollectionState:
    """Scroll, wait and resample until the target is met or growth stalls.

    Each round scrolls to the bottom, waits ``settle_delay`` seconds and then
    reads the full list of rendered prices. The loop ends once the sample
    holds ``target_sample_size`` prices or ``max_stagnant_rounds`` consecutive
    rounds saw no change in size. ``max_duration`` adds an optional wall-clock
    budget checked after every round; by default there is none.
    """

    state = CollectionState()
    started = time.monotonic()

    while True:
        reason = should_stop(state, target_sample_size, max_stagnant_rounds)
        if reason is not None:
            state.stop_reason = reason
            break
        if max_duration is not None and state.rounds and time.monotonic() - started >= max_duration:
            LOGGER.warning("Collection budget of %.1fs exhausted", max_duration)
            state.stop_reason = STOP_DEADLINE
            break

        LOGGER.debug("Scrolling to bottom (round %d)", state.rounds + 1)
        await surface.scroll_to_bottom()

        LOGGER.info("Waiting for new hotels to load... (stagnant rounds: %d)", state.stagnant_rounds)
        await sleep(settle_delay)

        record_sample(state, await surface.sample_prices())
        LOGGER.info("Found %d hotels so far", len(state.current_sample))

    return state


__all__ = ["PriceSurface", "average_price", "collect_prices", "record_sample", "should_stop"]
