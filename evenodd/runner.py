"""Generating numbers and sorting them into even and odd lists in threads."""

from __future__ import annotations

import random
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from evenodd.config import Config

RAND_MAX = 2147483647


@dataclass
class SortResult:
    """Numbers collected by the workers, split by parity."""

    even: list[int] = field(default_factory=list)
    odd: list[int] = field(default_factory=list)


def generate_unique_numbers(count: int, rng: random.Random) -> list[int]:
    """Draw ``count`` distinct random numbers in ``[0, RAND_MAX]``."""
    seen: set[int] = set()
    numbers: list[int] = []
    while len(numbers) < count:
        number = rng.randint(0, RAND_MAX)
        if number in seen:
            continue
        seen.add(number)
        numbers.append(number)
    return numbers


def split_even_odd(batches: Iterable[Sequence[int]]) -> SortResult:
    """Sort every batch in its own thread into shared even and odd lists.

    Each batch keeps its own order within the result lists; how the batches
    interleave depends on thread scheduling.
    """
    result = SortResult()
    even_lock = threading.Lock()
    odd_lock = threading.Lock()

    def worker(numbers: Sequence[int]) -> None:
        for number in numbers:
            if number % 2 == 0:
                with even_lock:
                    result.even.append(number)
            else:
                with odd_lock:
                    result.odd.append(number)

    started: list[threading.Thread] = []
    try:
        for batch in batches:
            thread = threading.Thread(target=worker, args=(batch,))
            thread.start()
            started.append(thread)
    finally:
        for thread in started:
            thread.join()
    return result


def format_list(numbers: Iterable[int]) -> str:
    """Render numbers as ``Position: i, --> Value: n`` lines."""
    return "".join(
        f"Position: {position}, --> Value: {number}\n"
        for position, number in enumerate(numbers)
    )


def run_program(config: Config, rng: random.Random | None = None) -> SortResult:
    """Give each thread its own unique random numbers and split them by parity."""
    rng = rng if rng is not None else random.Random()
    batches = [
        generate_unique_numbers(config.numbers_per_thread, rng)
        for _ in range(config.thread_num)
    ]
    return split_even_odd(batches)