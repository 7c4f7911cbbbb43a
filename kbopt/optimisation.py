"""Layout optimisation by simulated annealing over key swaps."""

from __future__ import annotations

import math
import random
from collections.abc import Callable
from enum import Enum

from .analysis import simple_sfbs
from .corpus import Corpus
from .layout import SplitLayout

AcceptFunc = Callable[[int, int, float, float], float]


class AcceptWorse(str, Enum):
    """How willing the optimiser is to accept a worse layout over time."""

    ALWAYS = "always"
    DROP_SLOW = "drop-slow"
    TEMP = "temp"
    DROP_FAST = "drop-fast"
    NEVER = "never"

    def __str__(self) -> str:
        return self.value


def _remaining(g: int, ng: int) -> float:
    return 1.0 - g / ng


def accept_function(name: AcceptWorse | str) -> AcceptFunc:
    """Return the probability of accepting a worse layout at generation g of ng."""
    try:
        kind = AcceptWorse(name)
    except ValueError:
        raise ValueError(f"unknown accept worse function: {name}") from None

    if kind is AcceptWorse.ALWAYS:
        return lambda g, ng, e0, e1: 1.0
    if kind is AcceptWorse.NEVER:
        return lambda g, ng, e0, e1: 0.0
    if kind is AcceptWorse.DROP_SLOW:
        return lambda g, ng, e0, e1: (math.cos(_remaining(g, ng) * math.pi) + 1.0) / 2.0
    if kind is AcceptWorse.TEMP:
        return lambda g, ng, e0, e1: _remaining(g, ng)
    return lambda g, ng, e0, e1: math.exp(-3.0 * (1 - _remaining(g, ng)))


def mutate(layout: SplitLayout, rng: random.Random) -> None:
    """Swap two random keys that are neither empty nor pinned."""
    movable = [
        (index, rune)
        for index, (rune, pinned) in enumerate(zip(layout.runes, layout.pinned))
        if rune is not None and not pinned
    ]
    if len(movable) < 2:
        raise ValueError(f"Not enough keys on this layout to make a swap: {len(movable)}")

    i = rng.randrange(len(movable))
    j = rng.randrange(len(movable))
    while j == i:
        j = rng.randrange(len(movable))

    (pos_a, rune_a), (pos_b, rune_b) = movable[i], movable[j]
    layout.runes[pos_a], layout.runes[pos_b] = layout.runes[pos_b], layout.runes[pos_a]
    info = layout.rune_info
    info[rune_a], info[rune_b] = info[rune_b], info[rune_a]


def optimise(
    layout: SplitLayout,
    corpus: Corpus,
    generations: int,
    accept_worse: AcceptWorse | str,
    rng: random.Random | None = None,
) -> SplitLayout:
    """Minimise same-finger bigrams by simulated annealing; the input is left unchanged.

    Prints the best fitness whenever it improves.
    """
    if generations < 1:
        raise ValueError(f"number of generations must be above 0. Got: {generations}")
    accept = accept_function(accept_worse)
    rng = rng if rng is not None else random.Random()

    current = layout.clone()
    current_fit = simple_sfbs(current, corpus)
    best, best_fit = current, current_fit
    reported = math.inf

    def report(generation: int) -> None:
        nonlocal reported
        if best_fit == reported:
            return
        print(f"Best fitness at generation {generation}: {100 * best_fit:.3f}%")
        reported = best_fit

    report(0)
    for g in range(generations):
        candidate = current.clone()
        mutate(candidate, rng)
        fit = simple_sfbs(candidate, corpus)
        if fit < current_fit or rng.random() < accept(g, generations, current_fit, fit):
            current, current_fit = candidate, fit
        if current_fit < best_fit:
            best, best_fit = current, current_fit
        report(g + 1)

    best = best.clone()
    best.filename = "best.kb"
    best.name = "best"
    return best