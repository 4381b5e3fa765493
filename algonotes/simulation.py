"""Discrete event simulation of buses travelling along a line of stations."""

from __future__ import annotations

import argparse
import heapq
import itertools
import random
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_SEGMENTS = (5, 9, 8, 6, 7, 6, 4, 7)
MAX_DELAY = 5


@dataclass(frozen=True)
class Event:
    """A bus reaching a station at a moment in time."""

    name: str
    time: int
    station: int


def simulate(
    bus_count: int = 30,
    interval: int = 20,
    segments: Sequence[int] = DEFAULT_SEGMENTS,
    rng: Optional[random.Random] = None,
) -> list[Event]:
    """Run the simulation and return the events in the order they are handled.

    Buses leave station 0 every *interval* time units. Each leg takes its
    entry in *segments* plus a random delay between 0 and 5.
    """
    if rng is None:
        rng = random.Random()
    segments = tuple(segments)
    order = itertools.count()
    queue = [
        (i * interval, next(order), Event(f"B{i + 1}", i * interval, 0))
        for i in range(bus_count)
    ]
    heapq.heapify(queue)
    handled = []
    while queue:
        _, _, current = heapq.heappop(queue)
        handled.append(current)
        if current.station != len(segments):
            delay = rng.randint(0, MAX_DELAY)
            arrival = Event(
                current.name,
                current.time + segments[current.station] + delay,
                current.station + 1,
            )
            heapq.heappush(queue, (arrival.time, next(order), arrival))
    return handled


def main(argv: list[str] | None = None) -> int:
    """Print every event of a simulation run."""
    parser = argparse.ArgumentParser(description="Simulate buses along a line.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    for event in simulate(rng=random.Random(args.seed)):
        print(f"Current time: {event.time}, Bus: {event.name}, Station: {event.station}")
    return 0


if __name__ == "__main__":
    sys.exit(main())