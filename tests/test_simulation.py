import random
from collections import defaultdict

from algonotes.simulation import DEFAULT_SEGMENTS, Event, main, simulate


class _FixedDelay:
    def __init__(self, delay):
        self.delay = delay

    def randint(self, low, high):
        return self.delay


def _by_bus(events):
    grouped = defaultdict(list)
    for event in events:
        grouped[event.name].append(event)
    return grouped


def test_times_never_decrease():
    events = simulate(rng=random.Random(1))
    times = [e.time for e in events]
    assert times == sorted(times)


def test_every_bus_visits_every_station_in_order():
    events = simulate(rng=random.Random(2))
    grouped = _by_bus(events)
    assert len(grouped) == 30
    for visits in grouped.values():
        assert [v.station for v in visits] == list(range(len(DEFAULT_SEGMENTS) + 1))


def test_leg_durations_within_delay_bounds():
    events = simulate(rng=random.Random(3))
    for visits in _by_bus(events).values():
        for before, after in zip(visits, visits[1:]):
            base = DEFAULT_SEGMENTS[before.station]
            assert base <= after.time - before.time <= base + 5


def test_departures_follow_interval():
    events = simulate(bus_count=4, interval=20, rng=random.Random(4))
    starts = sorted(e.time for e in events if e.station == 0)
    assert starts == [0, 20, 40, 60]


def test_zero_delay_is_deterministic():
    events = simulate(bus_count=1, interval=20, segments=(5, 9), rng=_FixedDelay(0))
    assert events == [Event("B1", 0, 0), Event("B1", 5, 1), Event("B1", 14, 2)]


def test_max_delay():
    events = simulate(bus_count=1, interval=20, segments=(5,), rng=_FixedDelay(5))
    assert [e.time for e in events] == [0, 10]


def test_no_segments():
    events = simulate(bus_count=3, interval=7, segments=(), rng=random.Random(0))
    assert [(e.name, e.time, e.station) for e in events] == [
        ("B1", 0, 0),
        ("B2", 7, 0),
        ("B3", 14, 0),
    ]


def test_same_seed_same_run():
    first = simulate(rng=random.Random(9))
    second = simulate(rng=random.Random(9))
    assert len(first) == 30 * (len(DEFAULT_SEGMENTS) + 1)
    assert [(e.name, e.time, e.station) for e in first] == [
        (e.name, e.time, e.station) for e in second
    ]


def test_main_output(capsys):
    assert main(["--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 30 * (len(DEFAULT_SEGMENTS) + 1)
    assert lines[0] == "Current time: 0, Bus: B1, Station: 0"