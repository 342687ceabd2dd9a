import random

import pytest

from chart.failures import FailureOverlay
from chart.series import Sample, SeriesStore


def test_upsert_keeps_positions_sorted():
    store = SeriesStore()
    for position in (120_000, 30_000, 300_000, 0, 60_000):
        store.upsert(position, 50.0)
    assert store.positions() == [0, 30_000, 60_000, 120_000, 300_000]


def test_upsert_overwrites_existing_position():
    store = SeriesStore()
    assert store.upsert(60_000, 81.0) is True
    assert store.upsert(60_000, 79.2) is False
    assert store.samples == [Sample(60_000, 79.2)]


def test_upsert_inserts_before_larger_and_after_smaller():
    store = SeriesStore()
    store.upsert(10, 1.0)
    store.upsert(30, 3.0)
    store.upsert(20, 2.0)
    assert [(s.position, s.value) for s in store] == [(10, 1.0), (20, 2.0), (30, 3.0)]


def test_upsert_does_not_clamp_values():
    store = SeriesStore()
    store.upsert(5, 140.0)
    store.upsert(6, -3.0)
    assert store.values() == [140.0, -3.0]


@pytest.mark.parametrize("seed", range(10))
def test_random_arrival_order_is_sorted_unique_last_write_wins(seed):
    rng = random.Random(seed)
    store = SeriesStore()
    expected = {}
    for _ in range(200):
        position = rng.randrange(0, 40) * 1_000
        value = round(rng.uniform(0, 100), 2)
        store.upsert(position, value)
        expected[position] = value

    positions = store.positions()
    assert positions == sorted(set(positions))
    assert {s.position: s.value for s in store} == expected


def test_mark_is_idempotent():
    overlay = FailureOverlay()
    assert overlay.mark(150_000) is True
    assert overlay.mark(150_000) is False
    assert overlay.positions() == [150_000]


def test_markers_keep_arrival_order():
    overlay = FailureOverlay()
    for position in (40, 10, 30, 10):
        overlay.mark(position)
    assert overlay.positions() == [40, 10, 30]
    assert len(overlay) == 3
