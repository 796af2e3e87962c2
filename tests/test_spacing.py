"""Tests for the lane fan-out spacing sequence.

Invariants checked here:

1. The sequence starts at 0 and every later element lies strictly between
   ``min_offset`` and ``max_offset`` in magnitude.
2. Generation terminates for every valid input, including those whose
   magnitudes oscillate without ever reaching ``min_offset``.
3. Lookups cycle with period ``len(sequence) - 1``.
"""

from __future__ import annotations

import threading

import pytest

from lanegraph.layout.spacing import lane_offset, spacing_sequence


def _generate_within(max_offset, min_offset, timeout=5.0):
    """Run spacing_sequence on a daemon thread; fail if it does not return."""
    result = []
    worker = threading.Thread(
        target=lambda: result.append(spacing_sequence(max_offset, min_offset)),
        daemon=True,
    )
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        pytest.fail(
            f"spacing_sequence({max_offset}, {min_offset}) did not finish "
            f"within {timeout}s"
        )
    return result[0]


def test_default_sequence():
    """The default gap (24) and stroke width (2) give the known zig-zag."""
    assert spacing_sequence(12, 2) == (0, 8, -8, 4, -4, 6, -6, 3, -3, 4, -4)


def test_starts_with_largest_offset():
    seq = spacing_sequence(20, 3)
    assert seq[:3] == (0, 14, -14)


def test_alternates_sign_after_zero():
    seq = spacing_sequence(12, 2)
    for pos, neg in zip(seq[1::2], seq[2::2]):
        assert pos > 0
        assert neg == -pos


def test_oscillating_magnitudes_terminate():
    """min_offset=1 never reaches 1 (magnitudes cycle 3, 2, 3, ...)."""
    seq = _generate_within(5, 1)
    assert seq == (0, 3, -3, 2, -2)


def test_first_value_within_min_gives_zero_only():
    assert spacing_sequence(5, 3) == (0,)


@pytest.mark.parametrize("max_offset", range(3, 60))
def test_bounds_for_all_min_offsets(max_offset):
    """Every element after the first is strictly inside (min, max)."""
    for min_offset in range(1, max_offset):
        if max_offset <= 2 * min_offset:
            continue
        seq = _generate_within(max_offset, min_offset)
        assert seq[0] == 0
        # Bounded by the number of distinct (value, phase) states
        assert len(seq) <= 4 * max_offset + 1
        for value in seq[1:]:
            assert min_offset < abs(value) < max_offset


@pytest.mark.parametrize("max_offset,min_offset", [
    (2, 2),
    (1, 2),
    (10, 0),
    (10, -1),
])
def test_invalid_arguments(max_offset, min_offset):
    with pytest.raises(ValueError):
        spacing_sequence(max_offset, min_offset)


class TestLaneOffset:
    def test_indexes_directly_below_period(self):
        seq = spacing_sequence(12, 2)
        assert [lane_offset(seq, n) for n in range(4)] == [0, 8, -8, 4]

    def test_last_element_never_selected(self):
        seq = (0, 5, -5, 9)
        picked = {lane_offset(seq, n) for n in range(50)}
        assert picked == {0, 5, -5}

    def test_wraps_with_period_len_minus_one(self):
        seq = spacing_sequence(12, 2)
        period = len(seq) - 1
        for n in range(30):
            assert lane_offset(seq, n) == lane_offset(seq, n + period)

    def test_single_element(self):
        assert lane_offset((0,), 0) == 0
        assert lane_offset((0,), 7) == 0

    def test_empty_sequence(self):
        with pytest.raises(ValueError):
            lane_offset((), 1)


@pytest.mark.parametrize("max_offset,min_offset", [(17, 5), (5, 1), (40, 1), (23, 7)])
def test_magnitudes_skipping_min_offset_terminate(max_offset, min_offset):
    """Magnitudes that jump past min_offset still end the sequence."""
    seq = _generate_within(max_offset, min_offset)
    for value in seq[1:]:
        assert abs(value) > min_offset
