"""Fan-out offsets for edges that share a vertical lane.

Several edges converging on the same lane would otherwise draw their
vertical segment on the same pixel column. Each one instead picks an offset
from a zig-zag sequence that alternates sign and shrinks towards the stroke
width, so the segments sit side by side inside the column gap.
"""

from __future__ import annotations

__all__ = ["lane_offset", "spacing_sequence"]


def _trunc_half(value: int) -> int:
    # Halve, rounding toward zero (Python's // floors).
    return -(-value // 2) if value < 0 else value // 2


def spacing_sequence(max_offset: int, min_offset: int) -> tuple[int, ...]:
    """Generate the signed offset sequence for lane fan-out.

    The sequence starts at ``0`` and continues with
    ``max_offset - 2 * min_offset``, its negation, then values that bounce
    between halving and growing by half again::

        >>> spacing_sequence(12, 2)
        (0, 8, -8, 4, -4, 6, -6, 3, -3, 4, -4)

    Generation stops once the next magnitude would be ``min_offset`` or
    smaller, or when the generator revisits a state it has already been in
    (small magnitudes can oscillate, e.g. ``3 -> 2 -> 3`` with
    ``min_offset=1``). Every element after the first therefore lies strictly
    between ``min_offset`` and ``max_offset`` in magnitude.

    Raises ValueError unless ``max_offset > min_offset > 0``.
    """
    if min_offset <= 0 or max_offset <= min_offset:
        raise ValueError(
            f"spacing needs max_offset > min_offset > 0, "
            f"got max_offset={max_offset}, min_offset={min_offset}"
        )

    result = [0]
    curr = max_offset - 2 * min_offset
    quarter_up = True
    seen: set[tuple[int, bool]] = set()

    while abs(curr) > min_offset and (curr, quarter_up) not in seen:
        seen.add((curr, quarter_up))
        result.append(curr)
        if curr > 0:
            curr = -curr
        elif quarter_up:
            curr = _trunc_half(curr) + (-curr)
            quarter_up = False
        else:
            curr = (-curr) - _trunc_half(curr)
            quarter_up = True

    return tuple(result)


def lane_offset(sequence: tuple[int, ...], count: int) -> int:
    """Pick the offset for the ``count``-th edge routed through a lane.

    The sequence is cycled with period ``len(sequence) - 1``, so its final
    element is never selected. A single-element sequence always yields
    that element.
    """
    if not sequence:
        raise ValueError("spacing sequence is empty")
    period = len(sequence) - 1
    if period == 0:
        return sequence[0]
    return sequence[count % period]
