"""
fixed-shape indexed access

instead of addressing array[index] directly, every slot is visited and the
requested one is multiplexed into the result with an arithmetic mask. the
number and kind of operations performed do not depend on the index.
"""

from typing import Sequence, Tuple

from zkpredicate.errors import OutOfBounds


def select(array: Sequence[int], index: int) -> int:
    """
    return array[index] by scanning and masking.

    raises OutOfBounds if no slot position equals index.
    """
    result = 0
    found = 0
    for position, value in enumerate(array):
        mask = int(position == index)
        result = mask * value + (1 - mask) * result
        found = found + mask
    if found != 1:
        raise OutOfBounds(index, len(array))
    return result


def select_pair(flat: Sequence[int], index: int) -> Tuple[int, int]:
    """select commitment pair `index` from a flat [c0, c1, c0, c1, ...] array"""
    return select(flat, 2 * index), select(flat, 2 * index + 1)
