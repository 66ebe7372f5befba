# shuffle.py
# -----------------------------------------------------------------------------
# Fisher–Yates permutation over any sequence, driven by an injected source.
# The source only needs randrange(n) -> uniform int in [0, n).
# -----------------------------------------------------------------------------
from typing import List, Sequence, TypeVar

T = TypeVar("T")


def shuffled(items: Sequence[T], rng) -> List[T]:
    """
    Return a uniformly permuted copy of `items`; the input is left untouched.

    Walks i = len-1 .. 0 and swaps position i with rng.randrange(i + 1).
    A source that always returns 0 rotates [a, b, c, d] into [b, c, d, a];
    one that always returns n-1 leaves the order unchanged.
    """
    out = list(items)
    for i in range(len(out) - 1, -1, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out


__all__ = ["shuffled"]
