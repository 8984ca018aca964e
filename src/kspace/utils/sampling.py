"""
Random draws shared by the seeding strategies.
"""

import math
import torch

_INT64_MIN = -2 ** 63
_INT64_MAX = 2 ** 63 - 1


def randint_inclusive(low: int, high: int, generator: torch.Generator) -> int:
    """Draw an integer uniformly from [low, high].

    Ranges that fit in int64 go through ``torch.randint``. Wider ranges
    (e.g. sums of squared distances of epoch timestamps) are drawn by scaling
    a float64 uniform, which is as uniform as float64 resolution allows.

    Raises:
        ValueError: If low > high
    """
    low, high = int(low), int(high)
    if low > high:
        raise ValueError(f"Empty sampling range [{low}, {high}]")

    if low >= _INT64_MIN and high < _INT64_MAX and high - low < _INT64_MAX:
        return int(torch.randint(low, high + 1, (1,), generator=generator).item())

    span = high - low + 1
    u = torch.rand(1, generator=generator, dtype=torch.float64).item()
    return low + min(math.floor(u * span), span - 1)
