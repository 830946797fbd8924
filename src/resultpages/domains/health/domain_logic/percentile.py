"""Population percentile estimate under a normal-distribution assumption.

The error function is the Abramowitz-Stegun 7.1.26 rational approximation
rather than ``math.erf`` so every deployment produces the same digits.
"""

from __future__ import annotations

import math

from resultpages.domains.health.domain_logic.units import round_int

# Abramowitz-Stegun 7.1.26 coefficients
A1 = 0.254829592
A2 = -0.284496736
A3 = 1.421413741
A4 = -1.453152027
A5 = 1.061405429
P = 0.3275911

MIN_PERCENTILE = 1
MAX_PERCENTILE = 99


def erf(x: float) -> float:
    """Approximate error function, max absolute error about 1.5e-7."""
    sign = -1 if x < 0 else 1
    absolute_x = abs(x)

    t = 1 / (1 + P * absolute_x)
    y = 1 - ((((A5 * t + A4) * t + A3) * t + A2) * t + A1) * t * math.exp(
        -absolute_x * absolute_x
    )
    return sign * y


def normal_cdf(z: float) -> float:
    return 0.5 * (1 + erf(z / math.sqrt(2)))


def percentile(value: float, mean: float, stddev: float) -> int:
    """Estimated percentile of ``value``, an integer in [1, 99].

    Raises:
        ValueError: if ``stddev`` is not positive.
    """
    if stddev <= 0:
        raise ValueError("Standard deviation must be greater than 0")

    z = (value - mean) / stddev
    estimate = round_int(normal_cdf(z) * 100)
    return max(MIN_PERCENTILE, min(MAX_PERCENTILE, estimate))


def ordinal(n: int) -> str:
    """``1`` -> ``1st``, ``22`` -> ``22nd``, ``13`` -> ``13th``."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"
