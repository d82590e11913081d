"""
Normalizer - clamps ratios into [0, 1] and builds the SI / IM terms.

Denominator policy
------------------
Ratios over zero or negative benchmarks are meaningless (an industry with a
negative 3-month return flips the sign of every comparison). With the guard
on (settings.RATIO_GUARD, the default):

- higher-is-better, denominator <= 0: 1.0 when the value beats the
  reference, else 0.0 (the clamped limit of value/0 without the NaN at 0/0)
- lower-is-better, either side <= 0: 0.0 (a loss-making P/E earns nothing)

With the guard off, the plain division is kept and a zero denominator gives
+/-inf or NaN like IEEE float division; NaN then flows through to the score.
"""

import math
from typing import Optional

from config.settings import settings
from utils.numeric_utils import ieee_divide
from metric_scoring.scorers.scoring_config import BETA_DEVIATION_PENALTY, RSI_DEVIATION_PENALTY


def normalize(value: float) -> float:
    """Clamp a value into [0, 1]. NaN is returned unchanged."""
    if math.isnan(value):
        return value
    return min(1.0, max(0.0, value))


def _guard_enabled(guard: Optional[bool]) -> bool:
    return settings.RATIO_GUARD if guard is None else guard


def higher_is_better(value: float, reference: float, guard: Optional[bool] = None) -> float:
    """Normalized value/reference (a value above its reference scores 1.0)."""
    if _guard_enabled(guard) and reference <= 0:
        return 1.0 if value > reference else 0.0
    return normalize(ieee_divide(value, reference))


def lower_is_better(value: float, reference: float, guard: Optional[bool] = None) -> float:
    """Normalized reference/value (a value below its reference scores 1.0)."""
    if _guard_enabled(guard) and (value <= 0 or reference <= 0):
        return 0.0
    return normalize(ieee_divide(reference, value))


def beta_score(beta: float) -> float:
    """Closeness of beta to 1.0: (100 - |1 - beta| * 50) / 100, clamped."""
    return normalize((100.0 - abs(1.0 - beta) * BETA_DEVIATION_PENALTY) / 100.0)


def rsi_score(stock_rsi: float, industry_rsi: float) -> float:
    """Closeness of a stock's RSI to its industry: (100 - |diff| * 2) / 100, clamped."""
    return normalize((100.0 - abs(industry_rsi - stock_rsi) * RSI_DEVIATION_PENALTY) / 100.0)
