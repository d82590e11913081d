"""
Comparison helpers for stock vs industry indicators.

- comparison_status / comparison_symbol: per-metric stock vs industry
  indicators (colour with a +/-10% band, symbol with a +/-5% band)
- score_to_rating: maps a 0-100 category score onto Good / Average / Poor
- bucket_category_score: the older per-sub-indicator 0/1/2 bucketing
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from config.analysis_config import BUCKET_SCORING, COMPARISON_TOLERANCES, SCORE_RATING_BANDS
from utils.numeric_utils import ieee_divide, is_valid_number
from metric_scoring.metric_schema import DividendConsistency, MetricCategory, RatingColor


@dataclass(frozen=True)
class ScoreRating:
    """A coarse rating on the 0-2 scale."""
    score: float
    rating: str
    color: RatingColor


def comparison_status(value: Any, industry: Any, lower_is_better: bool = False) -> RatingColor:
    """
    Colour a stock value against its industry average.

    green when better by more than the band, red when worse by more than
    the band, yellow otherwise. Non-numeric inputs ("N/A", labels) are
    always yellow.
    """
    if not (is_valid_number(value) and is_valid_number(industry)):
        return RatingColor.YELLOW

    band = COMPARISON_TOLERANCES['status_band']
    value, industry = float(value), float(industry)
    upper, lower = industry * (1 + band), industry * (1 - band)

    if lower_is_better:
        if value < lower:
            return RatingColor.GREEN
        if value > upper:
            return RatingColor.RED
        return RatingColor.YELLOW

    if value > upper:
        return RatingColor.GREEN
    if value < lower:
        return RatingColor.RED
    return RatingColor.YELLOW


def comparison_symbol(value: Any, industry: Any, lower_is_better: bool = False) -> str:
    """
    '<', '=' or '>' for value vs industry, with a +/-5% equality band on
    the ratio. Non-numeric inputs give '='.

    The symbol is the plain direction of the value; lower_is_better is
    accepted for symmetry with comparison_status and does not flip it.
    """
    if not (is_valid_number(value) and is_valid_number(industry)):
        return "="

    band = COMPARISON_TOLERANCES['symbol_band']
    ratio = ieee_divide(float(value), float(industry))
    if ratio > 1 + band:
        return ">"
    if ratio < 1 - band:
        return "<"
    return "="


def _rating_for(score: float, good_min: float, average_min: float, scale: float) -> ScoreRating:
    if score >= good_min:
        return ScoreRating(score=scale, rating="Good", color=RatingColor.GREEN)
    if score >= average_min:
        return ScoreRating(score=scale, rating="Average", color=RatingColor.YELLOW)
    return ScoreRating(score=scale, rating="Poor", color=RatingColor.RED)


def score_to_rating(score: float) -> ScoreRating:
    """
    Convert a 0-100 category score into a ScoreRating.

    The returned score is rescaled to 0-2 so that it lines up with
    bucket_category_score.
    """
    return _rating_for(
        score,
        SCORE_RATING_BANDS['good_min'],
        SCORE_RATING_BANDS['average_min'],
        scale=score / 100 * 2,
    )


# =============================================================================
# Legacy bucket scoring
# =============================================================================

def _bucket_higher(value: Optional[float], industry: Optional[float]) -> int:
    # a missing value is never better or worse
    if value is None or industry is None:
        return 1
    if value > industry * BUCKET_SCORING['upper_multiplier']:
        return 2
    if value < industry * BUCKET_SCORING['lower_multiplier']:
        return 0
    return 1


def _bucket_lower(value: float, industry: float) -> int:
    if value < industry * BUCKET_SCORING['lower_multiplier']:
        return 2
    if value > industry * BUCKET_SCORING['upper_multiplier']:
        return 0
    return 1


def _bucket_rsi(rsi: float) -> int:
    good, poor = BUCKET_SCORING['rsi_good'], BUCKET_SCORING['rsi_poor']
    if good['min'] <= rsi <= good['max']:
        return 2
    if rsi < poor['below'] or rsi > poor['above']:
        return 0
    return 1


def _bucket_dividend(consistency: DividendConsistency) -> int:
    if consistency in (DividendConsistency.HIGH, DividendConsistency.GOOD):
        return 2
    if consistency == DividendConsistency.MEDIUM:
        return 1
    return 0


def _bucket_points(category: MetricCategory, raw: Any, industry: Any) -> List[int]:
    if category == MetricCategory.PERFORMANCE:
        return [
            _bucket_higher(raw.revenue_growth, industry.revenue_growth),
            _bucket_higher(raw.profit_margin, industry.profit_margin),
            _bucket_higher(raw.return_on_capital, industry.return_on_capital),
        ]
    if category == MetricCategory.STABILITY:
        # beta is judged by its distance from 1.0
        return [
            _bucket_lower(raw.volatility, industry.volatility),
            _bucket_lower(abs(raw.beta - 1), abs(industry.beta - 1)),
            _bucket_dividend(raw.dividend_consistency),
        ]
    if category == MetricCategory.VALUE:
        return [
            _bucket_lower(raw.pe_ratio, industry.pe_ratio),
            _bucket_lower(raw.pb_ratio, industry.pb_ratio),
            _bucket_higher(raw.dividend_yield, industry.dividend_yield),
        ]
    return [
        _bucket_higher(raw.three_month_return, industry.three_month_return),
        _bucket_higher(raw.relative_performance, industry.relative_performance),
        _bucket_rsi(raw.rsi),
    ]


def bucket_category_score(category: MetricCategory, raw: Any, industry_record: Any) -> ScoreRating:
    """
    Score each sub-indicator 0 (worse), 1 (similar) or 2 (better) against
    the industry with a +/-10% band, and rate the average:
    Good >= 1.6, Average >= 0.8, else Poor.

    Args:
        category: MetricCategory or its name
        raw: the stock's raw metrics for the category
        industry_record: the industry averages for the same category
    """
    points = _bucket_points(MetricCategory(category), raw, industry_record)
    average = sum(points) / len(points)
    return _rating_for(
        average,
        BUCKET_SCORING['good_min_average'],
        BUCKET_SCORING['average_min_average'],
        scale=average,
    )
