"""
Rating classifier - qualitative labels from fixed thresholds.

Unlike the category scorers this does not use the ratio pipeline: each
category applies absolute margins (config/analysis_config.py) to the raw
values against the industry average.

Rule shape for every category:
- best tier when ALL sub-indicators clear their margin in the good direction
- worst tier when ANY sub-indicator crosses its margin in the bad direction
- otherwise the middle tier (Fair)
The best tier is checked first.
"""

from typing import Any, Callable, Dict

from config.analysis_config import MOMENTUM_RSI_BANDS, RATING_MARGINS, STABILITY_BETA_BAND
from utils.logger import setup_logger
from metric_scoring.metric_schema import (
    MetricCategory,
    MomentumMetrics,
    PerformanceMetrics,
    Rating,
    RatingColor,
    RatingLabel,
    StabilityMetrics,
    ValueMetrics,
)
from metric_scoring.ratings import explanations

logger = setup_logger('rating_classifier')

# (best, middle, worst) labels per category
CATEGORY_LABELS: Dict[MetricCategory, tuple] = {
    MetricCategory.PERFORMANCE: (RatingLabel.HIGH, RatingLabel.FAIR, RatingLabel.LOW),
    MetricCategory.STABILITY: (RatingLabel.HIGH, RatingLabel.FAIR, RatingLabel.UNSTABLE),
    MetricCategory.VALUE: (RatingLabel.GOOD, RatingLabel.FAIR, RatingLabel.POOR),
    MetricCategory.MOMENTUM: (RatingLabel.STRONG, RatingLabel.FAIR, RatingLabel.WEAK),
}

_TIER_COLORS = (RatingColor.GREEN, RatingColor.YELLOW, RatingColor.RED)


def _tier(category: MetricCategory, best: bool, worst: bool) -> tuple:
    """Return (label, color) for a category given the two rule outcomes."""
    index = 0 if best else 2 if worst else 1
    return CATEGORY_LABELS[category][index], _TIER_COLORS[index]


def classify_performance(stock: PerformanceMetrics, industry: PerformanceMetrics) -> Rating:
    margins = RATING_MARGINS['performance']
    fields = ('revenue_growth', 'profit_margin', 'return_on_capital')

    best = all(getattr(stock, f) > getattr(industry, f) + margins[f] for f in fields)
    worst = any(getattr(stock, f) < getattr(industry, f) - margins[f] for f in fields)

    label, color = _tier(MetricCategory.PERFORMANCE, best, worst)
    return Rating(label=label, color=color,
                  explanation=explanations.explain_performance(label, stock, industry))


def classify_stability(stock: StabilityMetrics, industry: StabilityMetrics) -> Rating:
    margin = RATING_MARGINS['stability']['volatility']
    beta_in_band = STABILITY_BETA_BAND['min'] <= stock.beta <= STABILITY_BETA_BAND['max']
    stock_dividend = stock.dividend_consistency.score
    industry_dividend = industry.dividend_consistency.score

    best = (
        industry.volatility - stock.volatility > margin
        and beta_in_band
        and stock_dividend >= industry_dividend
    )
    worst = (
        stock.volatility - industry.volatility > margin
        or not beta_in_band
        or stock_dividend < industry_dividend
    )

    label, color = _tier(MetricCategory.STABILITY, best, worst)
    return Rating(label=label, color=color,
                  explanation=explanations.explain_stability(label, stock, industry))


def classify_value(stock: ValueMetrics, industry: ValueMetrics) -> Rating:
    margins = RATING_MARGINS['value']
    stock_yield = stock.dividend_yield_value
    industry_yield = industry.dividend_yield_value

    best = (
        stock.pe_ratio < industry.pe_ratio - margins['pe_ratio']
        and stock.pb_ratio < industry.pb_ratio - margins['pb_ratio']
        and stock_yield > industry_yield + margins['dividend_yield']
    )
    worst = (
        stock.pe_ratio > industry.pe_ratio + margins['pe_ratio']
        or stock.pb_ratio > industry.pb_ratio + margins['pb_ratio']
        or stock_yield < industry_yield - margins['dividend_yield']
    )

    label, color = _tier(MetricCategory.VALUE, best, worst)
    return Rating(label=label, color=color,
                  explanation=explanations.explain_value(label, stock, industry))


def classify_momentum(stock: MomentumMetrics, industry: MomentumMetrics) -> Rating:
    margins = RATING_MARGINS['momentum']
    bands = MOMENTUM_RSI_BANDS

    best = (
        stock.three_month_return > industry.three_month_return + margins['three_month_return']
        and stock.relative_performance > industry.relative_performance + margins['relative_performance']
        and bands['strong_min'] <= stock.rsi <= bands['strong_max']
    )
    worst = (
        stock.three_month_return < industry.three_month_return - margins['three_month_return']
        or stock.relative_performance < industry.relative_performance - margins['relative_performance']
        or stock.rsi < bands['weak_below']
        or stock.rsi > bands['weak_above']
    )

    label, color = _tier(MetricCategory.MOMENTUM, best, worst)
    return Rating(label=label, color=color,
                  explanation=explanations.explain_momentum(label, stock, industry))


_CLASSIFIERS: Dict[MetricCategory, Callable[[Any, Any], Rating]] = {
    MetricCategory.PERFORMANCE: classify_performance,
    MetricCategory.STABILITY: classify_stability,
    MetricCategory.VALUE: classify_value,
    MetricCategory.MOMENTUM: classify_momentum,
}


def classify_rating(category: MetricCategory, raw: Any, industry_record: Any) -> Rating:
    """
    Classify one category of a stock.

    Args:
        category: MetricCategory or its name ('performance', ...)
        raw: the stock's raw metrics for that category
        industry_record: the industry benchmark for that same category

    Returns:
        Rating(label, color, explanation)
    """
    category = MetricCategory(category)
    rating = _CLASSIFIERS[category](raw, industry_record)
    logger.debug(f"{category.value} rated {rating.label.value} ({rating.color.value})")
    return rating
