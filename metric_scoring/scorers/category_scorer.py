"""
Category scorers - convert raw per-stock fundamentals into 0-100 scores.

Every category runs the same three steps:
1. SI: stock vs industry ratio per sub-indicator, normalized to [0, 1]
2. IM: industry vs market ratio per sub-indicator, normalized to [0, 1]
3. score = sum(weight * SI * IM), reported as round(min(100, score * 100))

Beta (stability) and RSI (momentum) replace the SI ratio with a closeness
score; dividend consistency is mapped to its numeric score first. Weights and
polarity come from scoring_config.CATEGORY_WEIGHTS.

The explain_* functions return the full CategoryScoreBreakdown (every
intermediate ratio); the score_* functions return just the integer score.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from config.constants import SCORE_MAX, SCORE_MIN
from utils.logger import setup_logger
from utils.numeric_utils import round_half_up
from metric_scoring.metric_schema import (
    BenchmarkRecord,
    MetricCategory,
    MomentumMetrics,
    PerformanceMetrics,
    StabilityMetrics,
    ValueMetrics,
)
from metric_scoring.benchmarks import get_market_benchmark
from metric_scoring.scorers.normalizer import beta_score, higher_is_better, lower_is_better, rsi_score
from metric_scoring.scorers.scoring_config import CATEGORY_WEIGHTS

logger = setup_logger('category_scorer')


@dataclass
class SubIndicatorTrace:
    """Intermediate values for one sub-indicator."""
    name: str
    stock_value: float
    industry_value: float
    market_value: float
    weight: float
    si: float
    im: float

    @property
    def contribution(self) -> float:
        return self.weight * self.si * self.im


@dataclass
class CategoryScoreBreakdown:
    """All intermediate ratios behind one category score."""
    category: str
    industry: str
    sub_indicators: List[SubIndicatorTrace] = field(default_factory=list)

    @property
    def weighted_score(self) -> float:
        return sum(item.contribution for item in self.sub_indicators)

    @property
    def score(self) -> Optional[int]:
        return finalize_score(self.weighted_score)

    def get(self, name: str) -> Optional[SubIndicatorTrace]:
        for item in self.sub_indicators:
            if item.name == name:
                return item
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'industry': self.industry,
            'score': self.score,
            'weighted_score': self.weighted_score,
            'sub_indicators': {
                item.name: {
                    'stock': item.stock_value,
                    'industry': item.industry_value,
                    'market': item.market_value,
                    'weight': item.weight,
                    'si': item.si,
                    'im': item.im,
                    'contribution': item.contribution,
                }
                for item in self.sub_indicators
            },
        }


def finalize_score(weighted_score: float) -> Optional[int]:
    """
    Convert a weighted [0, 1] score to an integer 0-100.

    Returns None when the weighted score is not finite (only reachable with
    the ratio guard disabled); callers must treat None as an invalid score.
    """
    if not math.isfinite(weighted_score):
        return None
    return max(SCORE_MIN, round_half_up(min(SCORE_MAX, weighted_score * 100)))


def _read(record: Any, name: str) -> float:
    if name == 'dividend_yield':
        return record.dividend_yield_value
    if name == 'dividend_consistency':
        return float(record.dividend_consistency.score)
    return float(getattr(record, name))


def _ratio_terms(polarity: str, stock: float, industry: float, market: float, guard: Optional[bool]):
    if polarity == 'lower':
        return lower_is_better(stock, industry, guard), lower_is_better(industry, market, guard)
    if polarity == 'beta':
        return beta_score(stock), higher_is_better(industry, market, guard)
    if polarity == 'rsi':
        return rsi_score(stock, industry), higher_is_better(industry, market, guard)
    # 'higher' and 'category' (already mapped to a numeric score)
    return higher_is_better(stock, industry, guard), higher_is_better(industry, market, guard)


def _explain(
    category: MetricCategory,
    raw: Any,
    industry: BenchmarkRecord,
    market: Optional[BenchmarkRecord],
    guard: Optional[bool]
) -> CategoryScoreBreakdown:
    if market is None:
        market = get_market_benchmark()
    industry_avgs = industry.for_category(category)
    market_avgs = market.for_category(category)

    breakdown = CategoryScoreBreakdown(category=category.value, industry=industry.name)

    for name, config in CATEGORY_WEIGHTS[category.value].items():
        stock_value = _read(raw, name)
        industry_value = _read(industry_avgs, name)
        market_value = _read(market_avgs, name)
        si, im = _ratio_terms(config['polarity'], stock_value, industry_value, market_value, guard)
        breakdown.sub_indicators.append(SubIndicatorTrace(
            name=name,
            stock_value=stock_value,
            industry_value=industry_value,
            market_value=market_value,
            weight=config['weight'],
            si=si,
            im=im,
        ))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"{category.value} score for industry {industry.name}:")
        for item in breakdown.sub_indicators:
            logger.debug(
                f"- {item.name}: stock {item.stock_value}, industry {item.industry_value}, "
                f"market {item.market_value}, SI {item.si:.2f}, IM {item.im:.2f}, "
                f"contribution {item.contribution:.3f}"
            )
        logger.debug(f"- final {category.value} score: {breakdown.score}")

    return breakdown


# =============================================================================
# Per-category entry points
# =============================================================================

def explain_performance(
    raw: PerformanceMetrics,
    industry: BenchmarkRecord,
    market: Optional[BenchmarkRecord] = None,
    guard: Optional[bool] = None
) -> CategoryScoreBreakdown:
    """Revenue growth 40%, profit margin 30%, return on capital 30% (all higher-is-better)."""
    return _explain(MetricCategory.PERFORMANCE, raw, industry, market, guard)


def explain_stability(
    raw: StabilityMetrics,
    industry: BenchmarkRecord,
    market: Optional[BenchmarkRecord] = None,
    guard: Optional[bool] = None
) -> CategoryScoreBreakdown:
    """Volatility 55% (lower-is-better), beta 25% (closeness to 1), dividend consistency 20%."""
    return _explain(MetricCategory.STABILITY, raw, industry, market, guard)


def explain_value(
    raw: ValueMetrics,
    industry: BenchmarkRecord,
    market: Optional[BenchmarkRecord] = None,
    guard: Optional[bool] = None
) -> CategoryScoreBreakdown:
    """P/E 50% and P/B 30% (lower-is-better), dividend yield 20% ("N/A" reads as 0)."""
    return _explain(MetricCategory.VALUE, raw, industry, market, guard)


def explain_momentum(
    raw: MomentumMetrics,
    industry: BenchmarkRecord,
    market: Optional[BenchmarkRecord] = None,
    guard: Optional[bool] = None
) -> CategoryScoreBreakdown:
    """3-month return 50% (plain stock/industry ratio), RSI 50% (closeness to industry RSI)."""
    return _explain(MetricCategory.MOMENTUM, raw, industry, market, guard)


def score_performance(raw: PerformanceMetrics, industry: BenchmarkRecord,
                      market: Optional[BenchmarkRecord] = None, guard: Optional[bool] = None) -> Optional[int]:
    return explain_performance(raw, industry, market, guard).score


def score_stability(raw: StabilityMetrics, industry: BenchmarkRecord,
                    market: Optional[BenchmarkRecord] = None, guard: Optional[bool] = None) -> Optional[int]:
    return explain_stability(raw, industry, market, guard).score


def score_value(raw: ValueMetrics, industry: BenchmarkRecord,
                market: Optional[BenchmarkRecord] = None, guard: Optional[bool] = None) -> Optional[int]:
    return explain_value(raw, industry, market, guard).score


def score_momentum(raw: MomentumMetrics, industry: BenchmarkRecord,
                   market: Optional[BenchmarkRecord] = None, guard: Optional[bool] = None) -> Optional[int]:
    return explain_momentum(raw, industry, market, guard).score


_EXPLAINERS = {
    MetricCategory.PERFORMANCE: explain_performance,
    MetricCategory.STABILITY: explain_stability,
    MetricCategory.VALUE: explain_value,
    MetricCategory.MOMENTUM: explain_momentum,
}


def explain_category(
    category: MetricCategory,
    raw: Any,
    industry: BenchmarkRecord,
    market: Optional[BenchmarkRecord] = None,
    guard: Optional[bool] = None
) -> CategoryScoreBreakdown:
    """Dispatch to the explainer for a category name or MetricCategory."""
    return _EXPLAINERS[MetricCategory(category)](raw, industry, market, guard)


def score_category(
    category: MetricCategory,
    raw: Any,
    industry: BenchmarkRecord,
    market: Optional[BenchmarkRecord] = None,
    guard: Optional[bool] = None
) -> Optional[int]:
    return explain_category(category, raw, industry, market, guard).score
