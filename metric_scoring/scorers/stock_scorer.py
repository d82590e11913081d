"""
Stock scorer - scores a whole stock profile across all four categories.

Resolves the stock's industry against the benchmark tables (unknown
industries fall back to "Default"), runs the category scorers and the
rating classifier, and returns a StockScorecard.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from config.constants import CATEGORIES
from utils.logger import setup_logger
from utils.numeric_utils import round_half_up
from metric_scoring.metric_schema import MetricCategory, Rating, StockProfile
from metric_scoring.benchmarks import BenchmarkTables, benchmark_tables
from metric_scoring.scorers.category_scorer import score_category
from metric_scoring.ratings.rating_classifier import classify_rating

logger = setup_logger('stock_scorer')


@dataclass
class StockScorecard:
    """Scores and ratings for one stock."""
    ticker: str
    name: str
    industry: str
    benchmark_industry: str
    scores: Dict[str, Optional[int]] = field(default_factory=dict)
    ratings: Dict[str, Rating] = field(default_factory=dict)
    warnings: list = field(default_factory=list)

    @property
    def overall_score(self) -> Optional[int]:
        """Rounded mean of the valid category scores (None if there are none)."""
        valid = [score for score in self.scores.values() if score is not None]
        if not valid:
            return None
        return round_half_up(sum(valid) / len(valid))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ticker': self.ticker,
            'name': self.name,
            'industry': self.industry,
            'benchmark_industry': self.benchmark_industry,
            'overall_score': self.overall_score,
            'scores': dict(self.scores),
            'ratings': {
                category: {'label': rating.label.value, 'color': rating.color.value}
                for category, rating in self.ratings.items()
            },
            'warnings': list(self.warnings),
        }


def get_metric_score(
    stock: StockProfile,
    category: MetricCategory,
    tables: Optional[BenchmarkTables] = None,
    guard: Optional[bool] = None
) -> Optional[int]:
    """
    Score one category of a stock against its industry benchmark.

    Returns:
        0-100 score, or None if the computation was not finite
    """
    if tables is None:
        tables = benchmark_tables
    category = MetricCategory(category)
    industry = tables.resolve_industry(stock.industry)
    return score_category(
        category,
        stock.metrics.for_category(category),
        industry,
        market=tables.market,
        guard=guard,
    )


class StockScorer:
    """
    Scores stocks against a set of benchmark tables.
    """

    def __init__(self, tables: Optional[BenchmarkTables] = None, guard: Optional[bool] = None):
        self.tables = tables if tables is not None else benchmark_tables
        self.guard = guard
        logger.debug(f"StockScorer initialized with {self.tables!r}")

    def score_stock(self, stock: StockProfile) -> StockScorecard:
        """
        Score a stock in every category and classify each one.

        Args:
            stock: validated StockProfile

        Returns:
            StockScorecard with scores, ratings and the overall score
        """
        industry = self.tables.resolve_industry(stock.industry)

        card = StockScorecard(
            ticker=stock.ticker,
            name=stock.name,
            industry=stock.industry,
            benchmark_industry=industry.name,
        )
        if industry.name != stock.industry:
            card.warnings.append(f"No benchmark for industry '{stock.industry}', used {industry.name}")

        for category_name in CATEGORIES:
            category = MetricCategory(category_name)
            raw = stock.metrics.for_category(category)

            score = score_category(category, raw, industry, market=self.tables.market, guard=self.guard)
            if score is None:
                card.warnings.append(f"{category_name}: score is not finite")
            card.scores[category_name] = score
            card.ratings[category_name] = classify_rating(category, raw, industry.for_category(category))

        logger.info(f"{stock.ticker}: overall {card.overall_score} {card.scores}")
        return card
