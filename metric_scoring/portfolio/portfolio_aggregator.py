"""
Portfolio Aggregator - value-weighted category scores for a set of holdings.

    portfolio_score = round(sum(score_i * value_i) / sum(value_i))

An empty portfolio, or one whose holdings are all worth 0, scores 0.
Holdings whose category score is not finite are left out of both sums.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from config.constants import CATEGORIES
from utils.logger import setup_logger
from utils.numeric_utils import round_half_up
from metric_scoring.metric_schema import MetricCategory, PortfolioHolding, StockProfile
from metric_scoring.benchmarks import BenchmarkTables
from metric_scoring.scorers.stock_scorer import get_metric_score

logger = setup_logger('portfolio_aggregator')


@dataclass
class AllocationChange:
    """Share of portfolio value (percent) in one industry, before and after."""
    current: float = 0.0
    new: float = 0.0


@dataclass
class PortfolioImpact:
    """Effect of buying `amount` of `ticker` on the portfolio."""
    ticker: str
    amount: float
    current_metrics: Dict[str, int] = field(default_factory=dict)
    new_metrics: Dict[str, int] = field(default_factory=dict)
    industry_allocation: Dict[str, AllocationChange] = field(default_factory=dict)

    @property
    def impact(self) -> Dict[str, int]:
        return {
            category: self.new_metrics[category] - self.current_metrics[category]
            for category in self.current_metrics
        }

    def to_dict(self) -> dict:
        return {
            'ticker': self.ticker,
            'amount': self.amount,
            'current_metrics': dict(self.current_metrics),
            'new_metrics': dict(self.new_metrics),
            'impact': self.impact,
            'industry_allocation': {
                industry: {'current': change.current, 'new': change.new}
                for industry, change in self.industry_allocation.items()
            },
        }


def aggregate_portfolio(
    holdings: Sequence[PortfolioHolding],
    category: MetricCategory,
    tables: Optional[BenchmarkTables] = None,
    guard: Optional[bool] = None
) -> int:
    """
    Value-weighted average of one category score across holdings.

    Args:
        holdings: holdings with non-negative market values
        category: MetricCategory or its name
        tables: benchmark tables (process-wide tables when None)
        guard: ratio guard override (settings.RATIO_GUARD when None)

    Returns:
        Integer score 0-100; 0 for an empty or zero-value portfolio
    """
    category = MetricCategory(category)
    weighted_sum = 0.0
    total_value = 0.0

    for holding in holdings:
        score = get_metric_score(holding.stock, category, tables=tables, guard=guard)
        if score is None:
            logger.warning(f"Skipping {holding.stock.ticker}: {category.value} score is not finite")
            continue
        weighted_sum += score * holding.value
        total_value += holding.value

    if total_value == 0:
        return 0
    return round_half_up(weighted_sum / total_value)


def portfolio_metrics(
    holdings: Sequence[PortfolioHolding],
    tables: Optional[BenchmarkTables] = None,
    guard: Optional[bool] = None
) -> Dict[str, int]:
    """Aggregate every category. Returns {'performance': 71, 'stability': 64, ...}."""
    return {
        category: aggregate_portfolio(holdings, category, tables=tables, guard=guard)
        for category in CATEGORIES
    }


def _industry_values(holdings: Sequence[PortfolioHolding]) -> Dict[str, float]:
    values: Dict[str, float] = {}
    for holding in holdings:
        industry = holding.stock.industry
        values[industry] = values.get(industry, 0.0) + holding.value
    return values


def industry_allocation(holdings: Sequence[PortfolioHolding]) -> Dict[str, float]:
    """
    Percentage of total portfolio value held in each industry.

    Industries are the stocks' own labels, not the benchmark row they
    resolve to. A zero-value portfolio reports 0% everywhere.
    """
    values = _industry_values(holdings)
    total = sum(values.values())
    if total == 0:
        return {industry: 0.0 for industry in values}
    return {industry: value / total * 100 for industry, value in values.items()}


def calculate_impact(
    holdings: Sequence[PortfolioHolding],
    stock: StockProfile,
    amount: float,
    tables: Optional[BenchmarkTables] = None,
    guard: Optional[bool] = None
) -> PortfolioImpact:
    """
    Compare the portfolio before and after buying `amount` of `stock`.

    Raises:
        ValueError: if amount is not positive
    """
    if amount <= 0:
        raise ValueError(f"Purchase amount must be positive, got {amount}")

    holdings = list(holdings)
    after: List[PortfolioHolding] = holdings + [PortfolioHolding(stock=stock, value=amount)]

    current_alloc = industry_allocation(holdings)
    new_alloc = industry_allocation(after)

    allocation: Dict[str, AllocationChange] = {}
    for industry in list(current_alloc) + [stock.industry]:
        allocation[industry] = AllocationChange(
            current=current_alloc.get(industry, 0.0),
            new=new_alloc.get(industry, 0.0),
        )

    result = PortfolioImpact(
        ticker=stock.ticker,
        amount=amount,
        current_metrics=portfolio_metrics(holdings, tables=tables, guard=guard),
        new_metrics=portfolio_metrics(after, tables=tables, guard=guard),
        industry_allocation=allocation,
    )
    logger.info(f"Impact of buying {amount:,.2f} of {stock.ticker}: {result.impact}")
    return result
