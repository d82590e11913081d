"""
Portfolio module - blends per-stock category scores by holding value.
"""

from .portfolio_aggregator import (
    AllocationChange,
    PortfolioImpact,
    aggregate_portfolio,
    calculate_impact,
    industry_allocation,
    portfolio_metrics,
)

__all__ = [
    'AllocationChange',
    'PortfolioImpact',
    'aggregate_portfolio',
    'calculate_impact',
    'industry_allocation',
    'portfolio_metrics',
]
