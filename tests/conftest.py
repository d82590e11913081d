"""Shared fixtures for the metric scoring tests."""

from pathlib import Path

import pytest

from metric_scoring.benchmarks import build_benchmark_tables, INDUSTRY_AVERAGES, MARKET_AVERAGES
from metric_scoring.metric_schema import PortfolioHolding, StockProfile

DATA_DIR = Path(__file__).resolve().parent.parent / 'data'


def make_stock(ticker='TEST', industry='Healthcare', **overrides):
    """Build a StockProfile from Stryker-like defaults, overriding per-category dicts."""
    metrics = {
        'performance': {'revenue_growth': 13.5, 'profit_margin': 21.2, 'return_on_capital': 14.8},
        'stability': {'volatility': 0.95, 'beta': 1.0, 'dividend_consistency': 'High'},
        'value': {'pe_ratio': 24.2, 'pb_ratio': 3.8, 'dividend_yield': 0.8},
        'momentum': {'three_month_return': 7.2, 'relative_performance': 2.2, 'rsi': 60},
    }
    for category, values in overrides.items():
        metrics[category] = {**metrics[category], **values}
    return StockProfile(ticker=ticker, name=f"{ticker} Corp", industry=industry, metrics=metrics)


@pytest.fixture
def tables():
    return build_benchmark_tables(INDUSTRY_AVERAGES, MARKET_AVERAGES)


@pytest.fixture
def healthcare(tables):
    return tables.resolve_industry('Healthcare')


@pytest.fixture
def market(tables):
    return tables.market


@pytest.fixture
def stryker():
    return StockProfile.model_validate({
        'ticker': 'SYK',
        'name': 'Stryker Corporation',
        'industry': 'Healthcare',
        'price': 345.68,
        'metrics': {
            'performance': {'details': {'revenueGrowth': 13.5, 'profitMargin': 21.2, 'returnOnCapital': 14.8}},
            'stability': {'details': {'volatility': 0.95, 'beta': 1.0, 'dividendConsistency': 'High'}},
            'value': {'details': {'peRatio': 24.2, 'pbRatio': 3.8, 'dividendYield': 0.8}},
            'momentum': {'details': {'threeMonthReturn': 7.2, 'relativePerformance': 2.2, 'rsi': 60}},
        },
    })


@pytest.fixture
def holding():
    def _holding(stock, value):
        return PortfolioHolding(stock=stock, value=value)
    return _holding
