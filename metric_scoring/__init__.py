"""
Metric Scoring - rates stocks on performance, stability, value and momentum
against industry and market benchmarks, and blends the scores across a
portfolio.

Layout:
    metric_schema.py   pydantic models for raw metrics, benchmarks, holdings
    benchmarks/        built-in industry + market tables, JSON override loader
    scorers/           normalizer, category scorers, stock scorer, batch output
    ratings/           threshold-based labels and comparison indicators
    portfolio/         value-weighted portfolio aggregation and purchase impact
"""

from metric_scoring.metric_schema import (
    BenchmarkRecord,
    DividendConsistency,
    MetricCategory,
    MomentumMetrics,
    PerformanceMetrics,
    PortfolioHolding,
    Rating,
    RatingColor,
    RatingLabel,
    StabilityMetrics,
    StockMetrics,
    StockProfile,
    ValueMetrics,
)
from metric_scoring.benchmarks import BenchmarkTables, benchmark_tables, resolve_industry
from metric_scoring.ratings import classify_rating
from metric_scoring.scorers import StockScorer, get_metric_score, score_category
from metric_scoring.portfolio import aggregate_portfolio, calculate_impact, portfolio_metrics

__all__ = [
    'BenchmarkRecord',
    'DividendConsistency',
    'MetricCategory',
    'MomentumMetrics',
    'PerformanceMetrics',
    'PortfolioHolding',
    'Rating',
    'RatingColor',
    'RatingLabel',
    'StabilityMetrics',
    'StockMetrics',
    'StockProfile',
    'ValueMetrics',
    'BenchmarkTables',
    'benchmark_tables',
    'resolve_industry',
    'classify_rating',
    'StockScorer',
    'get_metric_score',
    'score_category',
    'aggregate_portfolio',
    'calculate_impact',
    'portfolio_metrics',
]
