"""
Benchmark tables - per-industry averages plus the whole-market average.
"""

from .benchmark_loader import (
    BenchmarkTables,
    benchmark_tables,
    build_benchmark_tables,
    get_market_benchmark,
    load_benchmark_tables,
    resolve_industry,
)
from .industry_data import INDUSTRY_AVERAGES
from .market_averages import MARKET_AVERAGES, get_dividend_consistency_score

__all__ = [
    'BenchmarkTables',
    'benchmark_tables',
    'build_benchmark_tables',
    'get_market_benchmark',
    'load_benchmark_tables',
    'resolve_industry',
    'INDUSTRY_AVERAGES',
    'MARKET_AVERAGES',
    'get_dividend_consistency_score',
]
