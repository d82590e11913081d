"""
Benchmark Loader.

Builds the read-only industry and market benchmark tables once at import,
either from the built-in constants or from a JSON override file
(settings.BENCHMARKS_PATH), and resolves industry names to benchmark rows.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from config.constants import DEFAULT_INDUSTRY
from config.settings import settings
from utils.logger import setup_logger
from metric_scoring.metric_schema import BenchmarkRecord
from metric_scoring.benchmarks.industry_data import INDUSTRY_AVERAGES
from metric_scoring.benchmarks.market_averages import MARKET_AVERAGES

logger = setup_logger('benchmark_loader')


class BenchmarkTables:
    """
    Immutable industry + market benchmark tables.

    Industry lookups are exact and case-sensitive; any name not in the table
    resolves to the "Default" row.
    """

    def __init__(self, industries: Mapping[str, BenchmarkRecord], market: BenchmarkRecord, source: str = "built-in"):
        if DEFAULT_INDUSTRY not in industries:
            raise ValueError(f"Benchmark tables must contain a '{DEFAULT_INDUSTRY}' industry row")
        self._industries = MappingProxyType(dict(industries))
        self._market = market
        self.source = source

    @property
    def industries(self) -> Mapping[str, BenchmarkRecord]:
        return self._industries

    @property
    def market(self) -> BenchmarkRecord:
        return self._market

    @property
    def default(self) -> BenchmarkRecord:
        return self._industries[DEFAULT_INDUSTRY]

    def industry_names(self) -> list:
        return sorted(self._industries.keys())

    def resolve_industry(self, industry_name: str) -> BenchmarkRecord:
        """Return the benchmark row for an industry, or the Default row if unknown."""
        record = self._industries.get(industry_name)
        if record is None:
            logger.debug(f"Industry '{industry_name}' not in benchmarks, using {DEFAULT_INDUSTRY}")
            return self.default
        return record

    def __contains__(self, industry_name: object) -> bool:
        return industry_name in self._industries

    def __repr__(self) -> str:
        return f"BenchmarkTables(industries={len(self._industries)}, source={self.source!r})"


def _build_record(name: str, data: Dict[str, Any]) -> BenchmarkRecord:
    return BenchmarkRecord.model_validate({'name': name, **data})


def build_benchmark_tables(
    industries: Dict[str, Dict[str, Any]],
    market: Dict[str, Any],
    source: str = "built-in"
) -> BenchmarkTables:
    """
    Validate raw benchmark dicts into BenchmarkTables.

    Raises:
        ValueError: if a row fails validation or the Default row is missing
    """
    records = {name: _build_record(name, data) for name, data in industries.items()}
    market_record = _build_record('Market', market)
    return BenchmarkTables(records, market_record, source=source)


def load_benchmark_tables(path: Union[str, Path]) -> BenchmarkTables:
    """
    Load benchmark tables from a JSON file.

    Expected layout:
        {
            "market": {"performance": {...}, "stability": {...}, ...},
            "industries": {"Default": {...}, "Tech": {...}, ...}
        }

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the content is not valid benchmark data
    """
    path = Path(path)
    with open(path, encoding='utf-8') as f:
        payload = json.load(f)

    if not isinstance(payload, dict) or 'industries' not in payload or 'market' not in payload:
        raise ValueError(f"Benchmark file {path} must contain 'market' and 'industries' sections")

    tables = build_benchmark_tables(payload['industries'], payload['market'], source=str(path))
    logger.info(f"Loaded {len(tables.industries)} industry benchmarks from {path.name}")
    return tables


def _load_default_tables(override_path: Optional[Path]) -> BenchmarkTables:
    if override_path:
        return load_benchmark_tables(override_path)
    return build_benchmark_tables(INDUSTRY_AVERAGES, MARKET_AVERAGES)


# Process-wide tables, built once at import
benchmark_tables = _load_default_tables(settings.BENCHMARKS_PATH)


def resolve_industry(industry_name: str) -> BenchmarkRecord:
    """Resolve an industry name against the process-wide tables (falls back to Default)."""
    return benchmark_tables.resolve_industry(industry_name)


def get_market_benchmark() -> BenchmarkRecord:
    return benchmark_tables.market
