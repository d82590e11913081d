"""
Stock Score Output Generator.
Loads stock profiles from a JSON data file, scores every stock, and writes
the results as a dated JSON file plus a pandas DataFrame for reporting.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from config.settings import settings
from config.constants import CATEGORIES, SAMPLE_STOCKS_FILE, SCORING_VERSION, STOCK_SCORES_PATTERN
from utils.logger import setup_logger
from metric_scoring.metric_schema import PortfolioHolding, StockProfile
from metric_scoring.benchmarks import BenchmarkTables
from metric_scoring.scorers.stock_scorer import StockScorecard, StockScorer

logger = setup_logger('scoring_output')


def _load_json(path: Path) -> Any:
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def load_stock_profiles(path: Union[str, Path]) -> List[StockProfile]:
    """
    Load stock profiles from JSON.

    Accepts a list of stocks, {"stocks": [...]}, or a mapping keyed by
    ticker. Keys may be camelCase and metric sections may be wrapped as
    {"value": ..., "details": {...}}.

    Raises:
        ValueError: if the file layout or any stock fails validation
    """
    path = Path(path)
    payload = _load_json(path)

    if isinstance(payload, dict) and 'stocks' in payload:
        entries = payload['stocks']
    elif isinstance(payload, dict):
        entries = [{'ticker': ticker, **data} for ticker, data in payload.items()]
    else:
        entries = payload

    if not isinstance(entries, list):
        raise ValueError(f"{path.name}: expected a list of stocks")

    stocks = [StockProfile.model_validate(entry) for entry in entries]
    logger.info(f"Loaded {len(stocks)} stocks from {path.name}")
    return stocks


def load_holdings(
    path: Union[str, Path],
    stocks: Optional[Iterable[StockProfile]] = None
) -> List[PortfolioHolding]:
    """
    Load portfolio holdings from JSON ({"holdings": [...]} or a bare list).

    Each holding is either {"stock": {...profile...}, "value": 1000} or
    {"ticker": "AAPL", "value": 1000}; tickers are looked up in `stocks`.

    Raises:
        ValueError: on an unknown ticker or invalid holding
    """
    path = Path(path)
    payload = _load_json(path)
    entries = payload.get('holdings', []) if isinstance(payload, dict) else payload

    by_ticker = {stock.ticker.upper(): stock for stock in (stocks or [])}
    holdings = []
    for entry in entries:
        if 'stock' not in entry:
            ticker = str(entry.get('ticker', '')).upper()
            if ticker not in by_ticker:
                raise ValueError(f"{path.name}: unknown ticker {ticker!r} in holdings")
            entry = {'stock': by_ticker[ticker], 'value': entry.get('value')}
        holdings.append(PortfolioHolding.model_validate(entry))

    logger.info(f"Loaded {len(holdings)} holdings from {path.name}")
    return holdings


def scorecards_to_frame(cards: Iterable[StockScorecard]) -> pd.DataFrame:
    """One row per ticker: scores (nullable Int64), overall score and rating labels."""
    rows = []
    for card in cards:
        row = {
            'ticker': card.ticker,
            'name': card.name,
            'industry': card.industry,
            'benchmark_industry': card.benchmark_industry,
        }
        for category in CATEGORIES:
            row[category] = card.scores.get(category)
        row['overall'] = card.overall_score
        for category in CATEGORIES:
            rating = card.ratings.get(category)
            row[f"{category}_rating"] = rating.label.value if rating else None
        rows.append(row)

    columns = ['ticker', 'name', 'industry', 'benchmark_industry', *CATEGORIES, 'overall',
               *[f"{category}_rating" for category in CATEGORIES]]
    df = pd.DataFrame(rows, columns=columns)
    for col in [*CATEGORIES, 'overall']:
        df[col] = df[col].astype('Int64')
    return df.set_index('ticker', drop=False)


class StockScoreGenerator:
    """
    Generates stock scores from a stock data file.
    """

    def __init__(
        self,
        data_dir: Union[str, Path] = "data",
        output_dir: Union[str, Path] = "generated_data",
        tables: Optional[BenchmarkTables] = None,
        guard: Optional[bool] = None
    ):
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)
        if not self.data_dir.exists():
            logger.warning(f"Data directory does not exist: {self.data_dir}")
        self.scorer = StockScorer(tables=tables, guard=guard)

    def score_stocks(self, stocks: Iterable[StockProfile]) -> List[StockScorecard]:
        return [self.scorer.score_stock(stock) for stock in stocks]

    def generate(
        self,
        input_file: str = SAMPLE_STOCKS_FILE,
        tickers: Optional[Iterable[str]] = None,
        save: bool = True
    ) -> Tuple[pd.DataFrame, Optional[Path]]:
        """
        Score every stock in `input_file` (relative to data_dir).

        Args:
            input_file: stock data file name or path
            tickers: optional filter, case-insensitive
            save: write stock_scores_<DATE>.json into output_dir

        Returns:
            (DataFrame of scores, path of the written file or None)

        Raises:
            FileNotFoundError: if the input file does not exist
            ValueError: if the input is invalid or the ticker filter matches nothing
        """
        input_path = Path(input_file)
        if not input_path.is_absolute():
            input_path = self.data_dir / input_path
        if not input_path.exists():
            raise FileNotFoundError(f"Stock data file not found: {input_path}")

        stocks = load_stock_profiles(input_path)
        if tickers:
            wanted = {t.upper() for t in tickers}
            stocks = [s for s in stocks if s.ticker.upper() in wanted]
            if not stocks:
                raise ValueError(f"No stocks in {input_path.name} match {sorted(wanted)}")

        logger.info(f"Scoring {len(stocks)} stocks from {input_path.name}")
        cards = self.score_stocks(stocks)
        df = scorecards_to_frame(cards)

        output_path = None
        if save:
            output_path = self._save(cards, input_path)
        return df, output_path

    def _save(self, cards: List[StockScorecard], input_path: Path) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        data_date = datetime.now().strftime("%Y-%m-%d")
        output_path = self.output_dir / STOCK_SCORES_PATTERN.format(date=data_date)

        final_output: Dict[str, Any] = {
            "metadata": {
                "generated_at": datetime.now().isoformat(),
                "source_stock_data": input_path.name,
                "benchmarks": self.scorer.tables.source,
                "ratio_guard": settings.RATIO_GUARD if self.scorer.guard is None else self.scorer.guard,
                "scoring_version": SCORING_VERSION,
                "stock_count": len(cards),
            },
            "scores": [card.to_dict() for card in cards],
        }

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(final_output, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved scores to {output_path}")
        return output_path
