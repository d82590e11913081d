"""
Metric Scoring - Stock Scoring Runner
Scores every stock in a stock data file on performance, stability, value
and momentum, prints the score table, and optionally saves the scores.

Usage:
    python run_scoring.py                              # data/sample_stocks.json
    python run_scoring.py --ticker SYK AAPL            # detailed report per ticker
    python run_scoring.py --category value --ticker SYK
    python run_scoring.py --input my_stocks.json --output
    python run_scoring.py --no-guard                   # plain division for ratios
"""

import sys
import os
import argparse

# Add project root to path
current_dir = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.insert(0, current_dir)

# Quiet library loggers; must run before importing modules that setup loggers
from utils.logger import LoggingContext, set_logging_mode, setup_logger
set_logging_mode(LoggingContext.ORCHESTRATED)

from config.settings import settings
from config.constants import CATEGORIES, SAMPLE_STOCKS_FILE
from metric_scoring.benchmarks import benchmark_tables
from metric_scoring.scorers import StockScoreGenerator, explain_category
from metric_scoring.scorers.scoring_output import load_stock_profiles
from utils.report_utils import format_score_table, format_stock_score_report

logger = setup_logger('run_scoring')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Score stocks against industry and market benchmarks.')
    parser.add_argument('--input', '-i', default=SAMPLE_STOCKS_FILE,
                        help=f'Stock data JSON file (relative to DATA_DIR, default: {SAMPLE_STOCKS_FILE})')
    parser.add_argument('--ticker', '-t', nargs='*', default=[],
                        help='Only score these tickers and print a detailed report for each')
    parser.add_argument('--category', '-c', choices=CATEGORIES,
                        help='Limit the detailed breakdown to one category')
    parser.add_argument('--output', '-o', action='store_true',
                        help='Save stock_scores_<DATE>.json to OUTPUT_DIR')
    parser.add_argument('--no-guard', action='store_true',
                        help='Disable the zero/negative denominator guard in ratio scoring')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    guard = False if args.no_guard else None

    logger.info(f"Settings: {settings.describe()}")
    logger.info(f"Benchmarks: {benchmark_tables!r}")

    generator = StockScoreGenerator(
        data_dir=settings.DATA_DIR,
        output_dir=settings.OUTPUT_DIR,
        guard=guard,
    )

    try:
        df, output_path = generator.generate(args.input, tickers=args.ticker, save=args.output)
    except Exception as e:
        logger.error(f"Scoring failed: {e}", exc_info=True)
        print(f"[ERROR] Scoring failed: {e}")
        return 1

    print(format_score_table(df))

    if args.ticker:
        # Detailed per-ticker reports with the SI / IM breakdown
        wanted = {t.upper() for t in args.ticker}
        stocks = [s for s in load_stock_profiles(generator.data_dir / args.input)
                  if s.ticker.upper() in wanted]
        categories = [args.category] if args.category else list(CATEGORIES)
        for stock in stocks:
            card = generator.scorer.score_stock(stock)
            industry = generator.scorer.tables.resolve_industry(stock.industry)
            breakdowns = {
                category: explain_category(
                    category,
                    stock.metrics.for_category(category),
                    industry,
                    market=generator.scorer.tables.market,
                    guard=guard,
                )
                for category in categories
            }
            print("")
            print(format_stock_score_report(card, breakdowns))
            for category in categories:
                print(f"  [{category}] {card.ratings[category].explanation}")

    if output_path:
        print(f"\n[OK] Scores saved: {output_path}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Operation cancelled.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\n[ERROR] Unexpected system error: {e}")
        sys.exit(1)
