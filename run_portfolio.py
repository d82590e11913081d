"""
Metric Scoring - Portfolio Runner
Blends holding scores into portfolio category scores, shows industry
allocation, and optionally previews the impact of buying a stock.

Usage:
    python run_portfolio.py
    python run_portfolio.py --holdings my_portfolio.json --stocks my_stocks.json
    python run_portfolio.py --buy SYK --amount 2500
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
from config.constants import SAMPLE_PORTFOLIO_FILE, SAMPLE_STOCKS_FILE
from metric_scoring.portfolio import calculate_impact, industry_allocation, portfolio_metrics
from metric_scoring.scorers.scoring_output import load_holdings, load_stock_profiles
from utils.report_utils import format_impact_report, format_portfolio_report

logger = setup_logger('run_portfolio')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Score a portfolio of holdings.')
    parser.add_argument('--holdings', default=SAMPLE_PORTFOLIO_FILE,
                        help=f'Holdings JSON file (relative to DATA_DIR, default: {SAMPLE_PORTFOLIO_FILE})')
    parser.add_argument('--stocks', default=SAMPLE_STOCKS_FILE,
                        help=f'Stock data JSON used to resolve tickers (default: {SAMPLE_STOCKS_FILE})')
    parser.add_argument('--buy', metavar='TICKER', help='Preview the impact of buying this stock')
    parser.add_argument('--amount', type=float, default=1000.0,
                        help='Purchase amount for --buy (default: 1000)')
    parser.add_argument('--no-guard', action='store_true',
                        help='Disable the zero/negative denominator guard in ratio scoring')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    guard = False if args.no_guard else None

    try:
        stocks = load_stock_profiles(settings.DATA_DIR / args.stocks)
        holdings = load_holdings(settings.DATA_DIR / args.holdings, stocks=stocks)

        metrics = portfolio_metrics(holdings, guard=guard)
        allocation = industry_allocation(holdings)
        total_value = sum(h.value for h in holdings)
        print(format_portfolio_report(metrics, allocation, total_value=total_value))

        if args.buy:
            ticker = args.buy.upper()
            matches = [s for s in stocks if s.ticker.upper() == ticker]
            if not matches:
                raise ValueError(f"Ticker {ticker} not found in {args.stocks}")
            impact = calculate_impact(holdings, matches[0], args.amount, guard=guard)
            print("")
            print(format_impact_report(impact))

    except Exception as e:
        logger.error(f"Portfolio scoring failed: {e}", exc_info=True)
        print(f"[ERROR] Portfolio scoring failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[!] Operation cancelled.")
        sys.exit(130)
