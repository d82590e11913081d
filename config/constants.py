"""
Centralized constants for the application.
Stores category names, file naming patterns, and other magic values.
"""

from typing import Dict, Tuple

# --- Metric Categories ---

CATEGORIES: Tuple[str, ...] = ('performance', 'stability', 'value', 'momentum')

# Sentinel benchmark row used for unknown industries
DEFAULT_INDUSTRY = "Default"

# Sentinel for a missing dividend yield / dividend history
NOT_AVAILABLE = "N/A"

# --- Score Ranges ---

SCORE_MIN = 0
SCORE_MAX = 100

# --- Data Files ---
# Relative to settings.DATA_DIR / settings.OUTPUT_DIR
SAMPLE_STOCKS_FILE = "sample_stocks.json"
SAMPLE_PORTFOLIO_FILE = "sample_portfolio.json"
STOCK_SCORES_PATTERN = "stock_scores_{date}.json"

SCORING_VERSION = "2.0-ratio"

# --- Display Names ---
CATEGORY_DISPLAY_NAMES: Dict[str, str] = {
    'performance': 'Performance',
    'stability': 'Stability',
    'value': 'Value',
    'momentum': 'Momentum',
}

SUB_INDICATOR_DISPLAY_NAMES: Dict[str, str] = {
    'revenue_growth': 'Revenue Growth',
    'profit_margin': 'Profit Margin',
    'return_on_capital': 'Return on Capital',
    'volatility': 'Volatility',
    'beta': 'Beta',
    'dividend_consistency': 'Dividend Consistency',
    'pe_ratio': 'P/E Ratio',
    'pb_ratio': 'P/B Ratio',
    'dividend_yield': 'Dividend Yield',
    'three_month_return': '3-Month Return',
    'relative_performance': 'Relative Performance',
    'rsi': 'RSI',
}
