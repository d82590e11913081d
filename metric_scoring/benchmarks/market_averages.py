"""
Whole-market average benchmark used to weight industries against each other.
"""

from typing import Any, Dict

from metric_scoring.metric_schema import DividendConsistency

MARKET_AVERAGES: Dict[str, Dict[str, Any]] = {
    'performance': {
        'revenue_growth': 7.0,       # 7%
        'profit_margin': 12.0,       # 12%
        'return_on_capital': 12.0,   # 12%
    },
    'stability': {
        'volatility': 15.0,          # 15%
        'beta': 1.0,                 # market beta by definition
        'dividend_consistency': 'Good',  # scores 75
    },
    'value': {
        'pe_ratio': 16.0,            # 16x
        'pb_ratio': 3.0,             # 3x
        'dividend_yield': 2.5,       # 2.5%
    },
    'momentum': {
        'three_month_return': 3.0,   # 3%
        'relative_performance': 0.0, # market vs itself
        'rsi': 50.0,                 # neutral
    },
}


def get_dividend_consistency_score(consistency: Any) -> int:
    """
    Convert a dividend consistency label to its numeric score.

    High=100, Good=75, Medium=50, Low/Poor=25, N/A=0. Labels are matched
    case-insensitively; unknown labels score 0.
    """
    try:
        return DividendConsistency.parse(consistency).score
    except ValueError:
        return 0
