"""
Industry average benchmarks.

One averaged record per category for each industry the app covers. The
"Default" row is the fallback for any industry name not listed here.
Values use the same units as the stock datasets (percentages as 12.5, not 0.125).
"""

from typing import Any, Dict

INDUSTRY_AVERAGES: Dict[str, Dict[str, Dict[str, Any]]] = {
    'Tech': {
        'performance': {'revenue_growth': 21.74, 'profit_margin': 12.38, 'return_on_capital': 22.74},
        'stability': {'volatility': 44.3, 'beta': 1.54, 'dividend_consistency': 'Medium'},
        'value': {'pe_ratio': 36.4, 'pb_ratio': 19.4, 'dividend_yield': 0.38},
        'momentum': {'three_month_return': -13.62, 'relative_performance': 19.0, 'rsi': 39.5},
    },
    'ESG': {
        'performance': {'revenue_growth': 7.0, 'profit_margin': 5.0, 'return_on_capital': 4.0},
        'stability': {'volatility': 47.0, 'beta': 1.5, 'dividend_consistency': 'Medium'},
        'value': {'pe_ratio': 24.0, 'pb_ratio': 3.0, 'dividend_yield': 2.0},
        'momentum': {'three_month_return': -12.0, 'relative_performance': -10.0, 'rsi': 45.0},
    },
    'Healthcare': {
        'performance': {'revenue_growth': 15.0, 'profit_margin': 20.0, 'return_on_capital': 13.0},
        'stability': {'volatility': 1.2, 'beta': 1.0, 'dividend_consistency': 'Low'},
        'value': {'pe_ratio': 25.0, 'pb_ratio': 4.0, 'dividend_yield': 0.6},
        'momentum': {'three_month_return': 5.0, 'relative_performance': 1.0, 'rsi': 50.0},
    },
    'Financial Planning': {
        'performance': {'revenue_growth': 7.0, 'profit_margin': 16.0, 'return_on_capital': 15.0},
        'stability': {'volatility': 1.1, 'beta': 1.05, 'dividend_consistency': 'High'},
        'value': {'pe_ratio': 17.0, 'pb_ratio': 2.5, 'dividend_yield': 2.2},
        'momentum': {'three_month_return': 3.5, 'relative_performance': 1.0, 'rsi': 51.0},
    },
    'Consumer': {
        'performance': {'revenue_growth': 5.0, 'profit_margin': 12.0, 'return_on_capital': 11.0},
        'stability': {'volatility': 0.95, 'beta': 0.9, 'dividend_consistency': 'Medium'},
        'value': {'pe_ratio': 19.0, 'pb_ratio': 2.5, 'dividend_yield': 1.8},
        'momentum': {'three_month_return': 3.0, 'relative_performance': 1.0, 'rsi': 54.0},
    },
    'Real Estate': {
        'performance': {'revenue_growth': 5.0, 'profit_margin': 25.0, 'return_on_capital': 4.5},
        'stability': {'volatility': 8.6, 'beta': 0.8, 'dividend_consistency': 'Medium'},
        'value': {'pe_ratio': 36.0, 'pb_ratio': 2.5, 'dividend_yield': 4.0},
        'momentum': {'three_month_return': 2.0, 'relative_performance': -5.0, 'rsi': 49.0},
    },
    # Fallback for unknown industries
    'Default': {
        'performance': {'revenue_growth': 7.0, 'profit_margin': 15.0, 'return_on_capital': 12.0},
        'stability': {'volatility': 1.0, 'beta': 1.0, 'dividend_consistency': 'Medium'},
        'value': {'pe_ratio': 18.0, 'pb_ratio': 2.5, 'dividend_yield': 1.5},
        'momentum': {'three_month_return': 3.5, 'relative_performance': 1.2, 'rsi': 52.0},
    },
}
