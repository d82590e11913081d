"""
Weight and polarity configuration for the category scorers.

Each category combines its sub-indicators as
    score = sum(weight * SI_norm * IM_norm)
where SI compares the stock to its industry and IM compares the industry to
the market. Weights in a category sum to 1.

Polarity:
    'higher'   - ratio value / reference
    'lower'    - ratio reference / value
    'beta'     - SI is the closeness of beta to 1.0; IM is industry/market beta
    'rsi'      - SI is the closeness of stock RSI to industry RSI; IM is industry/market RSI
    'category' - mapped to a numeric score (dividend consistency) then 'higher'
"""

from typing import Dict

CATEGORY_WEIGHTS: Dict[str, Dict[str, Dict[str, object]]] = {
    'performance': {
        'revenue_growth': {'weight': 0.40, 'polarity': 'higher'},
        'profit_margin': {'weight': 0.30, 'polarity': 'higher'},
        'return_on_capital': {'weight': 0.30, 'polarity': 'higher'},
    },
    'stability': {
        'volatility': {'weight': 0.55, 'polarity': 'lower'},
        'beta': {'weight': 0.25, 'polarity': 'beta'},
        'dividend_consistency': {'weight': 0.20, 'polarity': 'category'},
    },
    'value': {
        'pe_ratio': {'weight': 0.50, 'polarity': 'lower'},
        'pb_ratio': {'weight': 0.30, 'polarity': 'lower'},
        'dividend_yield': {'weight': 0.20, 'polarity': 'higher'},
    },
    'momentum': {
        'three_month_return': {'weight': 0.50, 'polarity': 'higher'},
        'rsi': {'weight': 0.50, 'polarity': 'rsi'},
    },
}

# Beta: each point of distance from 1.0 costs 50 (of 100)
BETA_DEVIATION_PENALTY = 50.0

# RSI: each point of distance from the industry RSI costs 2 (of 100)
RSI_DEVIATION_PENALTY = 2.0
