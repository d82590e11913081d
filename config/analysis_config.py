"""
Analysis Configuration
Centralized thresholds for qualitative ratings and comparison indicators.

These rules are maintained separately from the weighted ratio scorers in
metric_scoring/scorers/scoring_config.py and are never derived from them.
"""

from typing import Dict, Any

# --- Rating Classifier Thresholds ---
# Absolute margins against the industry average for each sub-indicator.
# Format: 'category': {'sub_indicator': margin, ...}
RATING_MARGINS: Dict[str, Dict[str, float]] = {
    'performance': {
        'revenue_growth': 5.0,
        'profit_margin': 5.0,
        'return_on_capital': 3.0,
    },
    'stability': {
        'volatility': 0.1,
    },
    'value': {
        'pe_ratio': 2.0,
        'pb_ratio': 0.5,
        'dividend_yield': 0.5,
    },
    'momentum': {
        'three_month_return': 2.0,
        'relative_performance': 1.0,
    },
}

# Beta band counted as "market-like" for a High stability rating
STABILITY_BETA_BAND = {'min': 0.8, 'max': 1.1}

# RSI bands for momentum ratings
MOMENTUM_RSI_BANDS = {
    'strong_min': 55.0,   # Strong requires 55 <= RSI <= 70
    'strong_max': 70.0,
    'weak_below': 45.0,   # Weak when RSI < 45 (oversold) ...
    'weak_above': 70.0,   # ... or RSI > 70 (overbought)
}

# --- Comparison Indicators ---
# Colour tolerance (value vs industry) and symbol tolerance (ratio vs 1.0)
COMPARISON_TOLERANCES = {
    'status_band': 0.10,   # +/-10% -> yellow
    'symbol_band': 0.05,   # +/-5%  -> "="
}

# --- Score to Rating Conversion ---
# 0-100 score -> Good / Average / Poor
SCORE_RATING_BANDS = {
    'good_min': 70,
    'average_min': 40,
}

# --- Legacy Bucket Scoring ---
# Each sub-indicator earns 0/1/2 points; the average picks the rating.
BUCKET_SCORING: Dict[str, Any] = {
    'upper_multiplier': 1.1,
    'lower_multiplier': 0.9,
    'good_min_average': 1.6,
    'average_min_average': 0.8,
    'rsi_good': {'min': 50.0, 'max': 70.0},
    'rsi_poor': {'below': 40.0, 'above': 75.0},
}
