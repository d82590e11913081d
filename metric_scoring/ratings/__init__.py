"""
Qualitative ratings - threshold-based labels and comparison indicators.
"""

from .comparison import (
    ScoreRating,
    bucket_category_score,
    comparison_status,
    comparison_symbol,
    score_to_rating,
)
from .rating_classifier import (
    classify_momentum,
    classify_performance,
    classify_rating,
    classify_stability,
    classify_value,
)

__all__ = [
    'ScoreRating',
    'bucket_category_score',
    'comparison_status',
    'comparison_symbol',
    'score_to_rating',
    'classify_momentum',
    'classify_performance',
    'classify_rating',
    'classify_stability',
    'classify_value',
]
