"""
Scorers module - converts raw stock metrics into 0-100 category scores
using industry and market benchmarks.
"""

from metric_scoring.scorers.normalizer import (
    beta_score,
    higher_is_better,
    lower_is_better,
    normalize,
    rsi_score,
)
from metric_scoring.scorers.category_scorer import (
    CategoryScoreBreakdown,
    SubIndicatorTrace,
    explain_category,
    explain_momentum,
    explain_performance,
    explain_stability,
    explain_value,
    finalize_score,
    score_category,
    score_momentum,
    score_performance,
    score_stability,
    score_value,
)
from metric_scoring.scorers.scoring_config import CATEGORY_WEIGHTS
from metric_scoring.scorers.stock_scorer import StockScorecard, StockScorer, get_metric_score
from metric_scoring.scorers.scoring_output import (
    StockScoreGenerator,
    load_holdings,
    load_stock_profiles,
    scorecards_to_frame,
)

__all__ = [
    'normalize',
    'higher_is_better',
    'lower_is_better',
    'beta_score',
    'rsi_score',
    'CategoryScoreBreakdown',
    'SubIndicatorTrace',
    'explain_category',
    'explain_performance',
    'explain_stability',
    'explain_value',
    'explain_momentum',
    'finalize_score',
    'score_category',
    'score_performance',
    'score_stability',
    'score_value',
    'score_momentum',
    'CATEGORY_WEIGHTS',
    'StockScorecard',
    'StockScorer',
    'get_metric_score',
    'StockScoreGenerator',
    'load_holdings',
    'load_stock_profiles',
    'scorecards_to_frame',
]
