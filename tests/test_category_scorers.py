import copy

import numpy as np
import pytest

from metric_scoring.benchmarks import INDUSTRY_AVERAGES
from metric_scoring.metric_schema import (
    BenchmarkRecord,
    MomentumMetrics,
    PerformanceMetrics,
    StabilityMetrics,
    ValueMetrics,
)
from metric_scoring.scorers.category_scorer import (
    explain_performance,
    finalize_score,
    score_category,
    score_momentum,
    score_performance,
    score_stability,
    score_value,
)
from metric_scoring.scorers.scoring_config import CATEGORY_WEIGHTS


def test_weights_sum_to_one():
    for category, indicators in CATEGORY_WEIGHTS.items():
        assert sum(cfg['weight'] for cfg in indicators.values()) == pytest.approx(1.0), category


def test_performance_worked_example(healthcare, market):
    raw = PerformanceMetrics(revenue_growth=12, profit_margin=22, return_on_capital=14.8)

    breakdown = explain_performance(raw, healthcare, market)

    assert breakdown.get('revenue_growth').si == pytest.approx(0.8)
    assert breakdown.get('profit_margin').si == 1.0
    assert breakdown.get('return_on_capital').si == 1.0
    assert all(item.im == 1.0 for item in breakdown.sub_indicators)
    assert breakdown.weighted_score == pytest.approx(0.92)
    assert breakdown.score == 92
    assert score_performance(raw, healthcare, market) == 92


def test_stryker_category_scores(stryker, healthcare, market):
    m = stryker.metrics
    assert score_performance(m.performance, healthcare, market) == 96
    # volatility .55 + beta .25 + dividend 0.2 * (25 / 75)
    assert score_stability(m.stability, healthcare, market) == 87
    # P/E .5 * 16/25 + P/B .3 * 3/4 + yield .2 * 0.6/2.5
    assert score_value(m.value, healthcare, market) == 59
    # 3-month .5 + RSI .5 * 0.8
    assert score_momentum(m.momentum, healthcare, market) == 90


def test_market_defaults_to_builtin_table(stryker, healthcare):
    assert score_value(stryker.metrics.value, healthcare) == 59


def test_score_category_dispatch(stryker, healthcare, market):
    assert score_category('stability', stryker.metrics.stability, healthcare, market) == 87


def test_negative_industry_return_is_guarded(tables, market):
    tech = tables.resolve_industry('Tech')
    raw = MomentumMetrics(three_month_return=-15.61, relative_performance=21.3, rsi=41.5)

    # SI 0 (trails a negative benchmark), RSI .5 * 0.96 * 39.5/50
    assert score_momentum(raw, tech, market, guard=True) == 38


def test_missing_dividend_yield_equals_zero(healthcare, market):
    missing = ValueMetrics(pe_ratio=22, pb_ratio=3.1, dividend_yield='N/A')
    zero = ValueMetrics(pe_ratio=22, pb_ratio=3.1, dividend_yield=0)
    assert score_value(missing, healthcare, market) == score_value(zero, healthcare, market)


def test_missing_dividend_consistency_scores_zero(healthcare, market):
    raw = StabilityMetrics(volatility=0.95, beta=1.0, dividend_consistency='N/A')
    # dividend term contributes nothing
    assert score_stability(raw, healthcare, market) == 80


def test_loss_making_pe_earns_nothing(healthcare, market):
    negative = ValueMetrics(pe_ratio=-12, pb_ratio=3.8, dividend_yield=0.8)
    # P/B .225 + yield .048
    assert score_value(negative, healthcare, market) == 27


class TestZeroDenominator:

    @pytest.fixture
    def flat_industry(self):
        data = copy.deepcopy(INDUSTRY_AVERAGES['Default'])
        data['momentum']['three_month_return'] = 0.0
        return BenchmarkRecord.model_validate({'name': 'Flat', **data})

    def test_guarded_score_is_finite(self, flat_industry, market):
        raw = MomentumMetrics(three_month_return=0.0, rsi=52)
        assert score_momentum(raw, flat_industry, market, guard=True) == 50

    def test_unguarded_score_is_invalid(self, flat_industry, market):
        raw = MomentumMetrics(three_month_return=0.0, rsi=52)
        assert score_momentum(raw, flat_industry, market, guard=False) is None


def test_finalize_score():
    assert finalize_score(0.925) == 93
    assert finalize_score(1.7) == 100
    assert finalize_score(0.0) == 0
    assert finalize_score(float('nan')) is None


def _random_stock(rng):
    labels = ['High', 'Good', 'Medium', 'Low', 'Poor', 'N/A']
    return {
        'performance': PerformanceMetrics(
            revenue_growth=rng.uniform(-50, 150),
            profit_margin=rng.uniform(-40, 60),
            return_on_capital=rng.uniform(-30, 90),
        ),
        'stability': StabilityMetrics(
            volatility=rng.uniform(-1, 80),
            beta=rng.uniform(-1, 3),
            dividend_consistency=labels[rng.integers(len(labels))],
        ),
        'value': ValueMetrics(
            pe_ratio=rng.uniform(-50, 120),
            pb_ratio=rng.uniform(-5, 60),
            dividend_yield=rng.uniform(0, 8) if rng.random() > 0.2 else 'N/A',
        ),
        'momentum': MomentumMetrics(
            three_month_return=rng.uniform(-40, 40),
            relative_performance=rng.uniform(-30, 30),
            rsi=rng.uniform(0, 100),
        ),
    }


def test_scores_are_bounded_for_random_inputs(tables):
    rng = np.random.default_rng(20240501)
    industries = list(tables.industries.values())

    for _ in range(300):
        raw = _random_stock(rng)
        industry = industries[rng.integers(len(industries))]
        for category, metrics in raw.items():
            score = score_category(category, metrics, industry, tables.market, guard=True)
            assert isinstance(score, int)
            assert 0 <= score <= 100
