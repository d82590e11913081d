import pytest

from config.analysis_config import MOMENTUM_RSI_BANDS
from metric_scoring.metric_schema import (
    MetricCategory,
    MomentumMetrics,
    PerformanceMetrics,
    RatingColor,
    RatingLabel,
    StabilityMetrics,
    ValueMetrics,
)
from metric_scoring.ratings.rating_classifier import (
    classify_momentum,
    classify_performance,
    classify_rating,
    classify_stability,
    classify_value,
)


class TestStability:

    def test_stryker_is_high(self, healthcare):
        raw = StabilityMetrics(volatility=0.95, beta=1.0, dividend_consistency='High')
        rating = classify_stability(raw, healthcare.stability)
        assert rating.label is RatingLabel.HIGH
        assert rating.color is RatingColor.GREEN
        assert '0.95' in rating.explanation
        assert '(Industry: 1.2)' in rating.explanation

    def test_beta_outside_band_is_unstable(self, healthcare):
        raw = StabilityMetrics(volatility=0.95, beta=1.4, dividend_consistency='High')
        rating = classify_stability(raw, healthcare.stability)
        assert rating.label is RatingLabel.UNSTABLE
        assert rating.color is RatingColor.RED

    def test_weaker_dividend_history_is_unstable(self, tables):
        planning = tables.resolve_industry('Financial Planning').stability
        raw = StabilityMetrics(volatility=0.9, beta=1.0, dividend_consistency='Medium')
        assert classify_stability(raw, planning).label is RatingLabel.UNSTABLE

    def test_small_volatility_edge_is_fair(self, healthcare):
        raw = StabilityMetrics(volatility=1.15, beta=1.0, dividend_consistency='Low')
        rating = classify_stability(raw, healthcare.stability)
        assert rating.label is RatingLabel.FAIR
        assert rating.color is RatingColor.YELLOW


class TestPerformance:

    def test_high_needs_every_margin(self, healthcare):
        raw = PerformanceMetrics(revenue_growth=21, profit_margin=26, return_on_capital=17)
        assert classify_performance(raw, healthcare.performance).label is RatingLabel.HIGH

    def test_one_short_margin_is_fair(self, healthcare):
        raw = PerformanceMetrics(revenue_growth=21, profit_margin=26, return_on_capital=15)
        assert classify_performance(raw, healthcare.performance).label is RatingLabel.FAIR

    def test_any_large_shortfall_is_low(self, healthcare):
        raw = PerformanceMetrics(revenue_growth=21, profit_margin=12, return_on_capital=17)
        rating = classify_performance(raw, healthcare.performance)
        assert rating.label is RatingLabel.LOW
        assert rating.color is RatingColor.RED


class TestValue:

    def test_good(self, healthcare):
        raw = ValueMetrics(pe_ratio=20, pb_ratio=3, dividend_yield=1.5)
        rating = classify_value(raw, healthcare.value)
        assert rating.label is RatingLabel.GOOD
        assert rating.color is RatingColor.GREEN

    def test_stryker_is_fair(self, stryker, healthcare):
        assert classify_value(stryker.metrics.value, healthcare.value).label is RatingLabel.FAIR

    def test_expensive_is_poor(self, healthcare):
        raw = ValueMetrics(pe_ratio=30, pb_ratio=3, dividend_yield=1.5)
        assert classify_value(raw, healthcare.value).label is RatingLabel.POOR

    def test_missing_yield_counts_as_zero(self, tables):
        default = tables.default.value
        raw = ValueMetrics(pe_ratio=18, pb_ratio=2.5, dividend_yield='N/A')
        rating = classify_value(raw, default)
        # 0 < 1.5 - 0.5
        assert rating.label is RatingLabel.POOR
        assert 'dividend yield of N/A' in rating.explanation


class TestMomentum:

    def test_stryker_is_strong(self, stryker, healthcare):
        rating = classify_momentum(stryker.metrics.momentum, healthcare.momentum)
        assert rating.label is RatingLabel.STRONG
        assert rating.color is RatingColor.GREEN

    @pytest.mark.parametrize('rsi', [40, 75])
    def test_rsi_extremes_are_weak(self, healthcare, rsi):
        raw = MomentumMetrics(three_month_return=9, relative_performance=3, rsi=rsi)
        rating = classify_momentum(raw, healthcare.momentum)
        assert rating.label is RatingLabel.WEAK
        assert 'RSI' in rating.explanation

    def test_rsi_note_follows_configured_bands(self, monkeypatch, healthcare):
        monkeypatch.setitem(MOMENTUM_RSI_BANDS, 'weak_below', 42.0)
        raw = MomentumMetrics(three_month_return=9, relative_performance=3, rsi=40)
        rating = classify_momentum(raw, healthcare.momentum)
        assert rating.label is RatingLabel.WEAK
        assert 'An RSI below 42 suggests' in rating.explanation

    def test_neutral_rsi_is_fair(self, healthcare):
        raw = MomentumMetrics(three_month_return=9, relative_performance=3, rsi=50)
        assert classify_momentum(raw, healthcare.momentum).label is RatingLabel.FAIR

    def test_lagging_return_is_weak(self, healthcare):
        raw = MomentumMetrics(three_month_return=1, relative_performance=1, rsi=60)
        assert classify_momentum(raw, healthcare.momentum).label is RatingLabel.WEAK


def test_classify_rating_dispatch(stryker, healthcare):
    rating = classify_rating('stability', stryker.metrics.stability, healthcare.stability)
    assert rating.label is RatingLabel.HIGH
    rating = classify_rating(MetricCategory.PERFORMANCE, stryker.metrics.performance, healthcare.performance)
    assert rating.label is RatingLabel.FAIR
