"""
Explanation templates for qualitative ratings.

Each template interpolates the stock's raw values next to the industry
averages. The text is presentation only; the rating itself is decided in
rating_classifier.py.
"""

from config.analysis_config import MOMENTUM_RSI_BANDS
from metric_scoring.metric_schema import (
    MomentumMetrics,
    PerformanceMetrics,
    RatingLabel,
    StabilityMetrics,
    ValueMetrics,
)
from utils.numeric_utils import safe_format


def _num(value) -> str:
    # 12.0 -> "12", 12.5 -> "12.5"
    return f"{value:g}"


def _yield(value) -> str:
    return safe_format(value, "g", suffix="%")


def explain_performance(label: RatingLabel, stock: PerformanceMetrics, industry: PerformanceMetrics) -> str:
    basis = (
        f"Based on revenue growth of {_num(stock.revenue_growth)}% (Industry: {_num(industry.revenue_growth)}%), "
        f"profit margins of {_num(stock.profit_margin)}% (Industry: {_num(industry.profit_margin)}%), "
        f"and return on invested capital of {_num(stock.return_on_capital)}% "
        f"(Industry: {_num(industry.return_on_capital)}%)."
    )
    if label == RatingLabel.HIGH:
        return basis + (
            " The company clearly outpaces its industry on growth, margins and capital efficiency,"
            " showing strong operational execution."
        )
    if label == RatingLabel.LOW:
        return basis + (
            " At least one of these trails the industry by a wide margin, which points to headwinds"
            " in growing revenue or keeping profits up compared to peers."
        )
    return basis + (
        " These are broadly in line with industry averages: steady execution with room to improve"
        " efficiency or scale."
    )


def explain_stability(label: RatingLabel, stock: StabilityMetrics, industry: StabilityMetrics) -> str:
    basis = (
        f"With volatility of {_num(stock.volatility)} (Industry: {_num(industry.volatility)}), "
        f"beta of {_num(stock.beta)} (Industry: {_num(industry.beta)}), and "
        f"{stock.dividend_consistency.value} dividend consistency "
        f"(Industry: {industry.dividend_consistency.value}),"
    )
    if label == RatingLabel.HIGH:
        return basis + (
            " this stock shows strong stability. It swings less than its peers and a beta near 1.0"
            " means it tracks the market without overreacting."
        )
    if label == RatingLabel.UNSTABLE:
        return basis + (
            " this stock shows concerning stability. Higher volatility, a beta far from 1.0 or a weaker"
            " dividend record than peers exposes investors to sharper moves in downturns."
        )
    return basis + (
        " this stock shows average stability. Its price generally follows the market with moderate"
        " predictability."
    )


def explain_value(label: RatingLabel, stock: ValueMetrics, industry: ValueMetrics) -> str:
    basis = (
        f"With a P/E ratio of {_num(stock.pe_ratio)} (Industry: {_num(industry.pe_ratio)}), "
        f"P/B ratio of {_num(stock.pb_ratio)} (Industry: {_num(industry.pb_ratio)}), and "
        f"dividend yield of {_yield(stock.dividend_yield)} (Industry: {_yield(industry.dividend_yield)}),"
    )
    if label == RatingLabel.GOOD:
        return basis + (
            " this stock looks undervalued against its peers: you pay less for each dollar of earnings"
            " and book value, and collect a higher dividend."
        )
    if label == RatingLabel.POOR:
        return basis + (
            " this stock looks expensive against its peers. The premium usually reflects high growth"
            " expectations, which raises the risk of disappointment."
        )
    return basis + (
        " this stock is fairly valued: the market prices it roughly in line with similar businesses."
    )


def explain_momentum(label: RatingLabel, stock: MomentumMetrics, industry: MomentumMetrics) -> str:
    basis = (
        f"With a 3-month return of {_num(stock.three_month_return)}% "
        f"(Industry: {_num(industry.three_month_return)}%), relative performance of "
        f"{_num(stock.relative_performance)}% vs. market, and RSI of {_num(stock.rsi)},"
    )
    if label == RatingLabel.STRONG:
        return basis + (
            " this stock has strong positive momentum, running ahead of its industry and the market"
            " without looking overbought."
        )
    if label == RatingLabel.WEAK:
        weak_below, weak_above = MOMENTUM_RSI_BANDS['weak_below'], MOMENTUM_RSI_BANDS['weak_above']
        if stock.rsi < weak_below:
            rsi_note = f" An RSI below {_num(weak_below)} suggests the stock may be oversold."
        elif stock.rsi > weak_above:
            rsi_note = f" An RSI above {_num(weak_above)} suggests the stock may be overbought."
        else:
            rsi_note = ""
        return basis + (
            " this stock has weak momentum and trails its peers or the broader market." + rsi_note
        )
    return basis + (
        " this stock has moderate momentum, moving broadly with its industry and the market."
    )
