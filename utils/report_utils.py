"""
Report Formatting Utilities
Centralized logic for formatting console and text reports.
"""

import pandas as pd

from config.constants import CATEGORIES, CATEGORY_DISPLAY_NAMES, SUB_INDICATOR_DISPLAY_NAMES
from metric_scoring.ratings.comparison import comparison_symbol, score_to_rating
from utils.numeric_utils import safe_format


def _score_str(score):
    return f"{score:>3} / 100" if score is not None else "N/A"


def format_stock_score_report(card, breakdowns=None):
    """
    Format a StockScorecard as a clean report string.

    Args:
        card: StockScorecard
        breakdowns: optional {category: CategoryScoreBreakdown} to list SI/IM terms
            with each stock value set against its industry average
    """
    if card is None:
        return None

    lines = []
    lines.append("-" * 70)
    title = f"STOCK SCORE REPORT - {card.ticker}"
    if card.name:
        title += f" ({card.name})"
    lines.append(title)
    lines.append("-" * 70)

    industry = card.industry
    if card.benchmark_industry != card.industry:
        industry += f" (benchmarked as {card.benchmark_industry})"
    lines.append(f"Industry: {industry}")

    for w in card.warnings:
        lines.append(f"[NOTE] {w}")

    lines.append(f"Overall Score: {_score_str(card.overall_score)}")
    lines.append("")

    for category in CATEGORIES:
        name = CATEGORY_DISPLAY_NAMES[category]
        score = card.scores.get(category)
        rating = card.ratings.get(category)
        label = f"{rating.label.value} ({rating.color.value})" if rating else ""
        band = score_to_rating(score).rating if score is not None else ""
        lines.append(f"  {name:<20} : {_score_str(score):>9}   {band:<8} {label}")

        if breakdowns and category in breakdowns:
            for item in breakdowns[category].sub_indicators:
                display = SUB_INDICATOR_DISPLAY_NAMES.get(item.name, item.name)
                lines.append(
                    f"      - {display:<22}: {safe_format(item.stock_value):>8} "
                    f"{comparison_symbol(item.stock_value, item.industry_value)} "
                    f"{safe_format(item.industry_value):<8} "
                    f"(SI {safe_format(item.si)}, IM {safe_format(item.im)}, "
                    f"Weight {item.weight:.0%})"
                )

    lines.append("-" * 70)
    return "\n".join(lines)


def format_score_table(df):
    """Format the batch score DataFrame as a fixed-width table."""
    if df is None or df.empty:
        return None

    lines = []
    lines.append("-" * 70)
    lines.append("STOCK SCORES")
    lines.append("-" * 70)
    header = f"{'Ticker':<8}{'Industry':<20}"
    for category in CATEGORIES:
        header += f"{CATEGORY_DISPLAY_NAMES[category][:5]:>7}"
    header += f"{'Total':>7}"
    lines.append(header)

    for _, row in df.iterrows():
        line = f"{row['ticker']:<8}{str(row['industry'])[:19]:<20}"
        for col in [*CATEGORIES, 'overall']:
            value = row[col]
            line += f"{'N/A' if pd.isna(value) else int(value):>7}"
        lines.append(line)

    lines.append("-" * 70)
    return "\n".join(lines)


def format_portfolio_report(metrics, allocation, total_value=None):
    """
    Format blended portfolio scores and industry allocation.

    Args:
        metrics: {category: score}
        allocation: {industry: percent}
        total_value: optional total market value of the holdings
    """
    lines = []
    lines.append("-" * 70)
    lines.append("PORTFOLIO REPORT")
    lines.append("-" * 70)
    if total_value is not None:
        lines.append(f"Total Value: ${total_value:,.2f}")
        lines.append("")

    lines.append("Category Scores:")
    for category in CATEGORIES:
        lines.append(f"  {CATEGORY_DISPLAY_NAMES[category]:<20} : {_score_str(metrics.get(category))}")

    if allocation:
        lines.append("")
        lines.append("Industry Allocation:")
        for industry, pct in sorted(allocation.items(), key=lambda x: x[1], reverse=True):
            lines.append(f"  {industry:<20} : {pct:>6.1f}%")

    lines.append("-" * 70)
    return "\n".join(lines)


def format_impact_report(impact):
    """Format a PortfolioImpact as a before/after table."""
    if impact is None:
        return None

    lines = []
    lines.append("-" * 70)
    lines.append(f"PURCHASE IMPACT - {impact.ticker} (${impact.amount:,.2f})")
    lines.append("-" * 70)
    lines.append(f"  {'Category':<20} {'Current':>8} {'New':>8} {'Change':>8}")

    changes = impact.impact
    for category in CATEGORIES:
        change = changes[category]
        change_str = f"{'+' if change >= 0 else ''}{change}"
        lines.append(
            f"  {CATEGORY_DISPLAY_NAMES[category]:<20} "
            f"{impact.current_metrics[category]:>8} {impact.new_metrics[category]:>8} {change_str:>8}"
        )

    lines.append("")
    lines.append("Industry Allocation:")
    for industry, change in impact.industry_allocation.items():
        lines.append(f"  {industry:<20} : {change.current:>6.1f}% -> {change.new:>6.1f}%")

    lines.append("-" * 70)
    return "\n".join(lines)
