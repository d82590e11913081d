"""
Metric Schema - the data model shared by scorers, classifiers and the portfolio layer.

Unit Conventions
----------------
- Growth, margin, return and yield fields are percentages (12.5 means 12.5%),
  matching the stock datasets. They are NOT decimals.
- Volatility and beta are plain floats; RSI is on its 0-100 scale.
- dividend_yield may be missing ("N/A"); it is stored as None and read as 0.

Field names are snake_case in Python; the camelCase keys used by the stock
datasets ("revenueGrowth", "peRatio", ...) are accepted as aliases.

All models are frozen and reject NaN/Inf so that malformed input fails here,
at the boundary, instead of leaking NaN into scores.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

from config.constants import NOT_AVAILABLE
from utils.numeric_utils import parse_percent


class MetricCategory(str, Enum):
    """The four axes a stock is scored on."""
    PERFORMANCE = "performance"
    STABILITY = "stability"
    VALUE = "value"
    MOMENTUM = "momentum"


class DividendConsistency(str, Enum):
    """Qualitative dividend history, parsed case-insensitively."""
    HIGH = "High"
    GOOD = "Good"
    MEDIUM = "Medium"
    LOW = "Low"
    POOR = "Poor"
    NOT_AVAILABLE = NOT_AVAILABLE

    @classmethod
    def parse(cls, value: Any) -> "DividendConsistency":
        """Parse a label such as 'high', 'Medium ' or 'n/a'. Unknown labels raise ValueError."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.NOT_AVAILABLE
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ('', 'none', 'na'):
                return cls.NOT_AVAILABLE
            for member in cls:
                if member.value.lower() == key:
                    return member
        raise ValueError(f"Unknown dividend consistency: {value!r}")

    @property
    def score(self) -> int:
        """Numeric score used by the ratio pipeline."""
        return DIVIDEND_CONSISTENCY_SCORES[self]


DIVIDEND_CONSISTENCY_SCORES: Dict[DividendConsistency, int] = {
    DividendConsistency.HIGH: 100,
    DividendConsistency.GOOD: 75,
    DividendConsistency.MEDIUM: 50,
    DividendConsistency.LOW: 25,
    DividendConsistency.POOR: 25,
    DividendConsistency.NOT_AVAILABLE: 0,
}


class RatingColor(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class RatingLabel(str, Enum):
    """Qualitative labels. Each category uses its own three of these."""
    HIGH = "High"
    FAIR = "Fair"
    LOW = "Low"
    UNSTABLE = "Unstable"
    GOOD = "Good"
    POOR = "Poor"
    STRONG = "Strong"
    WEAK = "Weak"


class _MetricModel(BaseModel):
    """Base config: frozen, camelCase aliases, finite numbers only."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


# =============================================================================
# Raw metrics (one variant per category)
# =============================================================================

class PerformanceMetrics(_MetricModel):
    revenue_growth: float
    profit_margin: float
    return_on_capital: float


class StabilityMetrics(_MetricModel):
    volatility: float
    beta: float
    dividend_consistency: DividendConsistency = DividendConsistency.NOT_AVAILABLE

    @field_validator('dividend_consistency', mode='before')
    @classmethod
    def _parse_consistency(cls, value: Any) -> DividendConsistency:
        return DividendConsistency.parse(value)


class ValueMetrics(_MetricModel):
    pe_ratio: float
    pb_ratio: float
    dividend_yield: Optional[float] = None

    @field_validator('dividend_yield', mode='before')
    @classmethod
    def _parse_yield(cls, value: Any) -> Optional[float]:
        return parse_percent(value)

    @field_serializer('dividend_yield')
    def _dump_yield(self, value: Optional[float]):
        return NOT_AVAILABLE if value is None else value

    @property
    def dividend_yield_value(self) -> float:
        """Dividend yield with the N/A sentinel read as 0."""
        return 0.0 if self.dividend_yield is None else self.dividend_yield


class MomentumMetrics(_MetricModel):
    three_month_return: float
    relative_performance: float = 0.0
    rsi: float = Field(ge=0, le=100)


class StockMetrics(_MetricModel):
    """Raw metrics for all four categories of one stock."""
    performance: PerformanceMetrics
    stability: StabilityMetrics
    value: ValueMetrics
    momentum: MomentumMetrics

    @model_validator(mode='before')
    @classmethod
    def _unwrap_details(cls, data: Any) -> Any:
        # Stock datasets nest raw values as {"value": "High", "details": {...}}
        if isinstance(data, dict):
            unwrapped = {}
            for key, section in data.items():
                if isinstance(section, dict) and 'details' in section:
                    unwrapped[key] = section['details']
                else:
                    unwrapped[key] = section
            return unwrapped
        return data

    def for_category(self, category: MetricCategory) -> _MetricModel:
        return getattr(self, MetricCategory(category).value)


# =============================================================================
# Benchmarks
# =============================================================================

class BenchmarkRecord(_MetricModel):
    """Averaged raw metrics for an industry, or for the whole market."""
    name: str = ""
    performance: PerformanceMetrics
    stability: StabilityMetrics
    value: ValueMetrics
    momentum: MomentumMetrics

    def for_category(self, category: MetricCategory) -> _MetricModel:
        return getattr(self, MetricCategory(category).value)


# =============================================================================
# Stocks, holdings and ratings
# =============================================================================

class StockProfile(_MetricModel):
    ticker: str
    name: str = ""
    industry: str
    price: Optional[float] = None
    metrics: StockMetrics


class PortfolioHolding(_MetricModel):
    stock: StockProfile
    value: float = Field(ge=0)


class Rating(_MetricModel):
    label: RatingLabel
    color: RatingColor
    explanation: str = ""
