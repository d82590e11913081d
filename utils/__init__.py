"""
Utilities module for the metric scoring engine.

--- Quick Reference ---

1. Numeric handling (numeric_utils.py)
   from utils.numeric_utils import clean_numeric, safe_format, is_valid_number
   - clean_numeric(value)        NaN/Inf/None -> None
   - parse_percent("1.5%")       "N/A" / unparseable -> None
   - safe_format(val, ".2f")     invalid -> "N/A"
   - round_half_up(72.5)         73 (scores never use banker's rounding)

2. Logging (logger.py)
   from utils.logger import setup_logger
   - logger = setup_logger('module_name')
   - set_logging_mode(LoggingContext.SILENT) to quiet library modules

3. Reports (report_utils.py)
   from utils.report_utils import format_stock_score_report, format_portfolio_report

--- Notes ---
- Use ieee_divide() for ratios that must not raise on a zero denominator
- Use setup_logger() for logging, not print() (print is for runner output)
"""

from .logger import setup_logger, default_logger, LoggingContext, set_logging_mode, get_logging_mode
from .numeric_utils import (
    clean_numeric,
    ieee_divide,
    is_valid_number,
    parse_percent,
    round_half_up,
    safe_format,
)

__all__ = [
    'setup_logger',
    'default_logger',
    'LoggingContext',
    'set_logging_mode',
    'get_logging_mode',
    'clean_numeric',
    'ieee_divide',
    'is_valid_number',
    'parse_percent',
    'round_half_up',
    'safe_format',
]
