"""
Event Window Boundaries.

Windows are whole calendar months: they begin on the first day of the month
holding the event date and end on the last day of the month holding the end
event date, each shifted by a whole number of months. Month arithmetic clamps
to the length of the target month (Jan 31 + 1 month = Feb 28), matching
`date + interval 'n month'` in PostgreSQL and DuckDB.
"""
from typing import Tuple

import ibis
import ibis.expr.types as ir
import pandas as pd


def window_bounds(
    start_date,
    end_date,
    win_start: int = 0,
    win_end: int = 0,
) -> Tuple[pd.Timestamp, pd.Timestamp]:
    """
    Compute the inclusive [begin, end] dates of an event window.

    Args:
        start_date: Event date (anything pd.Timestamp accepts).
        end_date: End event date; pass the event date for single-date events.
        win_start: Months to shift the window start (may be negative).
        win_end: Months to shift the window end (may be negative).

    Returns:
        Tuple of (begin, end). No check is made that begin <= end.
    """
    month_start = pd.Timestamp(start_date).to_period("M").to_timestamp()
    begin = month_start + pd.DateOffset(months=int(win_start))

    month_end = (
        pd.Timestamp(end_date).to_period("M").to_timestamp()
        + pd.DateOffset(months=1)
        - pd.Timedelta(days=1)
    )
    end = month_end + pd.DateOffset(months=int(win_end))
    return begin, end


def window_bounds_expr(
    start: ir.Value,
    end: ir.Value,
    win_start: int = 0,
    win_end: int = 0,
) -> Tuple[ir.Value, ir.Value]:
    """
    Build ibis date expressions for the inclusive [begin, end] window dates.

    Same semantics as `window_bounds`, evaluated by the query engine.
    """
    begin = start.cast("date").truncate("M") + ibis.interval(months=int(win_start))

    month_end = (
        end.cast("date").truncate("M")
        + ibis.interval(months=1)
        - ibis.interval(days=1)
    )
    finish = month_end + ibis.interval(months=int(win_end))
    return begin, finish
