"""
Event Return Runner: Main Orchestration.

Computes cumulative raw, market-adjusted and size-adjusted returns over
windows of whole months around events, in a single query-engine round trip.
"""
from dataclasses import asdict
from typing import Optional

import ibis
import pandas as pd
from ibis import _

from .. import config, log
from ..settings import CrspTables, EventReturnParams
from .constants import ID, DATE, METRIC_COLUMNS
from .metrics import cumulative_metrics, add_suffix
from .sources import resolve_return_source
from .windows import window_bounds_expr

logger = log.logger

# Event columns are renamed internally so they cannot collide with the
# monthly return columns (permno, date, ...).
EVT_ID = "evt_id"
EVT_DATE = "evt_date"
EVT_END_DATE = "evt_end_date"
GROUP_KEYS = [EVT_ID, EVT_DATE, EVT_END_DATE]


def prepare_events(
    events: pd.DataFrame,
    id_column: str,
    event_date_column: str,
    end_event_date_column: Optional[str] = None,
) -> pd.DataFrame:
    """
    Select and deduplicate the event columns under their internal names.

    The end date defaults to the event date when no end column is given.

    Raises:
        KeyError: If a named column is missing from `events`.
    """
    end_col = end_event_date_column or event_date_column
    missing = [c for c in (id_column, event_date_column, end_col) if c not in events.columns]
    if missing:
        raise KeyError(f"Event columns not found: {missing}")

    local = pd.DataFrame({
        EVT_ID: events[id_column].to_numpy(),
        EVT_DATE: events[event_date_column].to_numpy(),
        EVT_END_DATE: events[end_col].to_numpy(),
    })
    return local.drop_duplicates().reset_index(drop=True)


def compute_event_cum_returns(
    events: pd.DataFrame,
    con,
    id_column: str = config.ID_COLUMN,
    event_date_column: str = config.EVENT_DATE_COLUMN,
    window_start_months: int = config.WINDOW_START_MONTHS,
    window_end_months: int = config.WINDOW_END_MONTHS,
    end_event_date_column: Optional[str] = None,
    suffix: str = "",
    tables: Optional[CrspTables] = None,
) -> pd.DataFrame:
    """
    Produce a table of cumulative event returns using monthly data.

    The window runs from the start of the event month shifted by
    `window_start_months` to the end of the end-event month shifted by
    `window_end_months`, inclusive. A window that ends before it begins
    yields no row for that event.

    Args:
        events: DataFrame with event identifiers and dates.
        con: ibis connection (DuckDB or PostgreSQL) holding the CRSP tables.
        id_column: Column holding PERMNOs.
        event_date_column: Column holding event dates.
        window_start_months: Start of the window in months (e.g. -1).
        window_end_months: End of the window in months (e.g. 1).
        end_event_date_column: Optional column holding event end dates.
        suffix: Text inserted after "ret" in the metric column names.
        tables: CRSP schema/table names; defaults to crsp.*.

    Returns:
        DataFrame with one row per (permno, event date[, end event date]) and
        columns ret<suffix>_raw, ret<suffix>_mkt, ret<suffix>_sz.
    """
    tables = tables or CrspTables()
    drop_end_event_date = end_event_date_column in (None, event_date_column)

    local = prepare_events(events, id_column, event_date_column, end_event_date_column)

    out_names = {EVT_ID: id_column, EVT_DATE: event_date_column}
    if not drop_end_event_date:
        out_names[EVT_END_DATE] = end_event_date_column

    if local.empty:
        logger.warning("No events supplied. Returning empty result.")
        empty = pd.DataFrame(columns=list(out_names.values()) + list(METRIC_COLUMNS))
        return add_suffix(empty, suffix)

    logger.info(
        f"Computing cumulative returns for {len(local)} events "
        f"(window {window_start_months:+d} to {window_end_months:+d} months)..."
    )

    mrets = resolve_return_source(con, tables).monthly_returns(con, tables)

    evt = ibis.memtable(local)
    begin, end = window_bounds_expr(
        evt[EVT_DATE], evt[EVT_END_DATE], window_start_months, window_end_months
    )
    evt = evt.mutate(win_begin=begin, win_end=end)

    in_window = (
        evt.inner_join(mrets, evt[EVT_ID] == mrets[ID])
        .filter(_[DATE].between(_.win_begin, _.win_end))
    )
    expr = in_window.group_by(GROUP_KEYS).aggregate(**cumulative_metrics(in_window))

    results = con.execute(expr)
    results = results.sort_values(GROUP_KEYS).reset_index(drop=True)

    if drop_end_event_date:
        results = results.drop(columns=[EVT_END_DATE])

    results = results.rename(columns=out_names)
    results = add_suffix(results, suffix)

    if results.empty:
        logger.warning("No monthly returns fell inside any event window.")
    logger.info(f"Event returns complete. Generated {len(results)} records.")
    return results


def run_event_returns(
    events: pd.DataFrame,
    con,
    params: Optional[EventReturnParams] = None,
    tables: Optional[CrspTables] = None,
) -> pd.DataFrame:
    """Run compute_event_cum_returns with arguments taken from EventReturnParams."""
    params = params or EventReturnParams()
    return compute_event_cum_returns(events, con, tables=tables, **asdict(params))
