"""
Cumulative Return Metrics.

Cumulative returns are compounded as exp(sum(ln(1 + r))), which aggregates
in SQL and equals prod(1 + r). Null monthly returns are skipped by SUM.
"""
from typing import Dict

import ibis.expr.types as ir
import pandas as pd

from .constants import RET, SIZE_RET, MARKET_RET, RET_RAW, RET_MKT, RET_SZ, METRIC_COLUMNS, METRIC_PREFIX


def gross_cum_return(ret: ir.NumericColumn) -> ir.NumericScalar:
    """Gross cumulative return exp(sum(ln(1 + r)))."""
    return (1 + ret).ln().sum().exp()


def cumulative_metrics(t: ir.Table) -> Dict[str, ir.NumericScalar]:
    """
    Aggregations for raw, market-excess and size-excess cumulative returns.

    ret_raw = R - 1
    ret_mkt = R - R_vwretd
    ret_sz  = R - R_decret
    where R is the gross cumulative return of each series.
    """
    gross_ret = gross_cum_return(t[RET])
    return {
        RET_RAW: gross_ret - 1,
        RET_MKT: gross_ret - gross_cum_return(t[MARKET_RET]),
        RET_SZ: gross_ret - gross_cum_return(t[SIZE_RET]),
    }


def add_suffix(df: pd.DataFrame, suffix: str = "") -> pd.DataFrame:
    """Insert `suffix` after the 'ret' prefix of the metric columns (ret_raw -> ret<suffix>_raw)."""
    if not suffix:
        return df
    mapping = {
        col: METRIC_PREFIX + suffix + col[len(METRIC_PREFIX):]
        for col in METRIC_COLUMNS
        if col in df.columns
    }
    return df.rename(columns=mapping)
