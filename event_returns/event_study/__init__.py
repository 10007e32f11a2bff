"""
Event Return Package.

Provides cumulative raw, market-adjusted and size-adjusted returns over
monthly event windows.
"""
from .constants import (
    MONTHLY_RETURN_COLUMNS,
    METRIC_COLUMNS,
    RET_RAW,
    RET_MKT,
    RET_SZ,
)
from .windows import window_bounds, window_bounds_expr
from .metrics import gross_cum_return, cumulative_metrics, add_suffix
from .sources import (
    ReturnSource,
    PrecomputedReturns,
    DerivedReturns,
    resolve_return_source,
    materialize_monthly_returns,
)
from .runner import compute_event_cum_returns, run_event_returns, prepare_events

__all__ = [
    # Constants
    'MONTHLY_RETURN_COLUMNS',
    'METRIC_COLUMNS',
    'RET_RAW',
    'RET_MKT',
    'RET_SZ',
    # Windows
    'window_bounds',
    'window_bounds_expr',
    # Metrics
    'gross_cum_return',
    'cumulative_metrics',
    'add_suffix',
    # Sources
    'ReturnSource',
    'PrecomputedReturns',
    'DerivedReturns',
    'resolve_return_source',
    'materialize_monthly_returns',
    # Runner
    'compute_event_cum_returns',
    'run_event_returns',
    'prepare_events',
]
