"""
Event Return Constants.

Column names of the monthly return record set and the cumulative return metrics.
"""
from typing import Tuple

# =============================================================================
# Monthly Return Record Columns
# =============================================================================

ID = "permno"
DATE = "date"
RET = "ret"
SIZE_RET = "decret"    # Size-decile benchmark portfolio return (crsp.ermport1)
MARKET_RET = "vwretd"  # Value-weighted market return incl. distributions (crsp.msi)

MONTHLY_RETURN_COLUMNS: Tuple[str, ...] = (ID, DATE, RET, SIZE_RET, MARKET_RET)

# =============================================================================
# Cumulative Return Metrics
# =============================================================================

RET_RAW = "ret_raw"
RET_MKT = "ret_mkt"
RET_SZ = "ret_sz"

METRIC_COLUMNS: Tuple[str, ...] = (RET_RAW, RET_MKT, RET_SZ)

# Prefix after which the caller-supplied suffix is inserted
METRIC_PREFIX = "ret"
