"""
Pytest fixtures for event_returns tests.

Provides small CRSP-style monthly record sets and a DuckDB connection with
those record sets registered from parquet under the `crsp` schema.
"""
import pytest
import pandas as pd
import numpy as np
from unittest.mock import MagicMock, patch

from event_returns import db, io


# =============================================================================
# Sample Data Generators
# =============================================================================

@pytest.fixture
def sample_msf():
    """
    Sample CRSP Monthly Stock File.

    10001: four clean months.
    10002: February return missing.
    10003: one month, delisted on the same month-end.
    """
    return pd.DataFrame({
        'permno': [10001, 10001, 10001, 10001, 10002, 10002, 10002, 10003],
        'date': pd.to_datetime([
            '2019-01-31', '2019-02-28', '2019-03-29', '2019-04-30',
            '2019-01-31', '2019-02-28', '2019-03-29',
            '2019-01-31',
        ]),
        'ret': [0.10, 0.05, -0.02, 0.03, 0.02, np.nan, 0.04, 0.10],
        'prc': [10.0, 10.5, 10.3, 10.6, 20.0, 20.0, 20.8, 5.0],
    })


@pytest.fixture
def sample_msedelist():
    """
    Sample CRSP monthly delisting events.

    10001: delisting record without a return (dropped).
    10002: delisted mid-April (its own row).
    10003: delisted on a month-end that has an ordinary return.
    """
    return pd.DataFrame({
        'permno': [10001, 10002, 10003],
        'dlstdt': pd.to_datetime(['2019-04-30', '2019-04-15', '2019-01-31']),
        'dlstcd': [100, 500, 550],
        'dlret': [np.nan, -0.30, -0.50],
    })


@pytest.fixture
def sample_ermport():
    """Sample size-decile portfolio returns (crsp.ermport1)."""
    return pd.DataFrame({
        'permno': [10001, 10001, 10001, 10001, 10002],
        'date': pd.to_datetime(['2019-01-31', '2019-02-28', '2019-03-29', '2019-04-30', '2019-01-31']),
        'capn': [5, 5, 5, 5, 3],
        'decret': [0.01, 0.01, 0.01, 0.01, 0.02],
    })


@pytest.fixture
def sample_msi():
    """Sample CRSP monthly market index (crsp.msi)."""
    return pd.DataFrame({
        'date': pd.to_datetime(['2019-01-31', '2019-02-28', '2019-03-29', '2019-04-30']),
        'vwretd': [0.01, 0.02, -0.01, 0.02],
        'ewretd': [0.02, 0.01, 0.00, 0.01],
    })


@pytest.fixture
def sample_events():
    """Sample events keyed by PERMNO."""
    return pd.DataFrame({
        'permno': [10001, 10001],
        'event_date': pd.to_datetime(['2019-02-15', '2019-03-10']),
    })


# =============================================================================
# Parquet Store and Connections
# =============================================================================

def write_crsp_parquet(data_dir, frames):
    """Write {table: DataFrame} to <data_dir>/crsp/<table>.parquet."""
    crsp_dir = data_dir / "crsp"
    crsp_dir.mkdir(parents=True, exist_ok=True)
    for name, df in frames.items():
        df.to_parquet(crsp_dir / f"{name}.parquet", index=False)
    return data_dir


@pytest.fixture
def write_parquet():
    """Helper for writing extra record sets into a parquet store."""
    return write_crsp_parquet


@pytest.fixture
def crsp_data_dir(tmp_path, sample_msf, sample_msedelist, sample_ermport, sample_msi):
    """Parquet store holding the four raw CRSP record sets."""
    return write_crsp_parquet(tmp_path / "data", {
        'msf': sample_msf,
        'msedelist': sample_msedelist,
        'ermport1': sample_ermport,
        'msi': sample_msi,
    })


@pytest.fixture
def duckdb_con():
    """In-memory ibis DuckDB connection."""
    con = db.get_duckdb()
    yield con
    con.disconnect()


@pytest.fixture
def crsp_con(duckdb_con, crsp_data_dir):
    """DuckDB connection with crsp.msf, crsp.msedelist, crsp.ermport1 and crsp.msi."""
    io.load_crsp_parquet(duckdb_con, data_dir=crsp_data_dir)
    return duckdb_con


# =============================================================================
# Mock Fixtures (for unit testing)
# =============================================================================

@pytest.fixture
def mock_postgres_connect():
    """Mock ibis inside event_returns.db so no WRDS connection is attempted."""
    with patch("event_returns.db.ibis") as mock_ibis:
        mock_ibis.postgres.connect.return_value = MagicMock()
        yield mock_ibis.postgres.connect
