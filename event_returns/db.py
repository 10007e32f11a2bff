from pathlib import Path
from typing import Optional, Union

import ibis

from . import log
from .settings import WRDSConfig

logger = log.logger

# ---------------------------------------------------------------------
# Database Connections
# ---------------------------------------------------------------------

def get_db(wrds_config: Optional[WRDSConfig] = None):
    """
    Get an ibis PostgreSQL connection to WRDS using configuration credentials.

    The password falls back to ~/.pgpass when WRDS_PASSWORD is not set.
    """
    cfg = wrds_config or WRDSConfig()

    if not cfg.username:
        logger.warning("WRDS_USERNAME not found in environment or config. Connection might fail if no .pgpass.")

    try:
        logger.info(f"Connecting to WRDS (user: {cfg.username})...")
        con = ibis.postgres.connect(
            host=cfg.host,
            port=cfg.port,
            user=cfg.username or None,
            password=cfg.password or None,
            database=cfg.database,
        )
        return con
    except Exception as e:
        logger.error(f"WRDS connection failed: {e}")
        raise RuntimeError(f"WRDS connection failed: {e}") from e


def get_duckdb(path: Optional[Union[str, Path]] = None):
    """
    Get an ibis DuckDB connection. In-memory unless a database file is given.
    """
    if path is None:
        return ibis.duckdb.connect()
    logger.info(f"Opening DuckDB database at {path}")
    return ibis.duckdb.connect(str(path))


# ---------------------------------------------------------------------
# Capability Probes
# ---------------------------------------------------------------------

def has_table(con, table: str, schema: str) -> bool:
    """Check whether `schema.table` is visible on the connection."""
    return table in con.list_tables(database=schema)
