from pathlib import Path
from typing import Dict, Optional, Union

from . import config, log
from .settings import CrspTables

logger = log.logger


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def load_parquet(
    con,
    table: str,
    schema: str,
    data_dir: Union[str, Path] = config.DATA_DIR,
):
    """
    Register <data_dir>/<schema>/<table>.parquet as the view `schema.table`
    on a DuckDB connection and return it as an ibis table.

    Args:
        con: ibis DuckDB connection.
        table: Table name (also the parquet file stem).
        schema: Schema to create the view in (also the sub-directory name).
        data_dir: Root of the parquet store.

    Returns:
        ibis Table for the registered view.

    Raises:
        FileNotFoundError: If the parquet file does not exist.
    """
    path = Path(data_dir) / schema / f"{table}.parquet"
    if not path.exists():
        raise FileNotFoundError(f"Parquet file not found: {path}")

    con.raw_sql(f'CREATE SCHEMA IF NOT EXISTS "{schema}"')
    con.raw_sql(
        f'CREATE OR REPLACE VIEW "{schema}"."{table}" AS '
        f"SELECT * FROM read_parquet({_quote(str(path))})"
    )
    logger.info(f"Registered {schema}.{table} from {path}")
    return con.table(table, database=schema)


def load_crsp_parquet(
    con,
    tables: Optional[CrspTables] = None,
    data_dir: Union[str, Path] = config.DATA_DIR,
) -> Dict[str, object]:
    """
    Register the monthly CRSP record sets from the parquet store.

    The four raw tables are required; the pre-joined `mrets` table is
    registered only if its file exists.
    """
    tables = tables or CrspTables()
    loaded = {}
    for name in tables.raw_tables:
        loaded[name] = load_parquet(con, name, tables.schema, data_dir)

    mrets_path = Path(data_dir) / tables.schema / f"{tables.mrets}.parquet"
    if mrets_path.exists():
        loaded[tables.mrets] = load_parquet(con, tables.mrets, tables.schema, data_dir)

    logger.info(f"Loaded {len(loaded)} CRSP tables from {data_dir}")
    return loaded
