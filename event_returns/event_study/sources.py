"""
Monthly Return Sources.

Resolves the monthly return record set (permno, date, ret, decret, vwretd)
either from a pre-materialized table or by deriving it from the raw CRSP
record sets. Both strategies yield the same schema.
"""
from abc import ABC, abstractmethod
from typing import Optional

import ibis
import ibis.expr.types as ir
from ibis import _

from .. import db, log
from ..settings import CrspTables
from .constants import ID, DATE, RET, SIZE_RET, MARKET_RET

logger = log.logger


def _standardize(t: ir.Table) -> ir.Table:
    """Project onto the monthly return columns with `date` typed as a date."""
    return t.select(
        **{
            ID: t[ID],
            DATE: t[DATE].cast("date"),
            RET: t[RET],
            SIZE_RET: t[SIZE_RET],
            MARKET_RET: t[MARKET_RET],
        }
    )


class ReturnSource(ABC):
    """
    Strategy for producing the monthly return record set.

    Subclasses must implement:
        - name: Human-readable strategy name
        - monthly_returns(): ibis expression for the record set
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    def is_available(self, con, tables: CrspTables) -> bool:
        """Whether the connection can serve this strategy."""
        return True

    @abstractmethod
    def monthly_returns(self, con, tables: CrspTables) -> ir.Table:
        pass


class PrecomputedReturns(ReturnSource):
    """Read the pre-joined monthly returns table (e.g. crsp.mrets)."""

    @property
    def name(self) -> str:
        return "precomputed"

    def is_available(self, con, tables: CrspTables) -> bool:
        return db.has_table(con, tables.mrets, tables.schema)

    def monthly_returns(self, con, tables: CrspTables) -> ir.Table:
        return _standardize(con.table(tables.mrets, database=tables.schema))


class DerivedReturns(ReturnSource):
    """
    Derive monthly returns from the delisting, stock, size-portfolio and
    market-index record sets.

    ret = (1 + ret) * (1 + dlret) - 1, keeping months where either is present.
    decret is attached by (permno, date) and vwretd by date; both may be null.
    """

    @property
    def name(self) -> str:
        return "derived"

    def monthly_returns(self, con, tables: CrspTables) -> ir.Table:
        schema = tables.schema
        msedelist = con.table(tables.msedelist, database=schema)
        msf = con.table(tables.msf, database=schema)
        ermport = con.table(tables.ermport, database=schema)
        msi = con.table(tables.msi, database=schema)

        delist = (
            msedelist
            .select(dl_permno=_.permno, dl_date=_.dlstdt.cast("date"), dlret=_.dlret)
            .filter(_.dlret.notnull())
        )
        stock = msf.select(permno=_.permno, date=_.date.cast("date"), ret=_.ret)

        # Delisting dates rarely fall on month-end, so most delisting returns
        # arrive as rows of their own.
        msf_plus = (
            stock.outer_join(
                delist,
                [stock.permno == delist.dl_permno, stock.date == delist.dl_date],
            )
            .filter(_.ret.notnull() | _.dlret.notnull())
            .select(
                permno=ibis.coalesce(_.permno, _.dl_permno),
                date=ibis.coalesce(_.date, _.dl_date),
                ret=(1 + ibis.coalesce(_.ret, 0)) * (1 + ibis.coalesce(_.dlret, 0)) - 1,
            )
        )

        size = ermport.select(er_permno=_.permno, er_date=_.date.cast("date"), decret=_.decret)
        with_size = (
            msf_plus.left_join(
                size,
                [msf_plus.permno == size.er_permno, msf_plus.date == size.er_date],
            )
            .select(ID, DATE, RET, SIZE_RET)
        )

        market = msi.select(msi_date=_.date.cast("date"), vwretd=_.vwretd)
        mrets = (
            with_size.left_join(market, with_size.date == market.msi_date)
            .select(ID, DATE, RET, SIZE_RET, MARKET_RET)
        )
        return _standardize(mrets)


def resolve_return_source(con, tables: Optional[CrspTables] = None) -> ReturnSource:
    """
    Pick the monthly return strategy the connection supports.

    The pre-materialized table wins when present; otherwise returns are
    derived from the raw record sets.
    """
    tables = tables or CrspTables()
    precomputed = PrecomputedReturns()
    if precomputed.is_available(con, tables):
        source = precomputed
    else:
        source = DerivedReturns()
    logger.info(f"Using {source.name} monthly returns ({tables.schema})")
    return source


def materialize_monthly_returns(
    con,
    tables: Optional[CrspTables] = None,
    overwrite: bool = True,
) -> ir.Table:
    """
    Derive monthly returns and store them as the pre-materialized table,
    so that later calls take the precomputed path.

    Requires write access to the target schema (a local DuckDB database,
    not WRDS).
    """
    tables = tables or CrspTables()
    expr = DerivedReturns().monthly_returns(con, tables)
    logger.info(f"Materializing {tables.schema}.{tables.mrets}...")
    table = con.create_table(tables.mrets, expr, database=tables.schema, overwrite=overwrite)
    logger.info(f"Materialized {tables.schema}.{tables.mrets}.")
    return table
