"""
Type-Safe Configuration with Dataclasses.

Provides structured configuration for event return calculations.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .. import config as legacy


@dataclass
class WRDSConfig:
    """WRDS PostgreSQL connection configuration."""

    username: str = field(default_factory=lambda: legacy.WRDS_USERNAME or "")
    password: str = field(default_factory=lambda: legacy.WRDS_PASSWORD or "")
    host: str = legacy.WRDS_HOST
    port: int = legacy.WRDS_PORT
    database: str = legacy.WRDS_DATABASE


@dataclass
class CrspTables:
    """Schema and table names of the monthly CRSP record sets."""

    schema: str = legacy.CRSP_SCHEMA
    msedelist: str = legacy.CRSP_MSEDELIST
    msf: str = legacy.CRSP_MSF
    ermport: str = legacy.CRSP_ERMPORT
    msi: str = legacy.CRSP_MSI

    # Pre-joined monthly returns (permno, date, ret, decret, vwretd)
    mrets: str = legacy.CRSP_MRETS

    @property
    def raw_tables(self) -> tuple:
        return (self.msedelist, self.msf, self.ermport, self.msi)


@dataclass
class EventReturnParams:
    """Default arguments for cumulative event return calculations."""

    id_column: str = legacy.ID_COLUMN
    event_date_column: str = legacy.EVENT_DATE_COLUMN
    window_start_months: int = legacy.WINDOW_START_MONTHS
    window_end_months: int = legacy.WINDOW_END_MONTHS
    end_event_date_column: Optional[str] = None
    suffix: str = ""


@dataclass
class Config:
    """Main configuration container."""

    data_dir: Path
    wrds: WRDSConfig = field(default_factory=WRDSConfig)
    tables: CrspTables = field(default_factory=CrspTables)
    event_returns: EventReturnParams = field(default_factory=EventReturnParams)

    @classmethod
    def create(cls, data_dir: Path = None) -> 'Config':
        """Create configuration with default settings."""
        if data_dir is None:
            data_dir = legacy.DATA_DIR
        return cls(data_dir=Path(data_dir))


def load_config() -> Config:
    """Load default configuration."""
    return Config.create()
