"""
Settings Package.

Provides type-safe configuration via dataclasses alongside the config module.
"""
from .settings import (
    Config,
    WRDSConfig,
    CrspTables,
    EventReturnParams,
    load_config,
)

__all__ = [
    'Config',
    'WRDSConfig',
    'CrspTables',
    'EventReturnParams',
    'load_config',
]
