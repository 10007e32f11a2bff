import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ---------------------------------------------------------------------
# Project Paths
# ---------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Root of the local parquet store, laid out as <DATA_DIR>/<schema>/<table>.parquet
DATA_DIR = Path(os.getenv("DATA_DIR", PROJECT_ROOT / "data"))

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
LOG_LEVEL = os.getenv("EVENT_RETURNS_LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------
# WRDS Configuration
# ---------------------------------------------------------------------
WRDS_USERNAME = os.getenv("WRDS_USERNAME")
WRDS_PASSWORD = os.getenv("WRDS_PASSWORD")
WRDS_HOST = os.getenv("WRDS_HOST", "wrds-pgdata.wharton.upenn.edu")
WRDS_PORT = int(os.getenv("WRDS_PORT", "9737"))
WRDS_DATABASE = os.getenv("WRDS_DATABASE", "wrds")

# Table Names
CRSP_SCHEMA = "crsp"
CRSP_MSEDELIST = "msedelist"
CRSP_MSF = "msf"
CRSP_ERMPORT = "ermport1"
CRSP_MSI = "msi"
CRSP_MRETS = "mrets"

# ---------------------------------------------------------------------
# Business Logic Parameters
# ---------------------------------------------------------------------

# Event columns
ID_COLUMN = "permno"
EVENT_DATE_COLUMN = "event_date"

# Event window offsets in whole months (inclusive)
WINDOW_START_MONTHS = 0
WINDOW_END_MONTHS = 0
