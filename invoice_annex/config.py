"""Central configuration for Invoice Annex."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

OUTPUT_DIR_ENV = "INVOICE_ANNEX_OUTPUT_DIR"
LOG_LEVEL_ENV = "INVOICE_ANNEX_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_app_name() -> str:
    """Get application name."""
    return "Invoice Annex"


def get_app_version() -> str:
    """Get application version from pyproject.toml."""
    try:
        import tomli
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomli.load(f)
            return pyproject.get("project", {}).get("version", "0.1.0")
    except Exception:
        # Installed without the source tree next to the package
        return "0.1.0"


def get_default_output_dir() -> Path:
    """Get default output directory for generated reports.
    
    Uses INVOICE_ANNEX_OUTPUT_DIR when set, otherwise project root / "out".
    
    Returns:
        Path object to default output directory (created if needed)
    """
    env_dir = os.getenv(OUTPUT_DIR_ENV)
    if env_dir:
        output_dir = Path(env_dir)
    else:
        output_dir = Path(__file__).resolve().parent.parent / "out"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def get_log_level() -> str:
    """Get log level name.
    
    Returns:
        Level from INVOICE_ANNEX_LOG_LEVEL (case-insensitive), default "WARNING"
    """
    level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    if level not in _LOG_LEVELS:
        logger.warning(f"Invalid log level: {level}, using 'WARNING'")
        return "WARNING"
    return level
