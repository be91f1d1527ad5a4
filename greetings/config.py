"""
Runtime settings for the greetings service.

Every value comes from an environment variable with a sensible default,
so the service runs locally with no configuration at all:

    uvicorn greetings.main:app --reload

and then http://localhost:8000/sister?name=Priya renders a greeting page.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def float_from_env(name: str, default: float | None) -> float | None:
    """Read a number of seconds from the environment; unset or bad values give default."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default


# Bundled data file, served at /data.json
DATA_FILE = Path(
    os.getenv(
        "GREETINGS_DATA_FILE",
        str(Path(__file__).resolve().parent.parent / "data" / "data.json"),
    )
)

# Where the record store fetches its JSON array from.
# Defaults to this service's own /data.json route.
DATA_URL = os.getenv("GREETINGS_DATA_URL", "http://localhost:8000/data.json")

# Seconds; unset means the data load is never timed out
LOAD_TIMEOUT = float_from_env("GREETINGS_LOAD_TIMEOUT", None)

# Upper bound before an image URL is declared unusable
IMAGE_PROBE_TIMEOUT = float_from_env("GREETINGS_IMAGE_PROBE_TIMEOUT", 10.0)

LOG_LEVEL = os.getenv("GREETINGS_LOG_LEVEL", "INFO").upper()
