import os
import json
import logging
from dotenv import load_dotenv
from typing import Dict, Any, Optional

load_dotenv()

_data_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")

def _load_json(fname: str) -> Dict[str, Any]:
    p = os.path.join(_data_dir, fname)
    with open(p, "r", encoding="utf-8") as f:
        return json.load(f)

AQI_BREAKPOINTS = _load_json("aqi_breakpoints.json")

_LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

def _resolve_log_level(value: Optional[str]) -> int:
    # unknown names fall back to WARNING so a bad .env never breaks import
    return _LOG_LEVELS.get((value or "").strip().upper(), logging.WARNING)

log_level = _resolve_log_level(os.getenv("USAQI_LOG_LEVEL"))

logger = logging.getLogger("usaqi")
logger.setLevel(log_level)
logger.addHandler(logging.NullHandler())
