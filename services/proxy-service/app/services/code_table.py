"""
Code Table Service
Bundled HIRA reference codes (facility classes, provinces, districts)
"""

import json
from pathlib import Path
from typing import Any, Dict

import structlog

from app.utils.result import Result

logger = structlog.get_logger(__name__)

DEFAULT_CODES_PATH = Path(__file__).resolve().parent.parent / "data" / "codes.json"


def load_code_table(path: Path = DEFAULT_CODES_PATH) -> Result[Dict[str, Any], str]:
    """
    Read the bundled code table once.

    A missing or malformed file is returned as an error so the service can
    still start; the codes endpoint reports it on every call.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Failed to load code table", path=str(path), error=str(e))
        return Result.err(f"Error: failed to load code table: {e}")

    if not isinstance(data, dict):
        logger.error("Code table is not a JSON object", path=str(path))
        return Result.err("Error: code table must be a JSON object")

    logger.info("Code table loaded", path=str(path), sections=sorted(data))
    return Result.ok(data)
