from pathlib import Path
from typing import Any, Dict, List
import json
import logging

logger = logging.getLogger(__name__)

def load_seed(path: str) -> Dict[str, List[Dict[str, Any]]]:
    """Read {"dishes": [...], "orders": [...]} from a JSON file"""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Seed file {path} must hold a JSON object")
    seed = {}
    for key in ("dishes", "orders"):
        records = raw.get(key, [])
        if not isinstance(records, list):
            raise ValueError(f"Seed file {path}: '{key}' must be a list")
        seed[key] = records
    logger.info("Loaded seed %s: %d dishes, %d orders", path, len(seed["dishes"]), len(seed["orders"]))
    return seed
