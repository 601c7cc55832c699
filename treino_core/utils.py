"""Utility functions for Treino Core."""

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Union

logger = logging.getLogger(__name__)

# --- Data Serialization ---

def load_json_file(file_path: Union[str, Path]) -> Any:
    """Load JSON data from a file."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (ValueError, OSError) as e:
        logger.error(f"Error reading JSON file '{file_path}': {e}")
        return None

def save_json_file(file_path: Union[str, Path], data: Any, indent: int = 2) -> bool:
    """Save data to a JSON file, replacing the old file in one step."""
    target = Path(file_path)
    temp_path = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile("w", dir=target.parent, delete=False, encoding="utf-8") as tmp:
            temp_path = Path(tmp.name)
            json.dump(data, tmp, indent=indent, ensure_ascii=False)
        temp_path.replace(target)
        return True
    except OSError as e:
        logger.error(f"Error writing JSON file '{file_path}': {e}")
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        return False
