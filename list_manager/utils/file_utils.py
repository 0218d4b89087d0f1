# list_manager/utils/file_utils.py

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from list_manager.errors import RecordsFileError
from simple_logger import Slogger


def load_records(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Load records from a JSON file holding an array of objects.

    Args:
        path: Path to the JSON file

    Returns:
        The records, in file order

    Raises:
        RecordsFileError: if the file cannot be read or has the wrong shape
    """
    file_path = Path(path)
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise RecordsFileError(f"Could not read records from {file_path}: {e}") from e

    if not isinstance(data, list):
        raise RecordsFileError(f"{file_path} must contain a JSON array of objects")

    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise RecordsFileError(
                f"{file_path}: item {index} is {type(item).__name__}, expected an object"
            )

    Slogger.info(f"Loaded {len(data)} records", {"path": str(file_path)})
    return data
