"""JSON serialization utilities."""
import json
from pathlib import Path


def read_json_file(path: Path, default: object) -> object:
    """Read and parse JSON file, return default if not exists."""
    if not path.exists():
        return default
    return json.loads(path.read_text(encoding="utf-8"))
