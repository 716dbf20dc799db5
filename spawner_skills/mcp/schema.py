import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"
_SCHEMA_CACHE: dict[str, dict[str, Any]] = {}


def load_schema(path: Path = _SCHEMA_PATH) -> dict[str, Any]:
    key = str(path)
    cached = _SCHEMA_CACHE.get(key)
    if cached is not None:
        return cached
    schema = json.loads(path.read_text(encoding="utf-8"))
    _SCHEMA_CACHE[key] = schema
    return schema


def host_config_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema())


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)
