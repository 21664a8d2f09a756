from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from kata_toolkit.core.errors import InputLoadError, InputValidationError


def load_input(path: str) -> Any:
    """Load a YAML/JSON input document.

    Returns the parsed document unchanged; callers own shape checking.
    """

    p = Path(path)
    if not p.exists():
        raise InputLoadError(
            code="E_FILE_NOT_FOUND",
            message="file does not exist",
            source=str(p),
        )

    suffix = p.suffix.lower()
    try:
        raw_text = p.read_text(encoding="utf-8")
    except Exception as e:  # pragma: no cover
        raise InputLoadError(code="E_FILE_READ", message=str(e), source=str(p)) from e

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(raw_text)
        if suffix == ".json":
            return json.loads(raw_text)
        raise InputLoadError(
            code="E_UNSUPPORTED_FORMAT",
            message="supported formats are .yaml/.yml and .json",
            source=str(p),
        )
    except InputLoadError:
        raise
    except Exception as e:
        code = "E_YAML_PARSE" if suffix in {".yaml", ".yml"} else "E_JSON_PARSE"
        raise InputLoadError(code=code, message=str(e), source=str(p)) from e


def load_patterns(path: str) -> list[str]:
    """Load brace patterns: either a list of strings or a mapping with `patterns`."""
    data = load_input(path)
    if isinstance(data, dict):
        data = data.get("patterns")

    if not isinstance(data, list) or not all(isinstance(x, str) for x in data):
        raise InputValidationError(
            code="E_INVALID_TYPE",
            message="patterns must be an array of strings",
            source=path,
            path="patterns",
        )
    return data
