from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from .parser import parse_policy_file, parse_policy_text
from .schema import PolicyConfig


class PolicyConfigError(Exception):
    pass


def _load_data(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise PolicyConfigError(f"Policy config not found: {path}")
    if path.suffix.lower() in {".yaml", ".yml"}:
        return parse_policy_file(path)
    if path.suffix.lower() == ".json":
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise PolicyConfigError(f"Invalid JSON policy config: {exc}") from exc
    raise PolicyConfigError(f"Unsupported policy config format: {path.suffix}")


def build_config(payload: Any) -> PolicyConfig:
    if not isinstance(payload, dict):
        raise PolicyConfigError("Policy config must be a mapping at the top level.")
    tables = payload.get("tables")
    if not isinstance(tables, list) or not tables:
        raise PolicyConfigError("No tables found in config (expected 'tables:').")
    try:
        return PolicyConfig.model_validate(payload)
    except ValidationError as exc:
        raise PolicyConfigError(str(exc)) from exc


def load_config(text: str) -> PolicyConfig:
    return build_config(parse_policy_text(text))


def load_config_file(path: str | Path) -> PolicyConfig:
    return build_config(_load_data(Path(path)))
