from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Callable

from .schema import PolicyConfig
from .sql import generate_sql
from .validate import PolicyConfigError, load_config, load_config_file


@dataclass(frozen=True)
class GeneratorConfig:
    config_path: Path
    out_path: Path


@dataclass(frozen=True)
class GenerationResult:
    sql: str
    out_path: Path | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_generator_config() -> GeneratorConfig:
    return GeneratorConfig(
        config_path=Path(os.getenv("POLICYGEN_CONFIG", "examples/policies.yaml")),
        out_path=Path(os.getenv("POLICYGEN_OUT", "policies.sql")),
    )


def generate_policies(text: str) -> str:
    return generate_sql(load_config(text))


def write_sql_file(sql: str, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(sql, encoding="utf-8")
    return path


def run_generation(text: str, out_path: Path) -> GenerationResult:
    return _run(lambda: load_config(text), out_path)


def run_generation_file(config_path: str | Path, out_path: Path) -> GenerationResult:
    """Same as ``run_generation`` but the loader follows the config file suffix."""
    return _run(lambda: load_config_file(config_path), out_path)


def _run(load: Callable[[], PolicyConfig], out_path: Path) -> GenerationResult:
    try:
        sql = generate_sql(load())
    except PolicyConfigError as exc:
        print(f"[policygen] failed to generate SQL: {exc}")
        return GenerationResult(sql="", out_path=None, error=str(exc))

    print(sql)
    write_sql_file(sql, out_path)
    print(f"[policygen] wrote {out_path}")
    return GenerationResult(sql=sql, out_path=out_path)
