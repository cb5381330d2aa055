from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import Engine


def read_sql_file(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"SQL file not found: {path}")
    return path.read_text(encoding="utf-8")


def apply_sql(engine: Engine, sql: str) -> None:
    # the script carries its own BEGIN/COMMIT, so the driver must not open one
    autocommit = engine.execution_options(isolation_level="AUTOCOMMIT")
    with autocommit.connect() as conn:
        conn.exec_driver_sql(sql)
