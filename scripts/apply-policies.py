#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.exc import SQLAlchemyError  # noqa: E402

from db.session import admin_database_url, make_admin_engine  # noqa: E402
from policygen.apply import apply_sql, read_sql_file  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply generated RLS policy SQL")
    parser.add_argument("--sql", default=os.getenv("POLICYGEN_OUT", "policies.sql"))
    parser.add_argument(
        "--database-url",
        default=None,
        help="Administrative connection URL (must bypass RLS); defaults to DATABASE_ADMIN_URL, then DATABASE_URL",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the SQL without running it")
    args = parser.parse_args()

    try:
        sql = read_sql_file(Path(args.sql))
    except FileNotFoundError as exc:
        raise SystemExit(f"[apply-policies] {exc}") from exc

    if args.dry_run:
        print(sql)
        return

    database_url = admin_database_url(args.database_url)
    if not database_url:
        raise SystemExit(
            "[apply-policies] database URL is required (pass --database-url or set DATABASE_ADMIN_URL/DATABASE_URL)"
        )

    engine = make_admin_engine(database_url)
    try:
        apply_sql(engine, sql)
    except SQLAlchemyError as exc:
        raise SystemExit(f"[apply-policies] failed: {exc}") from exc
    finally:
        engine.dispose()
    print(f"[apply-policies] applied {args.sql}")


if __name__ == "__main__":
    main()
