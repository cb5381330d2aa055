#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from policygen.run import load_generator_config, run_generation_file  # noqa: E402


def main() -> None:
    defaults = load_generator_config()
    parser = argparse.ArgumentParser(description="Generate idempotent RLS policy SQL")
    parser.add_argument("--config", default=str(defaults.config_path), help="Path to policy config (.yaml/.yml/.json)")
    parser.add_argument("--out", default=str(defaults.out_path), help="Output .sql path")
    args = parser.parse_args()

    out_path = Path(args.out)
    if out_path.suffix.lower() != ".sql":
        raise SystemExit("[policygen] output file must have a .sql extension")

    result = run_generation_file(Path(args.config), out_path)
    if not result.ok:
        # the failure line was already traced by run_generation_file
        raise SystemExit(1)


if __name__ == "__main__":
    main()
