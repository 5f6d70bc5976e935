"""
Command-line runner for the bundled scenarios.

    cashflow-projector amortization --periods 24
    cashflow-projector rent --projection sum --show-hidden
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import pandas as pd

from core.errors import CashflowError
from core.schema import PROJECTIONS
from reporting.frame import export_excel, results_to_frame

from .amortization import build_amortization_engine
from .rent_escalation import build_rent_escalation_engine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cashflow-projector", description="Run a sample projection")
    parser.add_argument("scenario", choices=["amortization", "rent"])
    parser.add_argument("--periods", type=int, default=None, help="number of periods")
    parser.add_argument("--projection", choices=PROJECTIONS, default="current")
    parser.add_argument("--show-hidden", action="store_true", help="include hidden variables")
    parser.add_argument("--locale", default=None, help="date locale (rent scenario)")
    parser.add_argument("--excel", default=None, help="also write an .xlsx workbook here")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.scenario == "amortization":
            engine = build_amortization_engine(periods=12 if args.periods is None else args.periods)
        else:
            engine = build_rent_escalation_engine(
                periods=18 if args.periods is None else args.periods, date_locale=args.locale
            )
        store = engine.run()
    except CashflowError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    frame = results_to_frame(store, projection=args.projection, include_hidden=args.show_hidden)
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(frame.to_string(float_format=lambda v: f"{v:,.2f}"))
    if args.excel:
        print(f"wrote {export_excel(store, args.excel, include_hidden=args.show_hidden)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
