"""
Command line entry point for the SIMM calculator.

Usage:
    simm-calc crif.csv
    simm-calc crif.csv --version 2.6 --currency EUR --rate 0.92
    simm-calc crif.json --version 2.7 --output breakdown.csv
"""

from __future__ import annotations

import argparse
import logging
import sys

from simm_calc.api.formatters import export_breakdown, render_report
from simm_calc.api.models import CalculationRequest
from simm_calc.api.service import SimmService
from simm_calc.domain.enums import SimmVersion


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simm-calc",
        description="Calculate ISDA SIMM initial margin from a CRIF file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  simm-calc crif.csv                                    # SIMM 2.6 in USD
  simm-calc crif.csv --version 2.5                      # Other calibration
  simm-calc crif.csv --currency EUR --rate 0.92         # Report in EUR
  simm-calc crif.csv --output breakdown.json            # Export breakdown
        """,
    )
    parser.add_argument(
        "crif",
        help="CRIF file (.csv, .json or .parquet)",
    )
    parser.add_argument(
        "--version",
        dest="simm_version",
        default="2.6",
        choices=[v.value for v in SimmVersion],
        help="SIMM calibration (default 2.6)",
    )
    parser.add_argument(
        "--currency",
        default="USD",
        help="Calculation currency (default USD)",
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=1.0,
        help="Units of calculation currency per USD (default 1.0)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads for per risk class fan-out",
    )
    parser.add_argument(
        "--output",
        help="Write the full breakdown to a .csv or .json file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    response = SimmService().calculate(
        CalculationRequest(
            crif_path=args.crif,
            simm_version=args.simm_version,
            calculation_currency=args.currency,
            exchange_rate=args.rate,
            max_workers=args.workers,
        )
    )

    print(render_report(response))
    if not response.success:
        return 1

    if args.output:
        try:
            path = export_breakdown(response.breakdown, args.output)
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        print(f"\nBreakdown written to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
