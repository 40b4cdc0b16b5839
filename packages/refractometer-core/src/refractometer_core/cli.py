"""
Command-line wrapper around the refractometer calculator.

Run with: refractometer 1.067 1.033
      or: refractometer 16.36 8.29 --brix
"""

import argparse
import json
import sys

from refractometer_core.calculator import compute
from refractometer_core.config import get_config
from refractometer_core.exceptions import (
    ConfigurationError,
    DegenerateInputError,
    ValidationError,
)
from refractometer_core.models import CorrectionResult

EXIT_INVALID_INPUT = 2
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="refractometer",
        description=(
            "Correct a refractometer reading for dissolved alcohol and "
            "estimate ABV, attenuation and calories."
        ),
    )
    parser.add_argument("original_gravity", type=float, help="Original gravity")
    parser.add_argument("final_gravity", type=float, help="Current refractometer reading")
    unit = parser.add_mutually_exclusive_group()
    unit.add_argument(
        "--brix",
        dest="as_brix",
        action="store_true",
        default=None,
        help="Readings are in degrees Brix",
    )
    unit.add_argument(
        "--sg",
        dest="as_brix",
        action="store_false",
        default=None,
        help="Readings are in specific gravity",
    )
    parser.add_argument(
        "--json",
        dest="output_format",
        action="store_const",
        const="json",
        default=None,
        help="Print results as JSON",
    )
    return parser


def format_result(result: CorrectionResult) -> str:
    """Render a result as six human-readable lines."""
    return "\n".join(
        [
            "Original Gravity: {0:.3f} SG / {1:.2f} Brix".format(
                result.original_sg, result.original_brix
            ),
            "Final Gravity:    {0:.3f} SG / {1:.2f} Brix".format(
                result.final_sg, result.final_brix
            ),
            "Adjusted FG:      {0:.3f} SG / {1:.2f} Brix".format(
                result.adjusted_final_sg, result.adjusted_final_brix
            ),
            "ABV:              {0:.2f}%".format(result.abv),
            "Attenuation:      {0:.2f}%".format(result.attenuation),
            "Calories:         {0:.2f} kcal / 12 oz".format(result.calories),
        ]
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    as_brix = config.default_as_brix if args.as_brix is None else args.as_brix
    output_format = args.output_format or config.output_format

    try:
        result = compute(args.original_gravity, args.final_gravity, as_brix=as_brix)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except DegenerateInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if output_format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
