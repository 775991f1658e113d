"""calorie-estimator command line entry point.

Usage:
  calorie-estimator --gender male --age 30 --weight 80 --height 180 \
      --activity moderate --goal maintenance

Exit codes:
 0 Recommendation printed
 2 Invalid input (argparse usage errors share the code)
"""

import argparse
import json
import sys
from typing import List, Optional

import structlog
from dotenv import load_dotenv
from pydantic import ValidationError

from calorie_estimator.application.calorie_intake import (
    EstimateCaloriesCommand,
    EstimateCaloriesHandler,
)
from calorie_estimator.domain.calorie_intake.core.exceptions import ValidationFailure
from calorie_estimator.domain.calorie_intake.core.value_objects import (
    ActivityLevel,
    Gender,
    Goal,
)
from calorie_estimator.infrastructure.logging_config import configure_logging

from .form import CalorieForm
from .messages import format_failure, format_recommendation

EXIT_OK = 0
EXIT_INVALID_INPUT = 2

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calorie-estimator",
        description="Recommended daily calorie intake (Mifflin-St Jeor / Katch-McArdle)",
    )
    # Everything is read as text, the estimator validates it
    parser.add_argument("--gender", default="", help=" | ".join(g.value for g in Gender))
    parser.add_argument("--age", default="", help="Age in years (1-120)")
    parser.add_argument("--weight", default="", help="Body weight")
    parser.add_argument("--weight-unit", default="kg", help="kg or lbs")
    parser.add_argument("--height", default="", help="Height")
    parser.add_argument("--height-unit", default="cm", help="cm or inches")
    parser.add_argument(
        "--body-fat",
        default="",
        help="Body fat percentage (1-60), enables Katch-McArdle",
    )
    parser.add_argument(
        "--activity",
        default="",
        help="; ".join(f"{a.value}: {a.description()}" for a in ActivityLevel),
    )
    parser.add_argument("--goal", default="", help=" | ".join(g.value for g in Goal))
    parser.add_argument("--json", action="store_true", help="Print the full breakdown as JSON")
    parser.add_argument("--log-level", default=None, help="Override CALORIE_ESTIMATOR_LOG_LEVEL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        form = CalorieForm(
            gender=args.gender,
            age=args.age,
            weight=args.weight,
            weight_unit=args.weight_unit,
            height=args.height,
            height_unit=args.height_unit,
            body_fat_percentage=args.body_fat,
            activity_level=args.activity,
            goal=args.goal,
        )
    except ValidationError as e:
        logger.error("Form rejected", errors=e.errors())
        print(str(e), file=sys.stderr)
        return EXIT_INVALID_INPUT

    result = EstimateCaloriesHandler().handle(EstimateCaloriesCommand(form.to_input()))

    if isinstance(result, ValidationFailure):
        if args.json:
            print(json.dumps({"error": result.kind.value, "message": format_failure(result)}))
        else:
            print(format_failure(result), file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_recommendation(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
