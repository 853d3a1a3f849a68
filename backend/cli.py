import json
import argparse
import sys
from datetime import datetime

from application.exceptions import InvalidInputError
from backend.core.stats_service import (
    WEEKLY_SCOPES,
    calculate_stats,
    calculate_total_weight,
    calculate_weekly_progress,
)
from backend.settings import get_settings


def build_report(workouts, now, scope="all_time"):
    """Stats report for a list of workout rows, as a JSON-serializable dict."""
    stats = calculate_stats(workouts)
    weekly = calculate_weekly_progress(workouts, now, scope=scope)
    return {
        "generated_at": now.isoformat(),
        "scope": scope,
        "workout_count": len(workouts),
        "minutes": stats.minutes,
        "calories": stats.calories,
        "total_weight_kg": calculate_total_weight(workouts),
        "weekly_progress": [bucket.model_dump() for bucket in weekly],
    }


def main():
    parser = argparse.ArgumentParser(description="Compute dashboard statistics from a workouts JSON export")
    parser.add_argument("input", help="Input JSON file path (list of workout rows)")
    parser.add_argument("--now", help="Evaluation instant, ISO 8601 (default: current time)")
    parser.add_argument("--scope", choices=WEEKLY_SCOPES, default="all_time", help="Weekly chart scope")
    parser.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")

    args = parser.parse_args()

    try:
        # Load input JSON
        with open(args.input, 'r', encoding="utf-8") as f:
            workouts = json.load(f)

        if not isinstance(workouts, list):
            print("Error: Input must be a JSON list of workouts", file=sys.stderr)
            sys.exit(1)

        if args.now:
            now = datetime.fromisoformat(args.now)
        else:
            now = datetime.now(get_settings().stats_zone)

        report = json.dumps(build_report(workouts, now, args.scope), indent=2)

        # Output result
        if args.output:
            with open(args.output, 'w', encoding="utf-8") as f:
                f.write(report)
        else:
            print(report)

    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except InvalidInputError as e:
        print(f"Error: Invalid workout data: {e}", file=sys.stderr)
        sys.exit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
