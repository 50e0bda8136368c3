"""
Main entry point for the electricity consumption calendar
"""
import argparse
import logging
import sys
from thespian.actors import ActorSystem, ActorExitRequest
from actors.calendar_actor import CalendarActor
from config import CalendarConfig, ConfigError
from models.calendar_month import MONTH_NAMES, days_in_month

logger = logging.getLogger(__name__)

ASK_TIMEOUT = 30  # seconds, month plots are the slowest request


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consumption-calendar",
        description="Browse randomly generated hourly electricity consumption by month and day.",
    )
    parser.add_argument("month", nargs="?", help="month name, e.g. March")
    parser.add_argument("day", nargs="?", type=int, help="day of the month")
    parser.add_argument("--summary", action="store_true",
                        help="show lowest/highest day and amount to pay for the month")
    parser.add_argument("--plot", action="store_true", help="save charts for the day or month")
    parser.add_argument("--seed", type=int, help="seed for reproducible readings")
    parser.add_argument("--plot-dir", help="directory for saved charts")
    parser.add_argument("--log-level", help="logging level (DEBUG, INFO, ...)")
    return parser


def build_requests(args) -> list:
    """Translate command line arguments into calendar actor messages"""
    requests = []
    if args.day is not None:
        requests.append({"type": "get_day", "month": args.month, "day": args.day})
        if args.plot:
            requests.append({"type": "plot_day", "month": args.month, "day": args.day})
    if args.summary or args.day is None:
        requests.append({"type": "get_month_summary", "month": args.month})
    if args.plot and args.day is None:
        requests.append({"type": "plot_month", "month": args.month})
    return requests


def print_months():
    for i, name in enumerate(MONTH_NAMES):
        print(f"{name:<10} {days_in_month(i)} days")


def main(argv=None) -> int:
    """Run the requested calendar queries and print the reports"""
    args = build_parser().parse_args(argv)
    try:
        config = CalendarConfig.from_env()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.seed is not None:
        config.seed = args.seed
    if args.plot_dir:
        config.plot_dir = args.plot_dir
    if args.log_level:
        config.log_level = args.log_level.upper()

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.month is None:
        print_months()
        return 0

    actor_system = ActorSystem(config.actor_base)
    exit_code = 0

    try:
        calendar = actor_system.createActor(CalendarActor)
        actor_system.ask(calendar, {
            "type": "init",
            "seed": config.seed,
            "plot_dir": config.plot_dir
        }, ASK_TIMEOUT)

        for request in build_requests(args):
            reply = actor_system.ask(calendar, request, ASK_TIMEOUT)
            if not isinstance(reply, dict):
                logger.error(f"No usable reply to {request['type']} within {ASK_TIMEOUT}s: {reply!r}")
                exit_code = 1
                break
            if reply.get("type") == "error":
                print(f"Error: {reply['reason']}", file=sys.stderr)
                exit_code = 2
                break
            if reply.get("type") == "plot_saved":
                for path in reply["paths"]:
                    print(f"Saved {path}")
            else:
                print(reply["text"])
                print()

        actor_system.tell(calendar, ActorExitRequest())
    except KeyboardInterrupt:
        logger.info("Interrupted")
        exit_code = 130
    finally:
        actor_system.shutdown()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
