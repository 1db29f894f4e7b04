import argparse
import sys
from datetime import datetime

import yaml

from adapters.base import AdapterError
from adapters.recreation_gov import RecreationGovAdapter
from controller import ViewStateController
from render import format_campgrounds, format_sites, format_view
from state import NO_SITES

DEFAULTS = {
    "timezone": "UTC",
    "months_shown": 6,
    "compact_ranges": True,
    "request_timeout": None,
}

HELP = "commands: s <keywords> | <n> select | m <n> month | b back | q quit"


def load_config(path: str = "config.yaml") -> dict:
    try:
        with open(path) as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        loaded = {}
    return {**DEFAULTS, **{k: v for k, v in loaded.items() if k in DEFAULTS}}


def make_adapter(config: dict) -> RecreationGovAdapter:
    return RecreationGovAdapter(
        compact=config["compact_ranges"],
        timeout=config["request_timeout"],
    )


def run_search(adapter, keywords: str) -> int:
    try:
        campgrounds = adapter.search_campgrounds(keywords)
    except AdapterError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(format_campgrounds(campgrounds) or "No reservable campgrounds.")
    return 0


def run_availability(adapter, campground_id: str, month) -> int:
    try:
        sites = adapter.get_site_availability(campground_id, month)
    except AdapterError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    if not sites:
        print(NO_SITES, file=sys.stderr)
        return 1
    print(format_sites(sites))
    return 0


def handle_command(controller: ViewStateController, line: str) -> bool:
    """
    Applies one interactive command. Returns False when the session should end.
    """
    cmd, _, arg = line.strip().partition(" ")
    try:
        if cmd == "q":
            return False
        if cmd == "s":
            controller.submit_search(arg)
        elif cmd == "b":
            controller.back()
        elif cmd == "m":
            controller.change_month(int(arg))
        elif cmd.isdigit():
            controller.select_campground(int(cmd))
        else:
            controller.focus_input()
            print(HELP)
            return True
    except (ValueError, IndexError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return True
    print(format_view(controller.state, controller.tabs()))
    return True


def run_interactive(controller: ViewStateController, lines=None):
    print(HELP)
    if lines is None:
        lines = iter(lambda: input("> "), None)
    try:
        for line in lines:
            if not handle_command(controller, line):
                break
    except (EOFError, KeyboardInterrupt):
        pass


def month_arg(value: str):
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="recreation.gov campsite availability viewer")
    parser.add_argument("--config", default="config.yaml", help="Path to YAML config")
    sub = parser.add_subparsers(dest="command")
    p_search = sub.add_parser("search", help="Search campgrounds by keyword")
    p_search.add_argument("keywords", nargs="+")
    p_avail = sub.add_parser("availability", help="Show open sites for one campground and month")
    p_avail.add_argument("campground_id")
    p_avail.add_argument("--month", type=month_arg, help="YYYY-MM, defaults to the current month")
    args = parser.parse_args()

    cfg = load_config(args.config)
    adapter = make_adapter(cfg)
    controller = ViewStateController(adapter, cfg["timezone"], cfg["months_shown"])

    if args.command == "search":
        sys.exit(run_search(adapter, " ".join(args.keywords)))
    elif args.command == "availability":
        sys.exit(run_availability(adapter, args.campground_id, args.month or controller.today_month()))
    else:
        run_interactive(controller)
