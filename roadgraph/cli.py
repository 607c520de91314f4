"""Command-line interface for roadgraph."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from pathlib import Path
from time import perf_counter
from typing import List, NoReturn, Optional, TextIO

from roadgraph.graph.io import describe_graph, load_road_graph, read_route_requests
from roadgraph.logging import configure_verbosity, get_logger
from roadgraph.planner import run_route_requests

logger = get_logger(__name__)

ROADS_PROMPT = "Road network file: "
ROUTES_PROMPT = "Route requests file: "
RESULTS_PROMPT = "Results file: "


def _fail(message: str) -> NoReturn:
    """Report a fatal I/O problem and terminate the run with exit code 1."""
    logger.error(message)
    print(f"❌ ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _resolve_path(given: Optional[Path], prompt: str, label: str) -> Path:
    """Return ``given`` or ask for a filename on stdin.

    A closed stdin counts as an unopenable file and ends the run.
    """
    if given is not None:
        return given
    try:
        return Path(input(prompt).strip())
    except EOFError:
        _fail(f"No {label} filename given (end of input)")


def _open_or_exit(path: Path, mode: str, label: str) -> TextIO:
    """Open ``path`` or terminate the run with exit code 1.

    Bytes that are not valid UTF-8 are carried through as surrogate escapes,
    so location names in any 8-bit encoding reach the results file unchanged.

    Args:
        path: File to open.
        mode: ``"r"`` for inputs, ``"w"`` for the results file.
        label: Human-readable file role used in error messages.
    """
    try:
        return open(path, mode, encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        _fail(f"Cannot open {label} file: {path} ({type(e).__name__}: {e})")


def _displayable(text: str) -> str:
    """Replace surrogate-escaped bytes so ``text`` can be printed on any console."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _plan_routes(
    roads: Optional[Path],
    routes: Optional[Path],
    results: Optional[Path],
    show_graph: bool = False,
) -> None:
    """Load the road network, answer every route request and write results.

    Files are resolved and opened one at a time in the order roads, routes,
    results; the first that cannot be opened ends the run.
    """
    _start_time = perf_counter()

    with ExitStack() as stack:
        roads_path = _resolve_path(roads, ROADS_PROMPT, "road network")
        roads_file = stack.enter_context(
            _open_or_exit(roads_path, "r", "road network")
        )

        routes_path = _resolve_path(routes, ROUTES_PROMPT, "route requests")
        routes_file = stack.enter_context(
            _open_or_exit(routes_path, "r", "route requests")
        )

        results_path = _resolve_path(results, RESULTS_PROMPT, "results")
        results_file = stack.enter_context(
            _open_or_exit(results_path, "w", "results")
        )

        logger.info(f"Loading road network from: {roads_path}")
        graph = load_road_graph(roads_file)
        if show_graph:
            print(_displayable(describe_graph(graph)), end="")

        requests = read_route_requests(routes_file)
        logger.info(f"Writing {len(requests)} route result(s) to: {results_path}")
        run_route_requests(graph, requests, results_file)

    logger.info(f"Route planning completed in {perf_counter() - _start_time:.3f} s")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``roadgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="roadgraph",
        description=(
            "Find shortest routes in a road network. Filenames not given as"
            " arguments are asked for interactively."
        ),
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    verbosity.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--show-graph",
        action="store_true",
        help="Print every location and its roads after loading",
    )
    parser.add_argument(
        "roads",
        nargs="?",
        type=Path,
        default=None,
        help="Road network file: '<source> <destination> <distance>' per line",
    )
    parser.add_argument(
        "routes",
        nargs="?",
        type=Path,
        default=None,
        help="Route requests file: '<start> <end>' per line",
    )
    parser.add_argument(
        "results",
        nargs="?",
        type=Path,
        default=None,
        help="Results file (overwritten)",
    )

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    configure_verbosity(verbose=args.verbose, quiet=args.quiet)
    logger.debug("Debug logging enabled")

    _plan_routes(
        roads=args.roads,
        routes=args.routes,
        results=args.results,
        show_graph=args.show_graph,
    )


if __name__ == "__main__":
    main()
