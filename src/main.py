"""
main.py — Application entry point for the Rubik's cube simulator
================================================================

Opens the cube net in a pywebview window, or prints it with `--print`.

 - `--moves` / `--scramble N` are applied before anything is shown.
 - `--serve` exposes the same cube over HTTP while the window is open.
 - The API is shut down when the window closes, on SIGINT/SIGTERM and at exit.

------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

from __future__ import annotations

import argparse
import atexit
import logging
import signal
import sys
from pathlib import Path
from typing import Optional, Sequence

import webview

from api import API
from config import DEFAULT_HTML, PREVIEW_HOST, PREVIEW_PORT
from cube import RubiksCube
from render import build_color_net_text

logger = logging.getLogger("main")


def create_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Rubik's Cube Simulator", allow_abbrev=False)

    p.add_argument("--debug", action="store_true", help="Verbose logging and webview devtools.")
    p.add_argument("--fullscreen", action="store_true", help="Start window in fullscreen.")
    p.add_argument("--resizable", dest="resizable", action="store_true", help="Allow window resizing.")
    p.add_argument("--no-resize", dest="resizable", action="store_false", help="Disable window resizing.")
    p.set_defaults(resizable=True)
    p.add_argument("--html", default=str(DEFAULT_HTML), help="Page showing the cube net.")

    p.add_argument("--serve", action="store_true", help="Also expose the cube over HTTP (/state, /svg).")
    p.add_argument("--host", default=PREVIEW_HOST, help="Preview server host.")
    p.add_argument("--port", type=int, default=PREVIEW_PORT, help="Preview server port.")

    p.add_argument("--print", dest="print_only", action="store_true",
                   help="Do not open a window; print the cube net and exit.")
    p.add_argument("--moves", default="", help="Move sequence to apply first, e.g. \"R U R' U'\".")
    p.add_argument("--scramble", type=int, default=0, metavar="N", help="Apply N random moves first.")

    return p


def _prepare_cube(args) -> RubiksCube:
    cube = RubiksCube()
    if args.scramble:
        cube.scramble(args.scramble)
    if args.moves:
        cube.perform_moves(args.moves)
    return cube


def _print_net(cube: RubiksCube) -> None:
    print(build_color_net_text(cube.serialize()))
    if cube.move_log:
        print("\nMoves:", " ".join(cube.move_log))


def _resolve_html(raw: str) -> Path:
    html_path = Path(raw)
    if not html_path.is_absolute():
        html_path = (Path(__file__).parent / html_path).resolve()
    return html_path


def _run_window(api: API, html_path: Path, args) -> int:
    """Open the cube window; `api.shutdown` runs on close, on SIGINT/SIGTERM and at exit."""
    atexit.register(api.shutdown)

    def _on_signal(signum, frame):
        logger.info("Signal %s received, closing the cube window", signum)
        api.shutdown()
        raise SystemExit(0)

    for sig_name in ("SIGINT", "SIGTERM"):
        if hasattr(signal, sig_name):
            signal.signal(getattr(signal, sig_name), _on_signal)

    try:
        webview.create_window(
            title="Rubik's Cube Simulator",
            url=str(html_path),
            js_api=api,
            resizable=bool(args.resizable),
            fullscreen=bool(args.fullscreen),
        )
        logger.info("Showing %s (moves so far: %d)", html_path, len(api.cube.move_log))
        webview.start(debug=args.debug)
    except SystemExit:
        pass
    except Exception as e:
        logger.exception("Cube window failed: %s", e)
        return 1
    finally:
        api.shutdown()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point; returns the process exit code.

    0 ok, 1 window error, 2 bad moves, bad scramble count or missing page.
    """
    args = create_arg_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        cube = _prepare_cube(args)
    except ValueError as e:
        logger.error("Cannot prepare cube: %s", e)
        return 2

    if args.print_only:
        _print_net(cube)
        return 0

    html_path = _resolve_html(args.html)
    if not html_path.exists():
        logger.error("HTML file not found: %s", html_path)
        return 2

    api = API(cube, serve=args.serve, host=args.host, port=args.port)
    return _run_window(api, html_path, args)


if __name__ == "__main__":
    sys.exit(main())
