"""api.py — pywebview JS API
============================

Python <-> JavaScript bridge used by `templates/index.html`. The page calls
these methods through `window.pywebview.api` and redraws the SVG it gets
back; it never holds cube state of its own.

High-level responsibilities
- Own the single `RubiksCube` used by the window (passed explicitly, no
  module-level instance).
- Turn engine errors into `{"ok": False, "error": ...}` payloads for the page.
- Optionally run the HTTP preview server (`server.PreviewServer`) on the
  same cube, sharing one lock.
------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

import logging
import threading
from typing import Any, Dict, Optional

import webview

from app_types import CubeError
from config import DEFAULT_SCRAMBLE_MOVES, PREVIEW_HOST, PREVIEW_PORT
from cube import RubiksCube
from render import get_cube_svg
from server import PreviewServer, create_app, state_payload

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class API:
    """Main JS API object exposed to the frontend via pywebview."""

    def __init__(self, cube: Optional[RubiksCube] = None, serve: bool = False,
                 host: str = PREVIEW_HOST, port: int = PREVIEW_PORT):
        self.cube = cube if cube is not None else RubiksCube()
        self.lock = threading.Lock()
        self._server: Optional[PreviewServer] = None

        if serve:
            self._server = PreviewServer(create_app(self.cube, self.lock), host, port)
            self._server.start()
            logger.info("[API] preview server started at http://%s:%s/state", host, port)

    # ----- Utils -----

    def _payload(self) -> Dict[str, Any]:
        payload = state_payload(self.cube)
        payload["svg"] = get_cube_svg(self.cube.serialize())
        return payload

    # ----- Methods called from JS -----

    def get_state(self) -> Dict[str, Any]:
        with self.lock:
            return state_payload(self.cube)

    def display(self) -> Dict[str, Any]:
        """Current state plus the rendered SVG net."""
        with self.lock:
            return self._payload()

    def scramble_cube(self, num_moves: int = DEFAULT_SCRAMBLE_MOVES) -> Dict[str, Any]:
        with self.lock:
            try:
                moves = self.cube.scramble(int(num_moves))
            except (TypeError, ValueError) as e:
                logger.warning("[API.scramble_cube] rejected %r: %s", num_moves, e)
                payload = self._payload()
                payload.update({"ok": False, "error": str(e)})
                return payload
            payload = self._payload()
        payload["scramble"] = " ".join(moves)
        return payload

    def solve_cube(self) -> Dict[str, Any]:
        with self.lock:
            self.cube.solve_step_by_step()
            payload = self._payload()
        logger.info("Solve replay done, solved=%s", payload["solved"])
        return payload

    def reset_cube(self) -> Dict[str, Any]:
        with self.lock:
            self.cube.reset()
            return self._payload()

    def perform_moves(self, sequence: str) -> Dict[str, Any]:
        """Apply a notation sequence; moves before a bad token stay applied."""
        with self.lock:
            try:
                self.cube.perform_moves(sequence or "")
            except CubeError as e:
                logger.warning("[API.perform_moves] rejected %r: %s", sequence, e)
                payload = self._payload()
                payload.update({"ok": False, "error": str(e)})
                return payload
            return self._payload()

    def shutdown(self):
        """Stop the preview server (if any) and close the window."""
        if self._server is not None:
            try:
                self._server.shutdown()
            except Exception as e:
                logger.exception("[API.shutdown] preview server: %s", e)
            self._server = None
        for window in list(webview.windows):
            try:
                window.destroy()
            except Exception as e:
                logger.debug("[API.shutdown] window already closed: %s", e)
