"""server.py — HTTP preview of the cube state
=============================================

Small Flask application that lets an external renderer read the serialized
state (as JSON or as the SVG net) and drive the cube over HTTP. The server
runs on a background Werkzeug thread (`PreviewServer`) so it can live next
to the pywebview window and be stopped on shutdown.

Endpoints
- GET  /health   -> basic liveness JSON
- GET  /state    -> color string, per-face cells, move log, solved flag
- GET  /svg      -> SVG net (image/svg+xml)
- POST /move     -> {"moves": "R U R' U'"}
- POST /scramble -> {"moves": 10} (optional body)
- POST /solve    -> fixed replay
- POST /reset    -> solved state, empty log

Threading model
- Werkzeug serves requests on several threads; every access to the cube
  goes through the lock passed to `create_app` (shared with the JS API).
------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. MIT License.
"""

import logging
import threading
from typing import Any, Dict, Optional

from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from werkzeug.serving import make_server

from app_types import CubeError
from config import DEFAULT_SCRAMBLE_MOVES, FACE_ORDER
from cube import RubiksCube
from render import get_cube_svg

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def state_payload(cube: RubiksCube) -> Dict[str, Any]:
    return {
        "ok": True,
        "color_str": cube.to_color_string(),
        "faces": {face: cube.get_face(face) for face in FACE_ORDER},
        "move_log": list(cube.move_log),
        "color_counts": dict(cube.faces.color_counts()),
        "solved": cube.is_solved(),
    }


def create_app(cube: RubiksCube, lock: Optional[threading.Lock] = None) -> Flask:
    """Create the preview app bound to one cube instance."""
    app = Flask(__name__)
    # local preview only; restrict origins if exposed on a network
    CORS(app, resources={r"/*": {"origins": "*"}})
    lock = lock or threading.Lock()

    def _error(e: Exception, status: int = 400):
        return jsonify({"ok": False, "error": str(e)}), status

    @app.route("/health")
    def _health():
        return jsonify({"ok": True})

    @app.route("/state")
    def _state():
        with lock:
            return jsonify(state_payload(cube))

    @app.route("/svg")
    def _svg():
        with lock:
            svg = get_cube_svg(cube.serialize())
        return Response(svg, mimetype="image/svg+xml")

    @app.route("/move", methods=["POST"])
    def _move():
        data = request.get_json(silent=True) or {}
        seq = data.get("moves", "")
        if not isinstance(seq, str):
            return _error(ValueError("'moves' must be a string"))
        with lock:
            try:
                cube.perform_moves(seq)
            except CubeError as e:
                logger.warning("[server./move] rejected %r: %s", seq, e)
                payload = state_payload(cube)
                payload.update({"ok": False, "error": str(e)})
                return jsonify(payload), 400
            return jsonify(state_payload(cube))

    @app.route("/scramble", methods=["POST"])
    def _scramble():
        data = request.get_json(silent=True) or {}
        try:
            n = int(data.get("moves", DEFAULT_SCRAMBLE_MOVES))
        except (TypeError, ValueError) as e:
            return _error(e)
        with lock:
            try:
                applied = cube.scramble(n)
            except ValueError as e:
                return _error(e)
            payload = state_payload(cube)
        payload["scramble"] = " ".join(applied)
        return jsonify(payload)

    @app.route("/solve", methods=["POST"])
    def _solve():
        with lock:
            cube.solve_step_by_step()
            return jsonify(state_payload(cube))

    @app.route("/reset", methods=["POST"])
    def _reset():
        with lock:
            cube.reset()
            return jsonify(state_payload(cube))

    return app


class PreviewServer(threading.Thread):
    """Run the Flask app in a background daemon thread using `make_server`."""

    def __init__(self, app, host, port):
        super().__init__(daemon=True)
        self._app = app
        self._host = host
        self._port = port
        self._server = None

    def run(self):
        try:
            self._server = make_server(self._host, self._port, self._app, threaded=True)
            self._server.serve_forever()
        except Exception as e:
            logger.exception("[PreviewServer] stopped with error: %s", e)

    def shutdown(self):
        if self._server:
            self._server.shutdown()
