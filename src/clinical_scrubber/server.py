"""HTTP sidecar server for clinical-scrubber.

A lightweight stdlib HTTP server on localhost, so callers can reuse one
compiled Scrubber instead of spawning the CLI per note.

Endpoints:
    POST /scrub    - Scrub a note (JSON body)
    POST /detect   - Spans per category, nothing replaced
    GET  /health   - Health check

Body format: {"text": "...", "skip": ["phone", "date"]}
Response:    {"text": "...", "stats": {...}, "total": N}

/detect body: {"text": "...", "categories": ["email"]}  (categories optional)
/detect response: {"text": "<normalized>", "spans": {"email": [[start, end]]}}
"""

from __future__ import annotations
import json
import logging
import os
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any

from .config import ScrubberConfig, load_from_file
from .normalize import normalize_input
from .scrubber import Scrubber
from .types import Category

logger = logging.getLogger(__name__)

DEFAULT_PORT = int(os.environ.get("CLINICAL_SCRUBBER_PORT", "18792"))
DEFAULT_CONFIG = os.environ.get("CLINICAL_SCRUBBER_CONFIG", "")


class ScrubHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the scrubber sidecar."""

    # Set by make_server()
    scrubber: Scrubber

    def _read_json(self) -> Any:
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length).decode("utf-8")
        return json.loads(body) if body else {}

    def _respond(self, status: int, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.info("%s - %s", self.address_string(), format % args)

    def do_GET(self) -> None:
        if self.path == "/health":
            self._respond(200, {"status": "ok"})
        else:
            self._respond(404, {"error": "not found"})

    def do_POST(self) -> None:
        try:
            body = self._read_json()
        except ValueError as e:
            self._respond(400, {"error": f"invalid JSON: {e}"})
            return
        if self.path not in ("/scrub", "/detect"):
            self._respond(404, {"error": "not found"})
            return
        if not isinstance(body, dict):
            self._respond(400, {"error": "body must be a JSON object"})
            return

        text = body.get("text", "")
        if not isinstance(text, str):
            self._respond(400, {"error": "'text' must be a string"})
            return

        if self.path == "/scrub":
            try:
                skip = _category_set(body, "skip")
            except ValueError as e:
                self._respond(400, {"error": str(e)})
                return
            scrubbed, stats = self.scrubber.scrub(text, skip or ())
            self._respond(200, {"text": scrubbed, "stats": stats.as_dict(), "total": stats.total})
        else:
            try:
                categories = _category_set(body, "categories")
            except ValueError as e:
                self._respond(400, {"error": str(e)})
                return
            found = self.scrubber.find(text, categories)
            self._respond(200, {
                "text": normalize_input(text),
                "spans": {c.value: [list(s) for s in spans] for c, spans in found.items()},
            })


def _category_set(body: dict[str, Any], key: str) -> set[Category] | None:
    """Parse an optional list of category names; ValueError on bad input."""
    if key not in body:
        return None
    values = body[key]
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"'{key}' must be a list of category names")
    return {Category.parse(v) for v in values}


def make_server(
    scrubber: Scrubber,
    host: str = "127.0.0.1",
    port: int = DEFAULT_PORT,
) -> HTTPServer:
    """Bind a server whose handlers share *scrubber*."""
    handler = type("BoundScrubHandler", (ScrubHandler,), {"scrubber": scrubber})
    return HTTPServer((host, port), handler)


def serve(port: int = DEFAULT_PORT, config_path: str = DEFAULT_CONFIG) -> None:
    """Start the scrubber HTTP sidecar."""
    config = load_from_file(config_path) if config_path else ScrubberConfig()
    server = make_server(Scrubber(config), port=port)
    logger.info("clinical-scrubber sidecar listening on http://127.0.0.1:%d", server.server_port)
    if config_path:
        logger.info("  config: %s", config_path)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("shutting down")
    finally:
        server.server_close()


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="clinical-scrubber HTTP sidecar")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--config", default=DEFAULT_CONFIG)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    serve(port=args.port, config_path=args.config)
