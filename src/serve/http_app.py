"""Minimal HTTP front end.

This module serves a static landing page and one freshly rendered
chart per configured metric. Every request runs its own pipeline, so a
failure only affects the request that triggered it.
"""

from __future__ import annotations

from flask import Flask, Response, abort

from core.constants import IMAGE_ROUTE_PREFIX, PNG_MIME_TYPE
from core.errors import EpicurveError
from core.logging_config import get_logger
from serve.image_output import image_path, save_image
from serve.report_sdk import EpicurveClient

_LOGGER = get_logger(__name__)

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
\t<head>
\t\t<title>COVID-19</title>
\t</head>
\t<body>
\t\t<div id="content">
{images}
\t\t</div>
\t</body>
</html>
"""


def create_app(client: EpicurveClient | None = None) -> Flask:
    """Create the Flask application.

    Args:
        client: Optional SDK client; built from the environment when omitted.

    Returns:
        Configured Flask application.
    """
    report_client = client or EpicurveClient()
    app = Flask(__name__)

    @app.get("/")
    def index() -> Response:
        return Response(render_page(report_client.metrics()), mimetype="text/html")

    @app.get(f"{IMAGE_ROUTE_PREFIX}<metric>")
    def image(metric: str) -> Response:
        if not report_client.supports(metric):
            abort(404)
        return _render_image_response(report_client, metric)

    return app


def render_page(metrics: tuple[str, ...]) -> str:
    """Render the landing page embedding one image per metric."""
    images = "\n".join(
        f'\t\t\t<img id="plot-{metric}" src="{IMAGE_ROUTE_PREFIX}{metric}"/>' for metric in metrics
    )
    return _PAGE_TEMPLATE.format(images=images)


def run_server(client: EpicurveClient, host: str, port: int) -> None:
    """Serve the application until interrupted."""
    _LOGGER.info("server_ready", host=host, port=port, metrics=list(client.metrics()))
    create_app(client).run(host=host, port=port, threaded=True)


def _render_image_response(client: EpicurveClient, metric: str) -> Response:
    try:
        payload = client.render(metric)
    except EpicurveError as error:
        _LOGGER.error("request_failed", metric=metric, error=str(error))
        return Response(f"{error}\n", status=500, mimetype="text/plain")
    _save_copy(client, metric, payload)
    return Response(payload, mimetype=PNG_MIME_TYPE)


def _save_copy(client: EpicurveClient, metric: str, payload: bytes) -> None:
    target = image_path(client.config.output_dir, metric)
    try:
        save_image(payload, target)
    except OSError as error:
        _LOGGER.warning("image_save_failed", metric=metric, path=str(target), error=str(error))
