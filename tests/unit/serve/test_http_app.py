"""Unit tests for the HTTP front end."""

from __future__ import annotations

from dataclasses import replace

from core.config import EpicurveConfig
from core.profile import load_profile
from serve.http_app import create_app
from serve.report_sdk import EpicurveClient
from tests.fake_http import FakeResponse, fixture_response, install_fake_get
from tests.fixture_paths import profile_path


def _client(tmp_path) -> EpicurveClient:
    config = replace(EpicurveConfig.from_env(), output_dir=tmp_path)
    return EpicurveClient(config, load_profile(profile_path("small")))


def test_index_embeds_one_image_per_metric(tmp_path) -> None:
    """Landing page should reference every configured metric."""
    response = create_app(_client(tmp_path)).test_client().get("/")
    page = response.get_data(as_text=True)

    assert response.status_code == 200
    assert 'src="/img-confirmed"' in page and 'src="/img-deaths"' in page


def test_image_route_serves_png_and_saves_copy(tmp_path, monkeypatch) -> None:
    """Image routes render a fresh PNG and write it to the output directory."""
    install_fake_get(monkeypatch, fixture_response("jhu_small.csv"))

    response = create_app(_client(tmp_path)).test_client().get("/img-confirmed")

    assert response.status_code == 200 and response.mimetype == "image/png"
    assert (tmp_path / "covid-confirmed.png").read_bytes() == response.get_data()


def test_image_route_returns_500_for_fetch_failure(tmp_path, monkeypatch) -> None:
    """Upstream failures only fail the current request."""
    install_fake_get(monkeypatch, FakeResponse(b"", status_code=503, reason="Unavailable"))
    app_client = create_app(_client(tmp_path)).test_client()

    failed = app_client.get("/img-deaths")
    page = app_client.get("/")

    assert failed.status_code == 500 and "HTTP 503" in failed.get_data(as_text=True)
    assert page.status_code == 200


def test_image_route_returns_404_for_unknown_metric(tmp_path) -> None:
    """Metrics outside the profile have no route."""
    response = create_app(_client(tmp_path)).test_client().get("/img-recovered")

    assert response.status_code == 404
