"""Tests for the DODS directory listing parser with mocked HTTP responses."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from nomads_forecast.errors import (
    NotFoundError,
    ProviderError,
    ProviderUnavailableError,
)
from nomads_forecast.forecast._api import DODSDirectoryAPI
from nomads_forecast.settings import NomadsSettings

BASE_URL = "https://nomads.example.gov/dods"

ROOT_HTML = f"""
<html><body>
<b>GrADS Data Server</b><br>
<a href="{BASE_URL}/gfs_0p25">gfs_0p25</a><br>
<a href="{BASE_URL}/gfs_0p50/">gfs_0p50</a><br>
<a href="{BASE_URL}/gfs_0p50/">gfs_0p50 (duplicate)</a><br>
<a href="{BASE_URL}/gfs_1p00">gfs_1p00</a><br>
<a href="https://www.example.gov/help.html">help</a>
</body></html>
"""

DATES_HTML = f"""
<html><body>
<a href="{BASE_URL}/gfs_0p50/gfs20241117">gfs20241117</a><br>
<a href="{BASE_URL}/gfs_0p50/gfs20241115">gfs20241115</a><br>
<a href="{BASE_URL}/gfs_0p50/gfs20241116">gfs20241116</a><br>
<a href="{BASE_URL}/gfs_0p50/gfs20241116/">gfs20241116</a><br>
</body></html>
"""

RUNS_HTML = f"""
<html><body>
<b>gfs_0p50_00z:</b>&nbsp;GFS 0.5 deg starting from 00Z17nov2024, downloaded Nov 17 05:12 UTC<br>
&nbsp;<a href="{BASE_URL}/gfs_0p50/gfs20241117/gfs_0p50_00z.info">info</a>
<hr>
<b>gfs_0p50_06z:</b>&nbsp;GFS 0.5 deg starting from 06Z17nov2024, downloaded Nov 17 11:13 UTC<br>
&nbsp;<a href="{BASE_URL}/gfs_0p50/gfs20241117/gfs_0p50_06z.info">info</a>
<hr>
<b>gfs_0p50_12z:</b>&nbsp;GFS 0.5 deg starting from 12Z17nov2024, downloaded Nov 17 17:13 UTC<br>
&nbsp;<a href="{BASE_URL}/gfs_0p50/gfs20241117/gfs_0p50_12z.info">info</a>
</body></html>
"""

RUNS_HTML_LINKS_ONLY = f"""
<a href="{BASE_URL}/gfs_0p50/gfs20241117/gfs_0p50_00z.info">info</a>
<a href="{BASE_URL}/gfs_0p50/gfs20241117/gfs_0p50_00z.das">das</a>
<a href="{BASE_URL}/gfs_0p50/gfs20241117/gfs_0p50_06z.info">info</a>
"""


def _response(text: str = "", status_code: int = 200) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.text = text
    response.status_code = status_code
    response.ok = status_code < 400
    return response


@pytest.fixture
def api() -> DODSDirectoryAPI:
    return DODSDirectoryAPI(NomadsSettings(dods_base_url=BASE_URL + "/"))


def test_get_url_joins_parts(api: DODSDirectoryAPI):
    assert api._get_url() == BASE_URL
    assert api._get_url("gfs_0p50", "gfs20241117/") == (
        f"{BASE_URL}/gfs_0p50/gfs20241117"
    )


def test_get_uses_timeout(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response("ok")) as get:
        assert api.get("gfs_0p50") == "ok"
    get.assert_called_once_with(f"{BASE_URL}/gfs_0p50", timeout=60)


def test_get_available_models(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response(ROOT_HTML)):
        models = api.get_available_models()
    assert models == ["gfs_0p25", "gfs_0p50", "gfs_1p00"]


def test_get_model_dates_sorted_and_unique(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response(DATES_HTML)):
        dates = api.get_model_dates("gfs_0p50")
    assert dates == ["gfs20241115", "gfs20241116", "gfs20241117"]


def test_get_model_dates_empty_listing(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response(ROOT_HTML)):
        with pytest.raises(NotFoundError):
            api.get_model_dates("gfs_0p50")


def test_get_model_runs(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response(RUNS_HTML)):
        runs = api.get_model_runs("gfs_0p50", "gfs20241117")

    assert [r.name for r in runs] == ["gfs_0p50_00z", "gfs_0p50_06z", "gfs_0p50_12z"]
    latest = runs[-1]
    assert latest.run_id == "gfs20241117/gfs_0p50_12z"
    assert latest.description == (
        "GFS 0.5 deg starting from 12Z17nov2024, downloaded Nov 17 17:13 UTC"
    )
    assert latest.init_time is not None
    assert (latest.init_time.year, latest.init_time.month) == (2024, 11)
    assert (latest.init_time.day, latest.init_time.hour) == (17, 12)


def test_get_model_runs_falls_back_to_info_links(api: DODSDirectoryAPI):
    with patch.object(
        api._session, "get", return_value=_response(RUNS_HTML_LINKS_ONLY)
    ):
        runs = api.get_model_runs("gfs_0p50", "gfs20241117")

    assert [r.name for r in runs] == ["gfs_0p50_00z", "gfs_0p50_06z"]
    assert runs[0].description == ""
    assert runs[0].init_time is None


def test_get_model_runs_empty_listing(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response("<html></html>")):
        with pytest.raises(NotFoundError):
            api.get_model_runs("gfs_0p50", "gfs20241117")


def test_not_found(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response("", 404)):
        with pytest.raises(NotFoundError) as exc_info:
            api.get_model_dates("gfs_9p99")
    assert exc_info.value.status_code == 404
    assert exc_info.value.url == f"{BASE_URL}/gfs_9p99"


def test_unexpected_status(api: DODSDirectoryAPI):
    with patch.object(api._session, "get", return_value=_response("boom", 500)):
        with pytest.raises(ProviderError) as exc_info:
            api.get_available_models()
    assert not isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.status_code == 500
    assert "boom" in str(exc_info.value)


def test_transport_failure(api: DODSDirectoryAPI):
    with patch.object(
        api._session, "get", side_effect=requests.ConnectionError("refused")
    ):
        with pytest.raises(ProviderUnavailableError) as exc_info:
            api.get_available_models()
    assert "refused" in str(exc_info.value)


def test_retries_are_mounted(api: DODSDirectoryAPI):
    adapter = api._session.get_adapter(BASE_URL)
    assert adapter.max_retries.total == 3
    assert 503 in adapter.max_retries.status_forcelist


def test_close_releases_session(api: DODSDirectoryAPI):
    with patch.object(api._session, "close") as close:
        api.close()
    close.assert_called_once_with()
