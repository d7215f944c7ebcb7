"""Tests for the per-model Forecast facade with the directory API and provider mocked."""

from unittest.mock import patch

import pytest

from nomads_forecast import LatLon, NomadsClient
from nomads_forecast.errors import (
    InvalidHorizonError,
    InvalidRequestError,
    ModelDoesNotExistError,
    OutOfDomainError,
)
from nomads_forecast.forecast import Forecast, Models, Variables
from nomads_forecast.forecast._model_meta import get_model_meta_info
from nomads_forecast.report import run_report
from nomads_forecast.settings import NomadsSettings
from tests.forecast.utils import FakeProvider, create_model_run, encode_value

POI = LatLon(lat=-19.78753, lon=-51.98899)
DATES = ["gfs20241115", "gfs20241116", "gfs20241117"]


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def client(provider: FakeProvider) -> NomadsClient:
    return NomadsClient(settings=NomadsSettings(), provider=provider)


@pytest.fixture
def forecast(client: NomadsClient) -> Forecast:
    forecast = client.forecasts.get_model(Models.GFS_0P50)
    runs = [create_model_run(f"gfs_0p50_{h}z") for h in ("00", "06", "12")]
    with (
        patch.object(forecast._api, "get_model_dates", return_value=DATES),
        patch.object(forecast._api, "get_model_runs", return_value=runs),
    ):
        yield forecast


def test_models_are_lazy_and_cached(client: NomadsClient):
    forecast = client.forecasts[Models.GFS_0P50]
    assert client.forecasts.get_model("gfs_0p50") is forecast
    assert forecast.name == "gfs_0p50"
    assert str(forecast) == "gfs_0p50"


def test_unknown_model(client: NomadsClient):
    with pytest.raises(ModelDoesNotExistError):
        client.forecasts.get_model("gfs_9p99")


@pytest.mark.parametrize("model", list(Models))
def test_model_meta_lattice(model: Models):
    meta = get_model_meta_info(model)
    lattice = meta.lattice
    assert lattice.resolution == meta.resolution
    assert lattice.n_lon * meta.resolution == pytest.approx(360.0)
    assert meta.num_steps == meta.max_forecast_hours // meta.sampling_interval_hours + 1


def test_latest_model_run(forecast: Forecast):
    run = forecast.get_latest_model_run()

    forecast._api.get_model_runs.assert_called_once_with("gfs_0p50", "gfs20241117")
    assert run.name == "gfs_0p50_12z"
    assert run.run_id == "gfs20241117/gfs_0p50_12z"
    assert run.caption.startswith("gfs_0p50_12z: GFS 0.5 deg starting from 12Z17nov2024")


def test_get_model_runs_for_date(forecast: Forecast):
    forecast.get_model_runs("gfs20241116")
    forecast._api.get_model_runs.assert_called_once_with("gfs_0p50", "gfs20241116")
    forecast._api.get_model_dates.assert_not_called()


def test_build_request_for_point_of_interest(forecast: Forecast, provider: FakeProvider):
    request = forecast.build_request(POI, horizon_hours=348)

    assert request.model_id == "gfs_0p50"
    assert request.model_run_id == "gfs20241117/gfs_0p50_12z"
    assert request.variable == "acpcpsfc"
    assert request.time_range == (116, 116)
    assert request.lon_window == (604, 628)
    assert request.lat_window == (126, 154)
    assert provider.requests == []


@pytest.mark.parametrize(
    "variable", [Variables.ACCUMULATED_PRECIPITATION, "acpcpsfc", None]
)
def test_build_request_variable_forms(forecast: Forecast, variable):
    assert forecast.build_request(POI, variable=variable, horizon_hours=24).variable == (
        "acpcpsfc"
    )


def test_build_request_latest_step(forecast: Forecast):
    request = forecast.build_request(POI)
    assert request.time_range == (128, 128)


def test_build_request_uses_settings(provider: FakeProvider):
    settings = NomadsSettings(half_width_lon=1, half_width_lat=2, variable="tmp2m")
    forecast = NomadsClient(settings=settings, provider=provider).forecasts[
        Models.GFS_0P50
    ]

    request = forecast.build_request(
        POI, horizon_hours=0, model_run=create_model_run()
    )
    assert request.variable == "tmp2m"
    assert request.lon_window == (615, 617)
    assert request.lat_window == (138, 142)


def test_get_forecast(forecast: Forecast, provider: FakeProvider):
    grid = forecast.get_forecast(POI, horizon_hours=348)

    assert len(provider.requests) == 1
    assert grid.request == provider.requests[0]
    assert grid.to_xarray().shape == (1, 29, 25)
    assert grid.to_xarray().sel(lat=-20.0, lon=308.0).values[0] == encode_value(
        116, 140, 616
    )


def test_get_forecast_rejects_before_fetch(forecast: Forecast, provider: FakeProvider):
    with pytest.raises(OutOfDomainError):
        forecast.get_forecast(LatLon(lat=-91.0, lon=0.0), horizon_hours=24)
    assert provider.requests == []


def test_get_variables_and_steps(forecast: Forecast):
    assert "acpcpsfc" in forecast.get_variables()
    assert forecast.get_available_steps(create_model_run())[-1] == 128


def test_available_models(client: NomadsClient):
    with patch(
        "nomads_forecast.forecast._api.DODSDirectoryAPI.get_available_models",
        return_value=["gfs_0p25", "gfs_0p50"],
    ):
        assert client.forecasts.get_available_models() == ["gfs_0p25", "gfs_0p50"]


@pytest.fixture
def offline():
    """Fail the test if a directory listing is requested."""
    with patch(
        "nomads_forecast.forecast._api.DODSDirectoryAPI.get",
        side_effect=AssertionError("directory listing requested"),
    ) as get:
        yield get


@pytest.mark.parametrize(
    "point,kwargs,error",
    [
        (LatLon(lat=-91.0, lon=0.0), {"horizon_hours": 24}, OutOfDomainError),
        (LatLon(lat=-91.0, lon=0.0), {}, OutOfDomainError),
        (POI, {"horizon_hours": 24, "variable": "  "}, InvalidRequestError),
        (POI, {"horizon_hours": -3}, InvalidHorizonError),
        (POI, {"window_half_widths": (-1, 2)}, InvalidRequestError),
    ],
)
def test_build_request_validates_before_listing(
    client: NomadsClient, provider: FakeProvider, offline, point, kwargs, error
):
    forecast = client.forecasts[Models.GFS_0P50]
    with pytest.raises(error):
        forecast.build_request(point, **kwargs)
    offline.assert_not_called()
    assert provider.requests == []


def test_run_report_validates_before_listing(
    client: NomadsClient, provider: FakeProvider, offline, tmp_path
):
    with pytest.raises(OutOfDomainError):
        run_report(client, LatLon(lat=-91.0, lon=0.0), tmp_path, horizon_hours=24)
    with pytest.raises(InvalidRequestError):
        run_report(client, POI, tmp_path, variable="  ", horizon_hours=24)
    offline.assert_not_called()
    assert list(tmp_path.iterdir()) == []


def test_directory_api_is_shared_and_closed(client: NomadsClient):
    api = client.api
    assert client.forecasts[Models.GFS_0P50]._api is api
    assert client.forecasts[Models.GFS_1P00]._api is api

    with patch.object(api._session, "close") as close:
        with client:
            pass
    close.assert_called_once_with()
