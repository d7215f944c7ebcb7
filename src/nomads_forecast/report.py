"""Precipitation forecast report: latest GFS run, subset around a point, maps.

Run ``nomads-forecast-report --help`` for the command line options.
"""

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from nomads_forecast.client import NomadsClient
from nomads_forecast.errors.nomads_error import NomadsError
from nomads_forecast.forecast._forecast_grid import ForecastGrid
from nomads_forecast.forecast._time import horizon_for_step
from nomads_forecast.forecast._types.model_run import ModelRun
from nomads_forecast.forecast.forecast import Forecast
from nomads_forecast.forecast.variables import find_variable
from nomads_forecast.logging import get_logger, set_log_level
from nomads_forecast.render.interactive_map import InteractiveMapRenderer
from nomads_forecast.render.places import DEFAULT_PLACES
from nomads_forecast.render.static_map import StaticMapRenderer
from nomads_forecast.types.geo import BoundingBox, LatLon

logger = get_logger(__name__)

DEFAULT_POINT = LatLon(lat=-19.78753, lon=-51.98899)
PRODUCT_URL = "nco.ncep.noaa.gov/pmb/products/gfs/"


@dataclass
class ReportResult:
    model_run: ModelRun
    grid: ForecastGrid
    static_map: Path
    interactive_map: Path | None = None
    netcdf: Path | None = None


def _variable_label(name: str) -> str:
    variable = find_variable(name)
    return variable.label if variable is not None else name


def build_titles(
    forecast: Forecast, grid: ForecastGrid, model_run: ModelRun
) -> tuple[str, str, str]:
    meta = forecast.meta
    hours = horizon_for_step(grid.request.step, meta.sampling_interval_hours)
    subtitle = f"{_variable_label(grid.variable)} in {hours:g} hours"
    if grid.forecast_dates:
        subtitle += f"\n<{grid.forecast_dates[0]:%Y-%m-%d %H:%M:%S} GMT>"
    return f"{meta.display_name} NCEP model", subtitle, model_run.caption


def build_interactive_title(grid: ForecastGrid, today: datetime) -> list[str]:
    lines = [PRODUCT_URL]
    if grid.forecast_dates:
        lines.append(f"From {today:%Y-%b-%d} to {grid.forecast_dates[0]:%Y-%b-%d}")
    return lines


def run_report(
    client: NomadsClient,
    point: LatLon,
    output_dir: Path,
    model: str | None = None,
    variable: str | None = None,
    horizon_hours: float | None = None,
    places: Sequence[LatLon] = DEFAULT_PLACES,
    extent: BoundingBox | None = None,
    interactive: bool = False,
    export_netcdf: bool = False,
) -> ReportResult:
    """Fetch the latest run around ``point`` and render the report maps.

    All request validation happens before any data is downloaded.
    """
    settings = client.settings
    forecast = client.forecasts.get_model(model or settings.model)
    model_run = forecast.get_latest_model_run()

    request = forecast.build_request(
        point, variable=variable, horizon_hours=horizon_hours, model_run=model_run
    )
    logger.info(f"Requesting {request}")
    grid = client.provider.fetch(request)

    output_dir = Path(output_dir)
    title, subtitle, caption = build_titles(forecast, grid, model_run)
    static_map = StaticMapRenderer(settings.render).render(
        grid,
        output_dir / settings.render.static_map_filename,
        places=places,
        title=title,
        subtitle=subtitle,
        caption=caption,
        extent=extent,
    )
    result = ReportResult(model_run=model_run, grid=grid, static_map=static_map)

    if interactive:
        result.interactive_map = InteractiveMapRenderer(settings.render).render(
            grid,
            output_dir / settings.render.interactive_map_filename,
            title_lines=build_interactive_title(grid, datetime.now(timezone.utc)),
        )

    if export_netcdf:
        result.netcdf = grid.to_netcdf(
            output_dir / f"{model_run.name}_{grid.variable}_{request.step:03d}.nc",
            overwrite=True,
        )

    return result


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nomads-forecast-report",
        description="Map a GFS forecast variable around a point of interest.",
    )
    parser.add_argument("--lat", type=float, default=DEFAULT_POINT.lat)
    parser.add_argument("--lon", type=float, default=DEFAULT_POINT.lon)
    parser.add_argument(
        "--horizon",
        type=float,
        default=None,
        help="Hours ahead; the last available forecast step when omitted",
    )
    parser.add_argument("--model", default=None, help="DODS model, e.g. gfs_0p50")
    parser.add_argument("--variable", default=None, help="DODS variable name")
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument(
        "--interactive", action="store_true", help="Also write a Leaflet HTML map"
    )
    parser.add_argument(
        "--netcdf", action="store_true", help="Also save the subset as NetCDF"
    )
    parser.add_argument(
        "--list-models", action="store_true", help="List DODS models and exit"
    )
    parser.add_argument(
        "--list-variables",
        action="store_true",
        help="List the variables of the latest run and exit",
    )
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    set_log_level(args.log_level)

    with NomadsClient() as client:
        try:
            if args.list_models:
                for name in client.forecasts.get_available_models():
                    print(name)
                return 0
            forecast = client.forecasts.get_model(args.model or client.settings.model)
            if args.list_variables:
                for name, description in forecast.get_variables().items():
                    print(f"{name:<16} {description}")
                return 0

            result = run_report(
                client,
                LatLon(lat=args.lat, lon=args.lon),
                args.output_dir,
                model=args.model,
                variable=args.variable,
                horizon_hours=args.horizon,
                interactive=args.interactive,
                export_netcdf=args.netcdf,
            )
        except NomadsError as e:
            logger.error(str(e))
            return 1

    print(result.static_map)
    if result.interactive_map is not None:
        print(result.interactive_map)
    if result.netcdf is not None:
        print(result.netcdf)
    return 0


if __name__ == "__main__":
    sys.exit(main())
