import logging
from pathlib import Path

from nomads_forecast import NomadsClient
from nomads_forecast.report import DEFAULT_POINT, run_report
from nomads_forecast.types.geo import BoundingBox

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    client = NomadsClient()

    # List the model families and the variables of the latest gfs_0p50 run
    print(client.forecasts.get_available_models())
    for name, description in client.forecasts["gfs_0p50"].get_variables().items():
        print(f"{name:<16} {description}")

    # Write the PNG and HTML maps and keep the subset as NetCDF
    result = run_report(
        client,
        DEFAULT_POINT,
        Path("reports"),
        horizon_hours=24,
        extent=BoundingBox(west=-58.0, east=-46.25, south=-28.0, north=-13.0),
        interactive=True,
        export_netcdf=True,
    )
    print(result.static_map, result.interactive_map, result.netcdf)


if __name__ == "__main__":
    main()
