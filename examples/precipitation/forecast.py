import logging

import matplotlib.pyplot as plt

from nomads_forecast import NomadsClient
from nomads_forecast.forecast import Models, Variables
from nomads_forecast.types.geo import LatLon

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    client = NomadsClient()
    forecast = client.forecasts.get_model(Models.GFS_0P50)

    # The latest run published on the DODS server
    model_run = forecast.get_latest_model_run()
    print(f"Using {model_run.caption}")

    # Accumulated precipitation 348 hours ahead around Inocência, Brazil
    point = LatLon(lat=-19.78753, lon=-51.98899, label="Inocência")
    request = forecast.build_request(
        point,
        variable=Variables.ACCUMULATED_PRECIPITATION,
        horizon_hours=348,
        model_run=model_run,
    )
    print(request)

    grid = client.provider.fetch(request)
    print(grid)

    # Longitudes come in 0..360, rotate to -180..180 before plotting
    grid.rotate().field().plot(cmap="YlGnBu")
    plt.scatter([point.lon], [point.lat], color="red", s=5)
    plt.title(f"{Variables.ACCUMULATED_PRECIPITATION.value.label}, {model_run.name}")
    plt.show()

    # The same subset as a flat table
    df = grid.to_dataframe()
    print(df.sort_values("precip", ascending=False).head())


if __name__ == "__main__":
    main()
