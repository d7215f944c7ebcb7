from collections.abc import Sequence
from pathlib import Path

import cartopy.crs as ccrs
import cartopy.feature as cfeature
import matplotlib

matplotlib.use("Agg")  # Non-interactive backend, figures are only saved to disk
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from cartopy.io import shapereader  # noqa: E402

from nomads_forecast.forecast._forecast_grid import ForecastGrid  # noqa: E402
from nomads_forecast.logging import get_logger  # noqa: E402
from nomads_forecast.render.renderer import gradient_colormap, value_range  # noqa: E402
from nomads_forecast.settings.render_settings import RenderSettings  # noqa: E402
from nomads_forecast.types.geo import BoundingBox, LatLon  # noqa: E402

logger = get_logger(__name__)

_PLATE_CARREE = ccrs.PlateCarree()


class StaticMapRenderer:
    """Renders one forecast time as a PNG map.

    The field is drawn as a gradient raster under the administrative
    boundaries, with labelled places on top, cropped to the map extent.
    """

    def __init__(self, settings: RenderSettings | None = None):
        self._settings = settings or RenderSettings()

    def _add_boundaries(self, ax) -> None:
        s = self._settings
        if s.boundaries_path:
            logger.info(f"Drawing boundaries from {s.boundaries_path}")
            ax.add_geometries(
                shapereader.Reader(s.boundaries_path).geometries(),
                _PLATE_CARREE,
                facecolor=s.boundary_facecolor,
                edgecolor=s.boundary_edgecolor,
                alpha=s.boundary_alpha,
            )
        elif s.natural_earth_boundaries:
            ax.add_feature(
                cfeature.STATES, edgecolor=s.boundary_edgecolor, linewidth=0.4
            )
            ax.add_feature(
                cfeature.BORDERS, edgecolor=s.boundary_edgecolor, linewidth=0.6
            )

    def _add_places(self, ax, places: Sequence[LatLon], extent: BoundingBox) -> None:
        s = self._settings
        visible = [
            p
            for p in places
            if extent.west <= p.lon <= extent.east
            and extent.south <= p.lat <= extent.north
        ]
        if not visible:
            return
        ax.scatter(
            [p.lon for p in visible],
            [p.lat for p in visible],
            s=s.marker_size,
            color=s.label_color,
            transform=_PLATE_CARREE,
            zorder=3,
        )
        for place in visible:
            if not place.label:
                continue
            ax.text(
                place.lon,
                place.lat + s.label_nudge,
                place.label,
                color=s.label_color,
                fontsize=s.label_size,
                fontweight="bold",
                ha="center",
                transform=_PLATE_CARREE,
                zorder=4,
            )

    def render(
        self,
        grid: ForecastGrid,
        output_path: Path,
        places: Sequence[LatLon] = (),
        title: str | None = None,
        subtitle: str | None = None,
        caption: str | None = None,
        extent: BoundingBox | None = None,
        time_index: int = 0,
    ) -> Path:
        s = self._settings
        extent = extent or BoundingBox.from_extent(s.map_extent)
        data = grid.rotate().field(time_index)
        vmin, vmax = value_range(data)

        fig = plt.figure(figsize=s.figsize, dpi=s.dpi)
        try:
            ax = fig.add_subplot(1, 1, 1, projection=_PLATE_CARREE)
            mesh = ax.pcolormesh(
                data["lon"].values,
                data["lat"].values,
                np.ma.masked_invalid(np.asarray(data.values, dtype=float)),
                cmap=gradient_colormap(s.colors),
                vmin=vmin,
                vmax=vmax,
                shading="auto",
                transform=_PLATE_CARREE,
            )
            self._add_boundaries(ax)
            self._add_places(ax, places, extent)
            ax.set_extent(extent.to_extent(), crs=_PLATE_CARREE)

            gl = ax.gridlines(draw_labels=True, linewidth=0, alpha=0)
            gl.top_labels = False
            gl.right_labels = False
            gl.xlabel_style = {"family": "monospace", "size": 5}
            gl.ylabel_style = {"family": "monospace", "size": 5}

            cbar = fig.colorbar(mesh, ax=ax, orientation="vertical", shrink=0.8)
            cbar.ax.tick_params(labelsize=5)

            if title:
                fig.suptitle(title, fontsize=11, fontweight="bold", family="serif")
            if subtitle:
                ax.set_title(subtitle, fontsize=6, family="monospace", loc="left")
            if caption:
                fig.text(0.98, 0.01, caption, fontsize=4, family="monospace", ha="right")

            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_path, dpi=s.dpi, facecolor=s.background)
        finally:
            plt.close(fig)

        logger.info(f"Static map written to {output_path}")
        return output_path
