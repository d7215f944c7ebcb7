from pathlib import Path

import folium
import numpy as np

from nomads_forecast.forecast._forecast_grid import ForecastGrid
from nomads_forecast.logging import get_logger
from nomads_forecast.render.renderer import to_rgba, value_range
from nomads_forecast.settings.render_settings import RenderSettings

logger = get_logger(__name__)

_TITLE_HTML = """
<style>
  .map-title {{
    position: fixed !important;
    top: 10px;
    left: 50%;
    transform: translate(-50%, 0);
    z-index: 1000;
    text-align: center;
    padding: 4px 75px 4px 10px;
    background: rgba(255, 255, 255, 0.75);
    font-weight: bold;
    font-size: 12px;
  }}
</style>
<div class="map-title">{lines}</div>
"""


def _cell_size(coord: np.ndarray) -> float:
    if coord.size < 2:
        return 0.0
    return float(np.abs(np.diff(coord)).min())


class InteractiveMapRenderer:
    """Writes a Leaflet (folium) HTML map with the field as an image overlay."""

    def __init__(self, settings: RenderSettings | None = None):
        self._settings = settings or RenderSettings()

    def build_map(
        self,
        grid: ForecastGrid,
        title_lines: list[str] | None = None,
        time_index: int = 0,
    ) -> folium.Map:
        s = self._settings
        data = grid.rotate().field(time_index)
        lats = data["lat"].values
        lons = data["lon"].values
        half_lat = _cell_size(lats) / 2
        half_lon = _cell_size(lons) / 2
        bounds = [
            [float(lats.min()) - half_lat, float(lons.min()) - half_lon],
            [float(lats.max()) + half_lat, float(lons.max()) + half_lon],
        ]

        m = folium.Map(
            location=[float(lats.mean()), float(lons.mean())],
            zoom_start=6,
            tiles="OpenStreetMap",
        )
        if title_lines:
            m.get_root().html.add_child(
                folium.Element(_TITLE_HTML.format(lines="<br/>".join(title_lines)))
            )

        folium.raster_layers.ImageOverlay(
            image=(to_rgba(data, s.colors) * 255).round().astype(np.uint8),
            bounds=bounds,
            opacity=s.overlay_opacity,
            origin="lower",
            name=grid.variable,
        ).add_to(m)

        vmin, vmax = value_range(data)
        folium.LinearColormap(
            s.colors, vmin=vmin, vmax=vmax, caption=s.legend_title
        ).add_to(m)
        return m

    def render(
        self,
        grid: ForecastGrid,
        output_path: Path,
        title_lines: list[str] | None = None,
        time_index: int = 0,
    ) -> Path:
        m = self.build_map(grid, title_lines=title_lines, time_index=time_index)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        m.save(str(output_path))
        logger.info(f"Interactive map written to {output_path}")
        return output_path
