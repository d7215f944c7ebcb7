from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RenderSettings(BaseSettings):
    """
    Settings shared by the static (PNG) and interactive (HTML) map renderers.

    Sizes follow the printed report layout: a 9.5 x 12.5 cm portrait figure at
    200 dpi. The map extent is (west, east, south, north) in degrees.
    """

    colors: list[str] = Field(default=["#FFFFCC", "#41B6C4", "#0C2C84"])
    width_cm: float = Field(default=9.5, gt=0)
    height_cm: float = Field(default=12.5, gt=0)
    dpi: int = Field(default=200, gt=0)
    background: str = "white"

    map_extent: tuple[float, float, float, float] = (-58.0, -46.25, -28.0, -13.0)

    boundaries_path: str | None = Field(
        default=None, description="Shapefile with administrative boundaries"
    )
    natural_earth_boundaries: bool = Field(
        default=True,
        description="Draw Natural Earth states and borders when no shapefile is set",
    )
    boundary_facecolor: str = "lightblue"
    boundary_edgecolor: str = "black"
    boundary_alpha: float = 0.10

    label_color: str = "red"
    label_size: float = 6.5
    label_nudge: float = 0.25
    marker_size: float = 1.5

    overlay_opacity: float = Field(default=0.80, ge=0, le=1)
    legend_title: str = "Accumulated (mm)"

    static_map_filename: str = "gfs_model_map.png"
    interactive_map_filename: str = "gfs_model_map.html"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="NOMADS_RENDER_",
    )

    @property
    def figsize(self) -> tuple[float, float]:
        return self.width_cm / 2.54, self.height_cm / 2.54
