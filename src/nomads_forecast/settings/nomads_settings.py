from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nomads_forecast.settings.render_settings import RenderSettings


class NomadsSettings(BaseSettings):
    dods_base_url: str = Field(
        default="https://nomads.ncep.noaa.gov/dods",
        description="Base URL of the NOMADS GrADS-DODS server",
    )

    model: str = Field(
        default="gfs_0p50", description="DODS model family used by default"
    )

    variable: str = Field(
        default="acpcpsfc",
        description="Variable requested by default (accumulated precipitation)",
    )

    request_timeout: int = Field(
        default=60, description="Timeout in seconds for directory listing requests"
    )

    max_retries: int = Field(
        default=3, description="Number of retries for failed listing requests"
    )

    opendap_engine: str = Field(
        default="netcdf4", description="xarray engine used to open OPeNDAP URLs"
    )

    half_width_lon: int = Field(
        default=12, ge=0, description="Index window half-width along longitude"
    )

    half_width_lat: int = Field(
        default=14, ge=0, description="Index window half-width along latitude"
    )

    print_progress: bool = Field(
        default=True, description="Whether to print progress information"
    )

    progress_minimum_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Loads finishing sooner than this print no progress bar",
    )

    render: RenderSettings = Field(
        default_factory=RenderSettings,
        description="Settings for the static and interactive maps",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="NOMADS_",
    )

    @property
    def window_half_widths(self) -> tuple[int, int]:
        return self.half_width_lon, self.half_width_lat

    def should_print_progress(self, print_progress: bool | None = None) -> bool:
        """
        Determine if progress should be printed.

        Args:
            print_progress: Optional override for the print_progress setting

        Returns:
            Boolean indicating whether progress should be printed
        """
        if print_progress is None:
            return self.print_progress
        return print_progress
