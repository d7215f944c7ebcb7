from datetime import datetime

from pydantic import BaseModel, ConfigDict

from nomads_forecast.forecast.conversions import run_start_to_datetime


class ModelRun(BaseModel):
    """A single run listed on the DODS server, e.g. ``gfs_0p50_12z``."""

    model_config = ConfigDict(frozen=True)

    model: str
    date: str
    name: str
    description: str = ""

    @property
    def run_id(self) -> str:
        return f"{self.date}/{self.name}"

    @property
    def init_time(self) -> datetime | None:
        return run_start_to_datetime(self.description)

    @property
    def caption(self) -> str:
        if self.description:
            return f"{self.name}: {self.description}"
        return self.name
