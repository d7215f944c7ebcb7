from dataclasses import dataclass

from nomads_forecast.errors.model_errors import ModelDoesNotExistError
from nomads_forecast.forecast.models import Models
from nomads_forecast.types.geo import Lattice


@dataclass(frozen=True)
class ModelMetaInfo:
    display_name: str
    resolution: float
    sampling_interval_hours: int
    max_forecast_hours: int

    @property
    def lattice(self) -> Lattice:
        return Lattice.for_resolution(self.resolution)

    @property
    def num_steps(self) -> int:
        return self.max_forecast_hours // self.sampling_interval_hours + 1


_MODEL_META_INFO = {
    Models.GFS_0P25: ModelMetaInfo(
        display_name="GFS 0.25 deg",
        resolution=0.25,
        sampling_interval_hours=3,
        max_forecast_hours=384,
    ),
    Models.GFS_0P25_1HR: ModelMetaInfo(
        display_name="GFS 0.25 deg hourly",
        resolution=0.25,
        sampling_interval_hours=1,
        max_forecast_hours=120,
    ),
    # Runs every 6 hours (00z, 06z, 12z, 18z), 3-hourly steps out to 16 days
    Models.GFS_0P50: ModelMetaInfo(
        display_name="GFS 0.5 deg",
        resolution=0.5,
        sampling_interval_hours=3,
        max_forecast_hours=384,
    ),
    Models.GFS_1P00: ModelMetaInfo(
        display_name="GFS 1.0 deg",
        resolution=1.0,
        sampling_interval_hours=3,
        max_forecast_hours=384,
    ),
}


def to_model(model: Models | str) -> Models:
    if isinstance(model, Models):
        return model
    try:
        return Models(model)
    except ValueError as e:
        raise ModelDoesNotExistError(str(model)) from e


def get_model_meta_info(model: Models | str) -> ModelMetaInfo:
    return _MODEL_META_INFO[to_model(model)]
