from nomads_forecast.errors.api_errors import (
    NotFoundError,
    ProviderError,
    ProviderUnavailableError,
    VariableNotAvailableError,
)
from nomads_forecast.errors.model_errors import ModelDoesNotExistError
from nomads_forecast.errors.nomads_error import NomadsError
from nomads_forecast.errors.request_errors import (
    InvalidHorizonError,
    InvalidRequestError,
    OutOfDomainError,
)

__all__ = [
    "InvalidHorizonError",
    "InvalidRequestError",
    "ModelDoesNotExistError",
    "NomadsError",
    "NotFoundError",
    "OutOfDomainError",
    "ProviderError",
    "ProviderUnavailableError",
    "VariableNotAvailableError",
]
