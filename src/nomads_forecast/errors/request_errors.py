from nomads_forecast.errors.nomads_error import NomadsError


class OutOfDomainError(NomadsError):
    def __init__(self, lat: float, lon: float | None = None):
        super().__init__(
            f"Coordinate (lat={lat}, lon={lon}) is outside the lattice domain.",
            details="Latitude must be a finite value between -90 and 90.",
        )
        self.lat = lat
        self.lon = lon


class InvalidHorizonError(NomadsError):
    def __init__(self, message: str, details: str | None = None):
        super().__init__(message, details=details)


class InvalidRequestError(NomadsError):
    def __init__(self, message: str, details: str | None = None):
        super().__init__(message, details=details)
