class NomadsError(Exception):
    """Base class for all errors raised by nomads_forecast."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message}\n{self.details}"
        return self.message
