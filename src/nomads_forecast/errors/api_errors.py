from nomads_forecast.errors.nomads_error import NomadsError


class ProviderError(NomadsError):
    def __init__(
        self,
        message: str,
        details: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code

    def __str__(self):
        msg = super().__str__()
        if self.status_code:
            msg += f"\nStatus code: {self.status_code}"
        return msg


class ProviderUnavailableError(ProviderError):
    def __init__(self, url: str, details: str | None = None):
        super().__init__(f"Could not reach {url}", details=details)
        self.url = url


class NotFoundError(ProviderError):
    def __init__(self, url: str, status_code: int | None = 404):
        super().__init__(
            "Not found",
            details=f"The requested resource was not found: {url}",
            status_code=status_code,
        )
        self.url = url


class VariableNotAvailableError(ProviderError):
    def __init__(self, variable: str, model_run_id: str):
        super().__init__(
            f"Variable {variable} is not available in model run {model_run_id}."
        )
        self.variable = variable
        self.model_run_id = model_run_id
