from nomads_forecast.errors.nomads_error import NomadsError


class ModelDoesNotExistError(NomadsError):
    def __init__(self, model_name: str):
        from nomads_forecast.forecast.models import Models

        available_models = "\n".join(m.value for m in Models)
        super().__init__(
            f"Model {model_name} does not exist.\n"
            "Consider using `from nomads_forecast.forecast.models import Models`.\n"
            f"Available models:\n{available_models}"
        )
