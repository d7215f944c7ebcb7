import re
from typing import TYPE_CHECKING

import requests  # type: ignore[import-untyped]
from requests.adapters import HTTPAdapter  # type: ignore[import-untyped]
from urllib3.util.retry import Retry

from nomads_forecast.errors.api_errors import (
    NotFoundError,
    ProviderError,
    ProviderUnavailableError,
)
from nomads_forecast.forecast._types.model_run import ModelRun
from nomads_forecast.logging import get_logger

if TYPE_CHECKING:
    from nomads_forecast.settings.nomads_settings import NomadsSettings

logger = get_logger(__name__)

_MODEL_HREF_RE = re.compile(r'href="[^"]*?/dods/([A-Za-z0-9_]+)/?"')
_RUN_LINE_RE = re.compile(r"<b>\s*([A-Za-z0-9_]+)\s*:\s*</b>(?:&nbsp;|\s)*([^<\n]*)")


class DODSDirectoryAPI:
    """Reads the HTML directory listings of a GrADS-DODS server.

    The server lists model families at ``{base}/``, one date directory per day
    at ``{base}/{model}`` and the runs of a day at ``{base}/{model}/{date}``.
    """

    _RETRY_STATUS = (500, 502, 503, 504)

    def __init__(self, settings: "NomadsSettings"):
        self._settings = settings
        self._session = requests.Session()
        retries = Retry(
            total=settings.max_retries,
            backoff_factor=0.5,
            status_forcelist=self._RETRY_STATUS,
            allowed_methods=("GET",),
        )
        self._session.mount("https://", HTTPAdapter(max_retries=retries))
        self._session.mount("http://", HTTPAdapter(max_retries=retries))

    def close(self) -> None:
        self._session.close()

    def _get_url(self, *parts: str) -> str:
        base = self._settings.dods_base_url.rstrip("/")
        return "/".join([base, *(p.strip("/") for p in parts)])

    def _validate_response_status(
        self, url: str, response: requests.Response
    ) -> None:
        if response.ok:
            return

        if response.status_code == 404:
            raise NotFoundError(url, response.status_code)

        raise ProviderError(
            f"Unexpected status code: {response.status_code}",
            details=response.text,
            status_code=response.status_code,
        )

    def get(self, *parts: str) -> str:
        url = self._get_url(*parts)
        logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, timeout=self._settings.request_timeout)
        except requests.RequestException as e:
            raise ProviderUnavailableError(url, details=str(e)) from e
        self._validate_response_status(url, response)
        return response.text

    def get_available_models(self) -> list[str]:
        html = self.get()
        models = list(dict.fromkeys(_MODEL_HREF_RE.findall(html)))
        logger.info(f"Found {len(models)} models on the DODS server")
        return models

    def get_model_dates(self, model: str) -> list[str]:
        """Date directories of ``model`` in ascending order, e.g. gfs20241117."""
        html = self.get(model)
        pattern = re.compile(
            rf'href="[^"]*?/dods/{re.escape(model)}/([A-Za-z_]*\d{{8}})/?"'
        )
        dates = sorted(set(pattern.findall(html)), key=lambda d: d[-8:])
        if not dates:
            raise NotFoundError(self._get_url(model), status_code=None)
        return dates

    def get_model_runs(self, model: str, date: str) -> list[ModelRun]:
        """Runs published for one date directory, in listing order."""
        html = self.get(model, date)
        runs = [
            ModelRun(
                model=model,
                date=date,
                name=name,
                description=description.replace("&nbsp;", " ").strip(),
            )
            for name, description in _RUN_LINE_RE.findall(html)
        ]
        if not runs:
            # Older listings only link the .info pages of each run
            info_re = re.compile(
                rf"/dods/{re.escape(model)}/{re.escape(date)}/([A-Za-z0-9_]+)\.info"
            )
            names = dict.fromkeys(info_re.findall(html))
            runs = [ModelRun(model=model, date=date, name=name) for name in names]
        if not runs:
            raise NotFoundError(self._get_url(model, date), status_code=None)
        return runs
