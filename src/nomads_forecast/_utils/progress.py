from contextlib import contextmanager

from dask.diagnostics import ProgressBar

from nomads_forecast.logging import get_logger
from nomads_forecast.settings.nomads_settings import NomadsSettings

logger = get_logger(__name__)


@contextmanager
def download_progress(
    settings: NomadsSettings,
    print_progress: bool | None = None,
    label: str | None = None,
):
    """Show a dask progress bar while lazy OPeNDAP arrays are loaded.

    The label is logged either way. No bar is shown when progress is
    disabled, or for loads shorter than
    ``settings.progress_minimum_seconds``.
    """
    if label:
        logger.info(label)
    if not settings.should_print_progress(print_progress):
        yield None
        return

    with ProgressBar(minimum=settings.progress_minimum_seconds) as progress_bar:
        yield progress_bar
