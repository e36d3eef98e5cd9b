from __future__ import annotations

__version__ = "1.4.2"
__name__ = "zocal"

import os
from pathlib import Path

DEFAULT_PATH = Path(os.path.realpath(__file__)).parents[1]


from chromatrace import LoggingConfig, LoggingSettings

from zocal.settings import CALENDAR_SETTINGS
from zocal.utils.basic_logger import loguru_logger


logging_config = LoggingConfig(
    settings=LoggingSettings(
        application_level=CALENDAR_SETTINGS.log_level,
        enable_tracing=True,
        ignore_nan_trace=True,
        log_level=CALENDAR_SETTINGS.log_level,
        file_path=CALENDAR_SETTINGS.log_file_path,
        enable_file_logging=CALENDAR_SETTINGS.enable_file_logging,
        max_bytes=10 * 1024 * 1024,
        backup_count=5,
    )
)
LOGGER = logging_config.get_logger(__name__)


__all__ = ["__version__", "__name__", "loguru_logger", "DEFAULT_PATH", "LOGGER"]
