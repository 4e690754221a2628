import logging

import importlib_metadata
from prodreport.conf.logging_config import set_logging
from prodreport.models import (
    event_data,
    report_data,
)
from prodreport.models.event_data import Event, DispatchRecord
from prodreport.models.report_data import MatchedRow, OperationReport

from prodreport.util import report_processing
from prodreport import adapters

logger = logging.getLogger(__name__)


def get_version() -> str:
    try:
        return importlib_metadata.version("prodreport")
    except importlib_metadata.PackageNotFoundError:
        logger.info(
            "Could not find version in package metadata. Using development version."
        )
    return "0.0.0.dev0"


VERSION = get_version()
