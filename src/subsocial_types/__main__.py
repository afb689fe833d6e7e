"""
Main entry point for subsocial-types.
Usage: python -m subsocial_types (run from the node repository's scripts/ folder)
"""

import sys
import logging

from . import __version__
from .aggregation import AggregationError, TypeAggregationService
from .settings import AppSettings
from .utils.logging_config import setup_logging


def main() -> int:
    """Aggregate pallet types into ../types.json."""
    logger = logging.getLogger(f"{__name__}.main")
    try:
        settings = AppSettings()
        setup_logging(settings)

        logger.info(f"Starting subsocial-types {__version__}")

        # Validate settings before touching any file
        validation = settings.validate()
        if validation.warnings:
            logger.warning("Configuration warnings detected:")
            for warning in validation.warnings:
                logger.warning(f"  {warning}")

        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1

        service = TypeAggregationService(settings)
        service.aggregate()

        logger.info("Type aggregation completed")
        return 0

    except AggregationError as e:
        logger.error(f"Type aggregation failed: {e}")
        return 1

    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
