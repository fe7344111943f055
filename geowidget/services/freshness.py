"""
Database freshness evaluation
"""

import logging
from datetime import datetime, timezone
from typing import Iterable, Union

from geowidget.core.defaults import (
    DEFAULT_STALE_THRESHOLD_SECONDS, HEALTHY_REASON, STALE_REASON, BUILD_DATE_FORMAT
)
from geowidget.core.models import SourceMetadata, HealthStatus

logger = logging.getLogger(__name__)

Timestamp = Union[int, float, datetime]

class FreshnessEvaluator:
    """Decides whether data sources are too old to be trusted"""

    def __init__(self, stale_threshold_seconds: int = DEFAULT_STALE_THRESHOLD_SECONDS):
        """
        Initialize the evaluator

        Args:
            stale_threshold_seconds: Age at which a source counts as stale
        """
        self.stale_threshold_seconds = stale_threshold_seconds

    def evaluate(self, sources: Iterable[SourceMetadata], now: Timestamp) -> HealthStatus:
        """
        Check sources in order and report the first stale one

        Evaluation stops at the first stale source, so sources after it are
        never examined.

        Args:
            sources: Source metadata in check order
            now: Current time as epoch seconds or a datetime (naive means UTC)

        Returns:
            HealthStatus, healthy unless a source's age reached the threshold
        """
        if isinstance(now, datetime):
            if now.tzinfo is None:
                now = now.replace(tzinfo=timezone.utc)
            now_seconds = now.timestamp()
        else:
            now_seconds = now
        status = HealthStatus(healthy=True, reason=HEALTHY_REASON)

        for source in sources:
            age = now_seconds - source.build_epoch_seconds
            logger.debug(f"{source.source_label} age: {age} seconds")
            if age >= self.stale_threshold_seconds:
                status.healthy = False
                status.reason = STALE_REASON.format(
                    label=source.source_label,
                    build_date=source.build_datetime.strftime(BUILD_DATE_FORMAT),
                )
                break

        return status
