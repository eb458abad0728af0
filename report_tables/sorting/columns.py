"""Resolution of the column a table is actually sorted by."""

import logging
from typing import Hashable, Optional

from ..core.metrics import MetricMapping
from ..core.table import Row
from .values import has_value

logger = logging.getLogger(__name__)


class ColumnResolver:
    """
    Maps a requested sort column to a column present in a table.

    Archived tables store metrics under integer ids and not every report
    has every metric, so the requested column is resolved against a sample
    row in this order:

    1. The requested column itself.
    2. The metric id of the requested column, if it is a known metric name.
    3. The mapping's default metric (number of visits).
    4. The requested column unchanged. Every row then sorts as missing.

    Attributes:
        _mapping: Metric name to id mapping
    """

    def __init__(self, mapping: Optional[MetricMapping] = None):
        """
        Initialize the resolver.

        Args:
            mapping: Metric name to id mapping. Uses MetricMapping.default()
                if not provided.
        """
        self._mapping = mapping if mapping is not None else MetricMapping.default()

    @property
    def mapping(self) -> MetricMapping:
        return self._mapping

    def resolve(self, requested: Hashable, row: Optional[Row]) -> Hashable:
        """
        Resolve the sort column for a table.

        Args:
            requested: Column requested by the caller (name or metric id)
            row: First row of the table, or None for an empty table

        Returns:
            The column key to sort by
        """
        if row is None:
            return requested

        if has_value(row, requested):
            return requested

        # e.g. sorting by 'nb_visits' on an archived table keyed by INDEX_NB_VISITS
        if self._mapping.has_name(requested):
            metric_id = self._mapping.get_id(requested)
            if has_value(row, metric_id):
                logger.debug("Sort column %r resolved to metric id %r", requested, metric_id)
                return metric_id

        # e.g. previously sorted by revenue_per_visit, but this table has no such column
        default_id = self._mapping.default_metric_id
        if has_value(row, default_id):
            logger.debug(
                "Sort column %r not found, falling back to default metric %r",
                requested,
                default_id,
            )
            return default_id

        logger.debug("Sort column %r not found and no fallback available", requested)
        return requested
