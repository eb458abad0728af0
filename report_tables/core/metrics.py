"""Metric name to metric id mapping.

Archived report rows store their metrics under small integer ids to keep
them compact, while callers refer to metrics by name (e.g. 'nb_visits').
MetricMapping translates between the two and is passed explicitly to the
code that needs it.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

INDEX_NB_UNIQ_VISITORS = 1
INDEX_NB_VISITS = 2
INDEX_NB_ACTIONS = 3
INDEX_MAX_ACTIONS = 4
INDEX_SUM_VISIT_LENGTH = 5
INDEX_BOUNCE_COUNT = 6
INDEX_NB_VISITS_CONVERTED = 7
INDEX_NB_CONVERSIONS = 8
INDEX_REVENUE = 9
INDEX_GOALS = 10
INDEX_SUM_DAILY_NB_UNIQ_VISITORS = 11
INDEX_PAGE_NB_HITS = 12
INDEX_PAGE_SUM_TIME_SPENT = 13
INDEX_PAGE_EXIT_NB_UNIQ_VISITORS = 14
INDEX_PAGE_EXIT_NB_VISITS = 15
INDEX_PAGE_EXIT_SUM_DAILY_NB_UNIQ_VISITORS = 16
INDEX_PAGE_ENTRY_NB_UNIQ_VISITORS = 17
INDEX_PAGE_ENTRY_SUM_DAILY_NB_UNIQ_VISITORS = 18
INDEX_PAGE_ENTRY_NB_VISITS = 19
INDEX_PAGE_ENTRY_NB_ACTIONS = 20
INDEX_PAGE_ENTRY_SUM_VISIT_LENGTH = 21
INDEX_PAGE_ENTRY_BOUNCE_COUNT = 22

DEFAULT_METRIC_ID = INDEX_NB_VISITS

_STANDARD_METRICS: Dict[str, int] = {
    "nb_uniq_visitors": INDEX_NB_UNIQ_VISITORS,
    "nb_visits": INDEX_NB_VISITS,
    "nb_actions": INDEX_NB_ACTIONS,
    "max_actions": INDEX_MAX_ACTIONS,
    "sum_visit_length": INDEX_SUM_VISIT_LENGTH,
    "bounce_count": INDEX_BOUNCE_COUNT,
    "nb_visits_converted": INDEX_NB_VISITS_CONVERTED,
    "nb_conversions": INDEX_NB_CONVERSIONS,
    "revenue": INDEX_REVENUE,
    "goals": INDEX_GOALS,
    "sum_daily_nb_uniq_visitors": INDEX_SUM_DAILY_NB_UNIQ_VISITORS,
    "nb_hits": INDEX_PAGE_NB_HITS,
    "sum_time_spent": INDEX_PAGE_SUM_TIME_SPENT,
    "exit_nb_uniq_visitors": INDEX_PAGE_EXIT_NB_UNIQ_VISITORS,
    "exit_nb_visits": INDEX_PAGE_EXIT_NB_VISITS,
    "sum_daily_exit_nb_uniq_visitors": INDEX_PAGE_EXIT_SUM_DAILY_NB_UNIQ_VISITORS,
    "entry_nb_uniq_visitors": INDEX_PAGE_ENTRY_NB_UNIQ_VISITORS,
    "sum_daily_entry_nb_uniq_visitors": INDEX_PAGE_ENTRY_SUM_DAILY_NB_UNIQ_VISITORS,
    "entry_nb_visits": INDEX_PAGE_ENTRY_NB_VISITS,
    "entry_nb_actions": INDEX_PAGE_ENTRY_NB_ACTIONS,
    "entry_sum_visit_length": INDEX_PAGE_ENTRY_SUM_VISIT_LENGTH,
    "entry_bounce_count": INDEX_PAGE_ENTRY_BOUNCE_COUNT,
}


class MetricMapping:
    """
    Immutable lookup between metric names and metric ids.

    Example:
        mapping = MetricMapping.default()
        mapping.get_id("nb_visits")  # 2
        mapping.get_name(2)  # 'nb_visits'

    Attributes:
        name_to_id: Read-only view of name -> id
        id_to_name: Read-only view of id -> name
        default_metric_id: Metric id used when a requested sort column is
            not present on a table
    """

    __slots__ = ("_name_to_id", "_id_to_name", "_default_metric_id")

    def __init__(
        self,
        name_to_id: Mapping[str, int],
        default_metric_id: int = DEFAULT_METRIC_ID,
    ):
        """
        Initialize the mapping.

        Args:
            name_to_id: Mapping of metric names to metric ids
            default_metric_id: Fallback metric id for sorting

        Raises:
            ValueError: If two names share the same id
        """
        id_to_name: Dict[int, str] = {}
        for name, metric_id in name_to_id.items():
            if metric_id in id_to_name:
                raise ValueError(
                    f"Metric id {metric_id} is mapped to both "
                    f"'{id_to_name[metric_id]}' and '{name}'"
                )
            id_to_name[metric_id] = name

        object.__setattr__(self, "_name_to_id", MappingProxyType(dict(name_to_id)))
        object.__setattr__(self, "_id_to_name", MappingProxyType(id_to_name))
        object.__setattr__(self, "_default_metric_id", default_metric_id)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def default(cls) -> "MetricMapping":
        """Return the standard analytics metric mapping."""
        return _DEFAULT_MAPPING

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "MetricMapping":
        """
        Build a mapping from a config dict.

        The dict has the shape::

            {"metrics": {"nb_visits": 2, ...}, "default_metric": "nb_visits"}

        ``default_metric`` may be a metric name or id and is optional.

        Args:
            config: Mapping configuration

        Returns:
            New MetricMapping

        Raises:
            ValueError: If 'metrics' is missing or default_metric is unknown
        """
        if "metrics" not in config:
            raise ValueError(
                f"Metric mapping config requires a 'metrics' object. "
                f"Found keys: {list(config.keys())}"
            )
        metrics = {str(name): int(metric_id) for name, metric_id in config["metrics"].items()}

        default_metric = config.get("default_metric", DEFAULT_METRIC_ID)
        if isinstance(default_metric, str):
            if default_metric not in metrics:
                raise ValueError(
                    f"Default metric '{default_metric}' is not a known metric. "
                    f"Available metrics: {list(metrics.keys())}"
                )
            default_metric = metrics[default_metric]

        return cls(metrics, default_metric_id=int(default_metric))

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "MetricMapping":
        """
        Load a mapping from a JSON file (see from_dict for the format).

        Args:
            path: Path to the JSON file

        Returns:
            New MetricMapping
        """
        with open(path) as f:
            config = json.load(f)
        return cls.from_dict(config)

    @property
    def name_to_id(self) -> Mapping[str, int]:
        return self._name_to_id

    @property
    def id_to_name(self) -> Mapping[int, str]:
        return self._id_to_name

    @property
    def default_metric_id(self) -> int:
        return self._default_metric_id

    def has_name(self, name: Any) -> bool:
        """Check if name is a known metric name."""
        return isinstance(name, str) and name in self._name_to_id

    def get_id(self, name: str) -> Optional[int]:
        """Return the id for a metric name, or None if unknown."""
        return self._name_to_id.get(name)

    def get_name(self, metric_id: int) -> Optional[str]:
        """Return the name for a metric id, or None if unknown."""
        return self._id_to_name.get(metric_id)

    def __contains__(self, name: Any) -> bool:
        return self.has_name(name)

    def __len__(self) -> int:
        return len(self._name_to_id)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"metrics={len(self._name_to_id)}, "
            f"default_metric_id={self._default_metric_id})"
        )


_DEFAULT_MAPPING = MetricMapping(_STANDARD_METRICS)
