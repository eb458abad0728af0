"""Base class for table filters."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .table import DataTable


class BaseFilter(ABC):
    """
    Abstract base class for all table filters.

    A filter is configured through its constructor and applied to a table
    with filter(). Filters mutate the table in place and return nothing.

    Attributes:
        _filter_name: Class-level registered filter name
    """

    _filter_name: str = ""

    @abstractmethod
    def filter(self, table: "DataTable") -> None:
        """
        Apply the filter to a table.

        Args:
            table: The table to modify in place
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self._filter_name}')"
