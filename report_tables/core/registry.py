"""Filter registry used to run filters on a table by name."""

from typing import TYPE_CHECKING, Any, Dict, Type, Union

if TYPE_CHECKING:
    from .base import BaseFilter

# Global registry mapping filter names to their classes
_FILTER_REGISTRY: Dict[str, Type["BaseFilter"]] = {}


def register_filter(name: str):
    """
    Decorator to register a filter class in the registry.

    Args:
        name: Unique name for the filter (e.g., 'sort')

    Returns:
        Decorator function

    Example:
        @register_filter("sort")
        class Sort(BaseFilter):
            ...
    """

    def decorator(cls: Type["BaseFilter"]) -> Type["BaseFilter"]:
        if name in _FILTER_REGISTRY:
            raise ValueError(
                f"Filter '{name}' is already registered to "
                f"{_FILTER_REGISTRY[name].__name__}"
            )
        _FILTER_REGISTRY[name] = cls
        cls._filter_name = name
        return cls

    return decorator


def get_filter_class(name: str) -> Type["BaseFilter"]:
    """
    Get a filter class by its registered name.

    Built-in filters are imported on first lookup so that
    ``table.filter("sort", ...)`` works without importing them explicitly.

    Args:
        name: The registered filter name

    Returns:
        The filter class

    Raises:
        KeyError: If no filter is registered with that name
    """
    from .. import sorting  # noqa: F401  registers built-in filters

    if name not in _FILTER_REGISTRY:
        available = list(_FILTER_REGISTRY.keys())
        raise KeyError(
            f"No filter registered with name '{name}'. "
            f"Available filters: {available}"
        )
    return _FILTER_REGISTRY[name]


def create_filter(
    filter_name: Union[str, Type["BaseFilter"]], *args: Any, **kwargs: Any
) -> "BaseFilter":
    """
    Instantiate a filter from its registered name or its class.

    Args:
        filter_name: Registered filter name (e.g. 'sort') or filter class
        *args: Positional arguments for the filter constructor
        **kwargs: Keyword arguments for the filter constructor

    Returns:
        The configured filter

    Raises:
        KeyError: If the name is not registered
        TypeError: If a class is given that is not a BaseFilter subclass
    """
    from .base import BaseFilter

    if isinstance(filter_name, str):
        filter_class = get_filter_class(filter_name)
    elif isinstance(filter_name, type) and issubclass(filter_name, BaseFilter):
        filter_class = filter_name
    else:
        raise TypeError(
            f"Expected a filter name or BaseFilter subclass, got {filter_name!r}"
        )
    return filter_class(*args, **kwargs)
