from abc import ABC, abstractmethod
from typing import Any, Union
from enum import Enum

from .exceptions import ConfigurationError


class QueryVariant(Enum):
    """Multiplicity, temporality and requiredness of a query call"""
    QUERY = ("query", "one", "sync", False)
    QUERY_ALL = ("query_all", "all", "sync", False)
    GET = ("get", "one", "sync", True)
    GET_ALL = ("get_all", "all", "sync", True)
    FIND = ("find", "one", "async", True)
    FIND_ALL = ("find_all", "all", "async", True)

    def __init__(self, key: str, multiplicity: str, temporality: str, required: bool):
        self.key = key
        self.multiplicity = multiplicity
        self.temporality = temporality
        self.required = required

    @property
    def prefix(self) -> str:
        """Method prefix, e.g. ``get_all_by``"""
        return f"{self.key}_by"

    @property
    def is_async(self) -> bool:
        return self.temporality == "async"

    @classmethod
    def coerce(cls, value: Union["QueryVariant", str]) -> "QueryVariant":
        """Accept a variant, or a name such as ``get``, ``getAll`` or ``find_all``"""
        if isinstance(value, cls):
            return value
        key = "".join("_" + c.lower() if c.isupper() else c for c in str(value))
        for variant in cls:
            if variant.key == key:
                return variant
        raise ConfigurationError(f"Unknown query variant: {value!r}")


class Strategy(ABC):
    """Base class for strategies used within queries"""

    @abstractmethod
    def apply(self, *args, **kwargs) -> Any:
        """Apply the strategy"""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name"""
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """Strategy priority (lower = higher priority)"""
        pass
