from functools import partial
from typing import Any, Callable, Dict, Optional

from .core.config import QueryConfig, resolve_config
from .queries import QUERY_SETS


class BoundQueries:
    """
    Every query bound to one container.

    Example:
        form = within(soup.find("form"))
        form.get_by_label_text("Email")
    """

    def __init__(self, container: Any, config: Optional[QueryConfig] = None):
        self.container = container
        self.config = resolve_config(config)
        self._functions: Dict[str, Callable] = {}
        for query_set in QUERY_SETS:
            for name, function in query_set.functions().items():
                # a config passed at call time overrides the bound one
                self._functions[name] = partial(function, container, config=self.config)

    def __getattr__(self, name: str) -> Callable:
        try:
            return self.__dict__["_functions"][name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no query {name!r}") from None

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._functions))

    def __repr__(self) -> str:
        return f"BoundQueries({type(self.container).__name__})"


def get_queries_for_element(container: Any, config: Optional[QueryConfig] = None) -> BoundQueries:
    return BoundQueries(container, config)


within = get_queries_for_element
