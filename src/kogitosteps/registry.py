"""
Kogito Steps Registry

Binds scenario phrases to the handlers that run them. Phrases are regular
expressions; capture groups become positional handler arguments, and a step
table (when the scenario has one) is passed as the `table` keyword.
"""

from typing import Any, Callable, Dict, Generic, List, Pattern, Tuple, TypeVar
import logging
import re

from .exceptions import StepDefinitionError, StepNotFoundError

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')


class Registry(Generic[K, V]):
    """
    A generic ordered registry.
    """
    def __init__(self):
        self._registry: Dict[K, V] = {}
        logger.debug(f"Initialized {self.__class__.__name__}")

    def register(self, key: K, value: V):
        self._registry[key] = value
        logger.debug(f"Registered in {self.__class__.__name__}: {key} -> {getattr(value, '__name__', str(value))}")

    @property
    def registry(self) -> Dict[K, V]:
        return self._registry


StepHandler = Callable[..., Any]


class StepRegistry(Registry[str, Tuple[Pattern, StepHandler]]):
    """
    Registry of scenario steps keyed by phrase pattern.
    """
    def register(self, pattern: str, handler: StepHandler):
        if pattern in self.registry:
            raise StepDefinitionError(f"Step '{pattern}' is already registered.")
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise StepDefinitionError(f"Invalid step pattern '{pattern}': {e}")
        super().register(pattern, (compiled, handler))

    def step(self, pattern: str) -> Callable[[StepHandler], StepHandler]:
        """Decorator form of `register`."""
        def decorator(handler: StepHandler) -> StepHandler:
            self.register(pattern, handler)
            return handler
        return decorator

    @property
    def patterns(self) -> List[str]:
        return list(self.registry.keys())

    def match(self, text: str) -> Tuple[StepHandler, Tuple[str, ...]]:
        for compiled, handler in self.registry.values():
            found = compiled.match(text)
            if found:
                return handler, found.groups()
        raise StepNotFoundError(f"No step matches '{text}'.")

    def run(self, text: str, table: Any = None) -> Any:
        handler, args = self.match(text)
        logger.debug(f"Running step '{text}' with {getattr(handler, '__name__', handler)}{args}")
        if table is not None:
            return handler(*args, table=table)
        return handler(*args)
