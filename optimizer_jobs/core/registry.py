"""
Named component registries.

Maps stable string keys to factories so jobs can receive optimizer and
program references as plain strings over the queue. Keys are validated when
registered; lookups of unknown keys fail with a configuration error.

Dependencies: optimizer_jobs.core.exceptions
System role: Late binding of optimizer/program strategies
"""

import logging
import threading
from typing import Any, Callable

from optimizer_jobs.core.exceptions import ConfigurationError, UnknownComponentError

logger = logging.getLogger(__name__)

Factory = Callable[..., Any]


class ComponentRegistry:
    """
    Registry of factories for one component kind.

    Usage:
        optimizers.register("bootstrap", BootstrapFewShot)

        @programs.register("math_qa")
        class MathQA: ...
    """

    def __init__(self, kind: str) -> None:
        """
        Initialize an empty registry.

        Args:
            kind: Component kind used in error messages (optimizer, program)
        """
        self.kind = kind
        self._factories: dict[str, Factory] = {}
        self._lock = threading.Lock()

    def register(
        self,
        name: str,
        factory: Factory | None = None,
        *,
        replace: bool = False,
    ):
        """
        Register a factory under ``name``.

        Can be called directly or used as a class/function decorator.

        Args:
            name: Stable key callers will reference
            factory: Class or callable producing the component
            replace: Allow overwriting an existing key

        Returns:
            The registered factory (or a decorator when factory is omitted)

        Raises:
            ConfigurationError: Invalid key, non-callable factory, or duplicate key
        """
        if factory is None:
            def decorator(target: Factory) -> Factory:
                return self.register(name, target, replace=replace)

            return decorator

        self._validate_name(name)
        if not callable(factory):
            raise ConfigurationError(
                f"{self.kind} factory for {name!r} is not callable",
                field=self.kind,
                details={"factory": repr(factory)},
            )

        with self._lock:
            if name in self._factories and not replace:
                raise ConfigurationError(
                    f"{self.kind} {name!r} is already registered",
                    field=self.kind,
                )
            self._factories[name] = factory

        logger.debug(f"{__name__}:register - Registered {self.kind} {name}")
        return factory

    def unregister(self, name: str) -> None:
        with self._lock:
            self._factories.pop(name, None)

    def resolve(self, name: str) -> Factory:
        """
        Look up the factory registered under ``name``.

        Raises:
            UnknownComponentError: ``name`` was never registered
        """
        with self._lock:
            factory = self._factories.get(name)
            known = list(self._factories)
        if factory is None:
            raise UnknownComponentError(self.kind, name, known)
        return factory

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._factories

    def _validate_name(self, name: Any) -> None:
        if not isinstance(name, str) or not name:
            raise ConfigurationError(
                f"{self.kind} key must be a non-empty string",
                field=self.kind,
                details={"name": repr(name)},
            )
        if name != name.strip():
            raise ConfigurationError(
                f"{self.kind} key {name!r} has surrounding whitespace",
                field=self.kind,
            )


optimizers = ComponentRegistry("optimizer")
programs = ComponentRegistry("program")
