"""Dependency injection container.

Binds the network repository port to its CSV adapter and builds the
planner service from configuration. Tests rebind the repository to an
in-memory network through ``register``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Factories keyed by port type, with optional per-container singletons.

    Usage:
        container = Container.create_default(config)
        container.register(NetworkRepositoryPort, lambda: in_memory_repository)
        planner = container.resolve(NetworkPlannerService)

    Attributes:
        config: Application configuration the default bindings read
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        A cached instance of a previous binding is dropped, so the next
        ``resolve`` goes through the new factory.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type not in self._singleton_types:
                return self._factories[port_type]()
            if port_type not in self._singletons:
                self._singletons[port_type] = self._factories[port_type]()
            return self._singletons[port_type]

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Wire the CSV repository and the planner service for ``config``."""
        from .adapters.network import CSVNetworkRepository
        from .ports.graph import NetworkRepositoryPort
        from .services import NetworkPlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NetworkRepositoryPort,
            lambda: CSVNetworkRepository(config.network),
        )

        def create_planner() -> NetworkPlannerService:
            return NetworkPlannerService(
                repository=container.resolve(NetworkRepositoryPort),
                routing_algorithm=config.routing.algorithm,
                mst_algorithm=config.renovation.algorithm,
                cost_per_km_by_tracks=tuple(config.renovation.cost_per_km_by_tracks),
            )

        container.register(NetworkPlannerService, create_planner)

        return container

