"""Minimal entity-component-system used by the game.

Entities are integer ids, components are plain objects keyed by their type,
and systems are callables taking the :class:`World`. A :class:`Schedule`
runs startup systems once and frame systems every frame.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Type

logger = logging.getLogger(__name__)

System = Callable[["World"], None]


class QueryError(LookupError):
    """Raised when an expected singleton entity or resource is missing."""


class World:
    """Entity store plus global resources."""

    def __init__(self):
        self.entities: Dict[int, Dict[Type, Any]] = {}
        self.resources: Dict[Type, Any] = {}
        self.next_entity_id = 0

    def spawn(self, *components) -> int:
        """Create an entity holding the given components and return its id."""
        entity = self.next_entity_id
        self.next_entity_id += 1
        self.entities[entity] = {}
        for component in components:
            self.insert(entity, component)
        return entity

    def insert(self, entity: int, component: Any) -> None:
        self.entities[entity][type(component)] = component

    def despawn(self, entity: int) -> None:
        self.entities.pop(entity, None)

    def get(self, entity: int, component_type: Type) -> Any:
        return self.entities[entity].get(component_type)

    def query(self, *types: Type) -> Iterator[Tuple[Any, ...]]:
        """Yield component tuples for every entity holding all ``types``.

        Lookup is by exact type, so a ``MovementTimer`` does not match a
        query for its ``Timer`` base class.
        """
        for components in list(self.entities.values()):
            if all(t in components for t in types):
                yield tuple(components[t] for t in types)

    def single(self, *types: Type):
        """Return the only match for ``types``; raise QueryError otherwise."""
        matches = list(self.query(*types))
        names = ", ".join(t.__name__ for t in types)
        if not matches:
            raise QueryError(f"no entity with ({names})")
        if len(matches) > 1:
            raise QueryError(f"{len(matches)} entities with ({names}), expected one")
        return matches[0] if len(types) > 1 else matches[0][0]

    def count(self, *types: Type) -> int:
        return sum(1 for _ in self.query(*types))

    def insert_resource(self, resource: Any) -> None:
        self.resources[type(resource)] = resource

    def resource(self, resource_type: Type):
        try:
            return self.resources[resource_type]
        except KeyError:
            raise QueryError(f"missing resource {resource_type.__name__}") from None


class Schedule:
    """Ordered system lists for startup, update and post-update stages."""

    def __init__(self):
        self.startup_systems: List[System] = []
        self.update_systems: List[System] = []
        self.post_update_systems: List[System] = []
        # (system, other) pairs: system must run before other
        self.ordering: List[Tuple[System, System]] = []

    def add_startup_system(self, system: System) -> "Schedule":
        self.startup_systems.append(system)
        return self

    def add_system(self, system: System, before: Optional[System] = None) -> "Schedule":
        """Add a frame system, optionally placing it ahead of ``before``.

        If ``before`` has not been registered yet the system is appended and
        the constraint is checked again when ``before`` is added.
        """
        self.update_systems.append(system)
        if before is not None:
            self.ordering.append((system, before))
        self._apply_ordering()
        return self

    def add_post_update_system(self, system: System) -> "Schedule":
        self.post_update_systems.append(system)
        return self

    def _apply_ordering(self):
        for system, before in self.ordering:
            if before not in self.update_systems:
                continue
            i = self.update_systems.index(system)
            j = self.update_systems.index(before)
            if i > j:
                self.update_systems.pop(i)
                self.update_systems.insert(j, system)

    def startup(self, world: World) -> None:
        for system in self.startup_systems:
            logger.debug("startup system %s", system.__name__)
            system(world)

    def run(self, world: World) -> None:
        """Run one frame: update systems, then post-update systems."""
        for system in self.update_systems:
            system(world)
        for system in self.post_update_systems:
            system(world)
