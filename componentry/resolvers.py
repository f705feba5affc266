import logging
from typing import Any, List, Optional

from componentry.common import TypeId, class_name, is_unset_type_id
from componentry.definitions import DependencyDefinition
from componentry.errors import (
    SubScopeDependencyException,
    UnmetDependencyException,
)
from componentry.scopes import ComponentState, Scope

logger = logging.getLogger(__name__)


class ResolutionContext:
    """
    Keeps track of the type ids of the components being created, from the
    outermost to the innermost creation.
    """

    __slots__ = ("chain",)

    def __init__(self):
        self.chain: List[TypeId] = []

    def __len__(self):
        return len(self.chain)


class DependencyResolver:
    """
    Resolves the dependency definitions of components, looking for the
    dependencies in the fellow or root scopes and creating them if missing.
    """

    __slots__ = ("registry",)

    def __init__(self, registry):
        self.registry = registry

    def resolve(self, component) -> None:
        """
        Resolves all the dependency definitions of a component, in the order
        they are declared. Each chain of backups is consumed before moving to
        the next definition.
        """
        for definition in component.get_dependency_definitions():
            if definition is None:
                continue
            self.resolve_definition(component, definition)

        component.state = ComponentState.RESOLVED

    def resolve_definition(self, component, definition: DependencyDefinition) -> Any:
        """
        Resolves a definition, trying its backups in order when it fails, and
        writes the instance to the nearest write-back slot.

        The whole chain is checked before trying any candidate: a candidate in
        the sub scope raises SubScopeDependencyException even when a preceding
        candidate would resolve.
        """
        candidates = definition.candidates()

        for candidate in candidates:
            if candidate.scope is Scope.SUB:
                raise SubScopeDependencyException(component, candidate.type_id)

        slot: Optional[DependencyDefinition] = None

        for candidate in candidates:
            if candidate.write_back is not None:
                slot = candidate

            instance = self._resolve_candidate(component, candidate)

            if instance is None:
                continue

            if slot is not None:
                slot.write(component, instance)

            if candidate is not definition:
                logger.debug(
                    "Dependency %r of %s resolved by backup %r",
                    definition,
                    class_name(type(component)),
                    candidate,
                )
            return instance

        raise UnmetDependencyException(
            component, [candidate.type_id for candidate in candidates]
        )

    def _resolve_candidate(self, component, candidate: DependencyDefinition) -> Any:
        type_id = candidate.type_id

        if is_unset_type_id(type_id):
            logger.debug("Dependency %r has no type id", candidate)
            return None

        if not self.registry.can_create(type_id):
            logger.debug("Dependency %r cannot be created", candidate)
            return None

        scope = candidate.scope

        if scope is Scope.FELLOW:
            return component.get_component(type_id, Scope.FELLOW, True)

        if scope is Scope.ROOT:
            return self.registry.get_root_component(type_id, True)

        logger.debug("Dependency %r has an unrecognized scope", candidate)
        return None
