import logging
from typing import TYPE_CHECKING, Any, List, Optional

from componentry.abc import ComponentProtocol
from componentry.buckets import ComponentBucket, FellowContainer
from componentry.common import TypeId, class_name
from componentry.definitions import DependencyDefinition
from componentry.errors import (
    CircularDependencyException,
    ComponentAlreadyOwnedException,
    UnboundComponentException,
)
from componentry.scopes import ComponentState, Scope

if TYPE_CHECKING:  # pragma: no cover
    from componentry.registry import Registry

logger = logging.getLogger(__name__)


class Component(ComponentProtocol):
    """
    Base class for components: objects that own sub components, share fellow
    components with their siblings, and get their dependencies resolved when
    created through `create_component`.

    Subclasses declare their dependencies overriding
    `get_dependency_definitions`, and must call `super().__init__()` if they
    define their own constructor.
    """

    def __init__(self, registry: Optional["Registry"] = None):
        self._registry = registry
        self._sub_components = ComponentBucket()
        self._fellows: Optional[FellowContainer] = None
        self.owner: Optional["Component"] = None
        self.state = ComponentState.CONSTRUCTED

    @property
    def registry(self) -> "Registry":
        if self._registry is None:
            raise UnboundComponentException(self)
        return self._registry

    @property
    def is_bound(self) -> bool:
        return self._registry is not None

    @property
    def fellows(self) -> FellowContainer:
        """
        Returns the container shared with the fellow components, creating it on
        first access.
        """
        if self._fellows is None:
            self._fellows = FellowContainer()
        return self._fellows

    def get_dependency_definitions(self) -> List[DependencyDefinition]:
        """
        Returns the definitions of the dependencies of this component.
        Subclasses extend the definitions of their base class:

            def get_dependency_definitions(self):
                definitions = super().get_dependency_definitions()
                definitions.append(FellowDependency(Engine, "engine"))
                return definitions
        """
        return []

    def on_ready(self) -> None:
        """Called once the dependencies of this component are resolved."""

    def on_removed(self) -> None:
        """Called after this component is removed from a scope."""

    def _get_bucket(self, scope: Scope) -> Optional[ComponentBucket]:
        if scope is Scope.SUB:
            return self._sub_components
        if scope is Scope.FELLOW:
            return self.fellows
        if scope is Scope.ROOT:
            return self.registry.root.fellows
        return None

    def add_component(self, component: Any, scope: Scope = Scope.SUB) -> bool:
        return self._add(component, scope)

    def _add(self, component: Any, scope: Scope, tag: Optional[TypeId] = None) -> bool:
        if scope is Scope.ROOT:
            return self.registry.root._add(component, Scope.FELLOW, tag)

        if scope is Scope.SUB:
            if isinstance(component, Component):
                component._adopt(self)
            self._sub_components.append(component, tag)
            return True

        if scope is Scope.FELLOW:
            fellows = self.fellows
            if isinstance(component, Component):
                component._join(fellows, self._registry)
            fellows.append(component, tag)
            return True

        logger.debug(
            "Unrecognized scope %r, %s was not added", scope, class_name(type(component))
        )
        return False

    def _adopt(self, owner: "Component") -> None:
        if self.owner is not None and self.owner is not owner:
            raise ComponentAlreadyOwnedException(self, self.owner)
        self.owner = owner
        if self._registry is None:
            self._registry = owner._registry

    def _join(self, fellows: FellowContainer, registry: Optional["Registry"]) -> None:
        self._fellows = fellows
        if self._registry is None:
            self._registry = registry

    def create_component(self, type_id: TypeId, scope: Scope = Scope.SUB) -> Optional[Any]:
        """
        Creates a component of the given type id, adds it in the given scope,
        then resolves its dependencies. Returns None if the type id cannot be
        created, or the scope is not recognized.
        """
        if not isinstance(scope, Scope):
            logger.debug("Unrecognized scope %r, %s not created", scope, type_id)
            return None

        registry = self.registry
        chain = registry.context.chain
        depth = len(chain)
        chain.append(type_id)
        try:
            component = registry.instantiate(type_id)

            if component is None:
                return None

            # NB: the component must be registered before its dependencies are
            # resolved, so that fellows depending on it can find it
            self._add(component, scope, type_id)

            if isinstance(component, Component):
                registry.resolver.resolve(component)
                component._ready()

            logger.debug(
                "Created %s in scope %s of %s",
                class_name(type_id),
                scope.name,
                class_name(type(self)),
            )
            return component
        except RecursionError:
            raise CircularDependencyException(chain)
        finally:
            del chain[depth:]

    def _ready(self) -> None:
        self.state = ComponentState.READY
        self.on_ready()

    def get_component(
        self,
        type_id: TypeId,
        scope: Scope = Scope.SUB,
        create_if_missing: bool = False,
    ) -> Optional[Any]:
        bucket = self._get_bucket(scope)

        if bucket is None:
            return None

        component = bucket.first(type_id)

        if component is None and create_if_missing:
            return self.create_component(type_id, scope)
        return component

    def get_components(self, scope: Scope = Scope.SUB) -> List[Any]:
        bucket = self._get_bucket(scope)
        return bucket.all() if bucket is not None else []

    def get_components_of_type(
        self, type_id: TypeId, scope: Scope = Scope.SUB
    ) -> List[Any]:
        bucket = self._get_bucket(scope)
        return bucket.of_type(type_id) if bucket is not None else []

    def has_component_of_type(self, type_id: TypeId, scope: Scope = Scope.SUB) -> bool:
        bucket = self._get_bucket(scope)
        return bucket.contains_type(type_id) if bucket is not None else False

    def remove_component(self, component: Any, scope: Scope = Scope.SUB) -> None:
        bucket = self._get_bucket(scope)

        if bucket is not None and bucket.remove(component):
            self._detach(component, bucket)

    def remove_components_of_type(
        self, type_id: TypeId, scope: Scope = Scope.SUB
    ) -> None:
        bucket = self._get_bucket(scope)

        if bucket is None:
            return

        for component in bucket.remove_type(type_id):
            self._detach(component, bucket)

    @staticmethod
    def _detach(component: Any, bucket: ComponentBucket) -> None:
        if isinstance(component, Component):
            component._leave(bucket)

    def _leave(self, bucket: ComponentBucket) -> None:
        # a component added more than once stays attached to its other entries
        if self not in bucket:
            if self.owner is not None and self.owner._sub_components is bucket:
                self.owner = None

            if self._fellows is bucket:
                self._fellows = None

        self.state = ComponentState.REMOVED
        self.on_removed()
