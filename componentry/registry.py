import logging
from inspect import Signature, _empty, isclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Tuple

from componentry.activators import (
    FactoryActivator,
    FactoryCallableType,
    FactoryWrapperNoArgs,
    FactoryWrapperRegistryArg,
    TypeActivator,
)
from componentry.common import (
    TypeId,
    class_name,
    is_constructible_without_args,
    is_unset_type_id,
)
from componentry.component import Component
from componentry.errors import (
    InvalidComponentTypeException,
    InvalidFactory,
    MissingTypeException,
    OverridingTypeException,
)
from componentry.resolvers import DependencyResolver, ResolutionContext
from componentry.scopes import ComponentState, Scope

logger = logging.getLogger(__name__)


class Registry:
    """
    Collection of the component types that can be created, by type id, and
    anchor of the root component, whose fellow components are the global
    components of the registry.
    """

    __slots__ = ("_map", "_removed", "_root", "_resolver", "context", "strict")

    def __init__(self, *, strict: bool = False):
        self._map: Dict[TypeId, Callable] = {}
        self._removed: Set[TypeId] = set()
        self._root = None
        self._resolver = DependencyResolver(self)
        self.context = ResolutionContext()
        self.strict = strict

    def __iter__(self) -> Iterator[Tuple[TypeId, Callable]]:
        yield from self._map.items()

    def __contains__(self, key):
        return key in self._map

    @property
    def resolver(self) -> DependencyResolver:
        return self._resolver

    @property
    def root(self) -> Component:
        """
        Returns the root component of this registry, creating it on first
        access.
        """
        if self._root is None:
            root = Component(self)
            root.state = ComponentState.READY
            self._root = root
            logger.debug("Created the root component of %r", self)
        return self._root

    def register(self, type_id: TypeId, concrete_type: Optional[type] = None):
        """
        Registers a component type in this registry.
        """
        if concrete_type is None:
            if not isclass(type_id):
                raise InvalidComponentTypeException(type_id)
            return self.add_type(type_id)
        return self.add_type(concrete_type, type_id)

    def add_type(self, concrete_type: type, type_id: Optional[TypeId] = None):
        """
        Registers a class that is instantiated without arguments.

        :param concrete_type: concrete class
        :param type_id: optional type id, by default the class itself
        :return: the registry itself
        """
        if not is_constructible_without_args(concrete_type):
            raise InvalidComponentTypeException(concrete_type)

        activator = TypeActivator(concrete_type)

        if is_unset_type_id(type_id):
            self._bind(concrete_type, activator)
        else:
            self._bind(type_id, activator)  # type: ignore
        return self

    def add_factory(
        self, factory: FactoryCallableType, type_id: Optional[TypeId] = None
    ):
        """
        Registers a factory function for a type id. If the type id is not
        specified, the return annotation of the factory is used.

        :param factory: function accepting no arguments, the registry, or the
        registry and the requested type id
        :param type_id: optional type id
        :return: the registry itself
        """
        if not callable(factory):
            raise InvalidFactory(type_id)

        sign = Signature.from_callable(factory)

        if is_unset_type_id(type_id):
            if sign.return_annotation is _empty:
                raise MissingTypeException()
            type_id = sign.return_annotation

        self._bind(
            type_id,  # type: ignore
            FactoryActivator(self._check_factory(factory, sign, type_id)),
        )
        return self

    @staticmethod
    def _check_factory(factory, signature, handled_type) -> Callable:
        params_len = len(signature.parameters)

        if params_len == 0:
            return FactoryWrapperNoArgs(factory)

        if params_len == 1:
            return FactoryWrapperRegistryArg(factory)

        if params_len == 2:
            return factory

        raise InvalidFactory(handled_type)

    def _bind(self, key: TypeId, value: Callable) -> None:
        if key in self._map:
            raise OverridingTypeException(key, value)
        self._map[key] = value
        self._removed.discard(key)

        if self.strict or isinstance(key, str):
            return

        key_name = class_name(key)

        if key_name in self._map:
            logger.debug("Type name %s is already bound, alias skipped", key_name)
            return

        self._map[key_name] = value
        self._removed.discard(key_name)

    def unregister(self, type_id: TypeId):
        """
        Removes a type id from this registry, together with the aliases bound
        to the same activator. Classes removed this way are no longer created
        implicitly, until they are registered again.
        """
        activator = self._map.pop(type_id, None)

        if activator is None:
            return self

        removed = [type_id]
        removed.extend(key for key, value in self._map.items() if value is activator)

        for key in removed[1:]:
            del self._map[key]

        self._removed.update(removed)
        return self

    def _get_activator(self, type_id: TypeId) -> Optional[Callable]:
        try:
            activator = self._map.get(type_id)
        except TypeError:
            # unhashable
            return None

        if activator is not None or self.strict or type_id in self._removed:
            return activator

        if is_constructible_without_args(type_id):
            return TypeActivator(type_id)  # type: ignore
        return None

    def can_create(self, type_id: TypeId) -> bool:
        """
        Returns a value indicating whether this registry can create components
        of the given type id.
        """
        if is_unset_type_id(type_id):
            return False
        return self._get_activator(type_id) is not None

    def instantiate(self, type_id: TypeId) -> Optional[Any]:
        """
        Creates a new instance of the given type id, without registering it nor
        resolving its dependencies. Returns None if the type id is unknown.
        """
        if is_unset_type_id(type_id):
            return None

        activator = self._get_activator(type_id)

        if activator is None:
            logger.debug("Type %s cannot be created", class_name(type_id))
            return None

        return activator(self, type_id)

    def add_root_component(self, component: Any) -> bool:
        return self.root.add_component(component, Scope.FELLOW)

    def create_root_component(self, type_id: TypeId) -> Optional[Any]:
        return self.root.create_component(type_id, Scope.FELLOW)

    def get_root_component(
        self, type_id: TypeId, create_if_missing: bool = False
    ) -> Optional[Any]:
        return self.root.get_component(type_id, Scope.FELLOW, create_if_missing)

    def get_root_components(self) -> List[Any]:
        return self.root.get_components(Scope.FELLOW)

    def get_root_components_of_type(self, type_id: TypeId) -> List[Any]:
        return self.root.get_components_of_type(type_id, Scope.FELLOW)

    def has_root_component_of_type(self, type_id: TypeId) -> bool:
        return self.root.has_component_of_type(type_id, Scope.FELLOW)

    def remove_root_component(self, component: Any) -> None:
        self.root.remove_component(component, Scope.FELLOW)

    def remove_root_components_of_type(self, type_id: TypeId) -> None:
        self.root.remove_components_of_type(type_id, Scope.FELLOW)
