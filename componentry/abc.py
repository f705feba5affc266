"""
This module defines base types for component composition.
"""

from typing import Any, List, Optional, Protocol

from componentry.common import TypeId
from componentry.scopes import Scope


class ComponentProtocol(Protocol):
    """
    Generic interface of objects that hold components in the sub, fellow and
    root scopes, and can create components by type id.
    """

    def add_component(self, component: Any, scope: Scope = Scope.SUB) -> bool:
        """Adds an already created component in the given scope."""

    def create_component(  # type: ignore
        self, type_id: TypeId, scope: Scope = Scope.SUB
    ) -> Optional[Any]:
        """
        Creates a component by type id in the given scope, and resolves its
        dependencies.
        """

    def get_component(
        self,
        type_id: TypeId,
        scope: Scope = Scope.SUB,
        create_if_missing: bool = False,
    ) -> Optional[Any]:
        """Gets the first component of the given type id in the given scope."""

    def get_components(self, scope: Scope = Scope.SUB) -> List[Any]:  # type: ignore
        """Gets the components of the given scope."""

    def get_components_of_type(  # type: ignore
        self, type_id: TypeId, scope: Scope = Scope.SUB
    ) -> List[Any]:
        """Gets the components of the given type id in the given scope."""

    def has_component_of_type(  # type: ignore
        self, type_id: TypeId, scope: Scope = Scope.SUB
    ) -> bool:
        """
        Returns a value indicating whether there is at least one component of
        the given type id in the given scope.
        """

    def remove_component(self, component: Any, scope: Scope = Scope.SUB) -> None:
        """Removes the given component instance from the given scope."""

    def remove_components_of_type(
        self, type_id: TypeId, scope: Scope = Scope.SUB
    ) -> None:
        """Removes all the components of the given type id from the given scope."""
