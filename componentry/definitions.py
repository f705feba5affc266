"""
This module defines the descriptions of the dependencies of components.

A dependency definition tells which type a component needs, in which scope it
must be looked for (and created if missing), and where to write the instance
once resolved. Definitions can be chained through backups: when a definition
cannot be resolved, its backup is tried, then the backup of the backup, etc.
"""

from typing import Any, Callable, List, Optional, Union

from componentry.common import TypeId, class_name
from componentry.scopes import Scope

WriteBackSlot = Union[str, Callable[[Any], Any], None]


class DependencyDefinition:
    """
    Describes one dependency of a component.

    :param type_id: the class or the name of the desired type
    :param write_back: name of the attribute of the depending component to set,
    or a callable receiving the resolved instance; None if not needed
    :param backup: a definition to be used in case of resolution failure
    :param scope: where the dependency is looked for; subclasses fix it
    """

    __slots__ = ("_type_id", "_write_back", "_backup", "_scope")

    scope_tag: Any = None

    def __init__(
        self,
        type_id: Optional[TypeId],
        write_back: WriteBackSlot = None,
        backup: Optional["DependencyDefinition"] = None,
        *,
        scope: Any = None,
    ):
        self._type_id = type_id
        self._write_back = write_back
        self._backup = backup
        self._scope = scope if scope is not None else self.scope_tag

    @property
    def type_id(self) -> Optional[TypeId]:
        return self._type_id

    @property
    def scope(self) -> Any:
        return self._scope

    @property
    def backup(self) -> Optional["DependencyDefinition"]:
        return self._backup

    @property
    def write_back(self) -> WriteBackSlot:
        return self._write_back

    def __repr__(self):
        scope = self._scope.name if isinstance(self._scope, Scope) else self._scope
        return f"<{class_name(type(self))} {class_name(self._type_id)} ({scope})>"

    def candidates(self) -> List["DependencyDefinition"]:
        """
        Returns this definition followed by its chain of backups, in the order
        they must be tried.
        """
        chain = []
        definition: Optional[DependencyDefinition] = self
        while definition is not None:
            chain.append(definition)
            definition = definition.backup
        return chain

    def with_backup(self, backup: Optional["DependencyDefinition"]):
        """
        Returns a copy of this definition, using the given backup definition.
        """
        return type(self)(self._type_id, self._write_back, backup, scope=self._scope)

    def write(self, depender: Any, value: Any) -> bool:
        """
        Sets the value on the write-back slot of this definition. Returns False
        if the definition has no slot.
        """
        slot = self._write_back
        if slot is None:
            return False

        if isinstance(slot, str):
            setattr(depender, slot, value)
        else:
            slot(value)
        return True


class FellowDependency(DependencyDefinition):
    """Dependency looked for among the fellow components of the depender."""

    __slots__ = ()

    scope_tag = Scope.FELLOW


class RootDependency(DependencyDefinition):
    """Dependency looked for among the root components."""

    __slots__ = ()

    scope_tag = Scope.ROOT
