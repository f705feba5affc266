from collections import defaultdict
from typing import Any, DefaultDict, Iterator, List, Optional, Tuple

from componentry.common import TypeId, class_name, type_ids_of


class BucketEntry:
    __slots__ = ("component", "type_ids")

    def __init__(self, component: Any, type_ids: Tuple[TypeId, ...]):
        self.component = component
        self.type_ids = type_ids


class ComponentBucket:
    """
    Ordered collection of components, indexed by the type ids they match.
    Membership is by identity: two equal values are two distinct members.
    """

    __slots__ = ("_entries", "_index")

    def __init__(self):
        self._entries: List[BucketEntry] = []
        self._index: DefaultDict[TypeId, List[BucketEntry]] = defaultdict(list)

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[Any]:
        for entry in list(self._entries):
            yield entry.component

    def __contains__(self, component):
        return self._find(component) is not None

    def __repr__(self):
        return (
            f"<{class_name(type(self))} "
            f"[{', '.join(class_name(type(item)) for item in self)}]>"
        )

    def append(self, component: Any, tag: Optional[TypeId] = None) -> None:
        entry = BucketEntry(component, type_ids_of(component, tag))
        self._entries.append(entry)
        for type_id in entry.type_ids:
            self._index[type_id].append(entry)

    def first(self, type_id: TypeId) -> Optional[Any]:
        entries = self._index.get(type_id)
        if entries:
            return entries[0].component
        return None

    def all(self) -> List[Any]:
        return [entry.component for entry in self._entries]

    def of_type(self, type_id: TypeId) -> List[Any]:
        return [entry.component for entry in self._index.get(type_id, ())]

    def contains_type(self, type_id: TypeId) -> bool:
        return bool(self._index.get(type_id))

    def remove(self, component: Any) -> bool:
        """
        Unlinks the first member that is the given component. Returns False if
        the component is not a member of this bucket.
        """
        entry = self._find(component)
        if entry is None:
            return False
        self._unlink(entry)
        return True

    def remove_type(self, type_id: TypeId) -> List[Any]:
        """
        Unlinks every member matching the given type id, and returns them.
        """
        entries = list(self._index.get(type_id, ()))
        for entry in entries:
            self._unlink(entry)
        return [entry.component for entry in entries]

    def _find(self, component) -> Optional[BucketEntry]:
        for entry in self._entries:
            # NB: compare by reference
            if entry.component is component:
                return entry
        return None

    def _unlink(self, entry: BucketEntry) -> None:
        self._entries = [item for item in self._entries if item is not entry]
        for type_id in entry.type_ids:
            entries = self._index.get(type_id)
            if entries is None:
                continue
            entries[:] = [item for item in entries if item is not entry]
            if not entries:
                del self._index[type_id]


class FellowContainer(ComponentBucket):
    """
    Contains components on the same level. A single instance is shared by
    reference by all its members, so that a component added to the container
    is visible to all current and future fellows.
    """

    __slots__ = ()
