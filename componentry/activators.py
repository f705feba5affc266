from typing import Any, Callable, Type, Union

from componentry.common import class_name

FactoryCallableNoArguments = Callable[[], Any]
FactoryCallableSingleArgument = Callable[[Any], Any]
FactoryCallableTwoArguments = Callable[[Any, Any], Any]
FactoryCallableType = Union[
    FactoryCallableNoArguments,
    FactoryCallableSingleArgument,
    FactoryCallableTwoArguments,
]


class TypeActivator:
    __slots__ = ("_type",)

    def __init__(self, _type: Type):
        self._type = _type

    def __repr__(self):
        return f"<TypeActivator {class_name(self._type)}>"

    def __call__(self, registry, type_id):
        return self._type()


class FactoryActivator:
    __slots__ = ("factory",)

    def __init__(self, factory: FactoryCallableTwoArguments):
        self.factory = factory

    def __repr__(self):
        return f"<FactoryActivator {class_name(self.factory)}>"

    def __call__(self, registry, type_id):
        return self.factory(registry, type_id)


class FactoryWrapperNoArgs:
    __slots__ = ("factory",)

    def __init__(self, factory: FactoryCallableNoArguments):
        self.factory = factory

    def __call__(self, registry, type_id):
        return self.factory()


class FactoryWrapperRegistryArg:
    __slots__ = ("factory",)

    def __init__(self, factory: FactoryCallableSingleArgument):
        self.factory = factory

    def __call__(self, registry, type_id):
        return self.factory(registry)
