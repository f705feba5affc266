import pytest

from componentry import (
    Component,
    InvalidComponentTypeException,
    InvalidFactory,
    MissingTypeException,
    OverridingTypeException,
    Registry,
    Scope,
)
from tests.examples import Clock, LocalClock, NeedsArguments, Office, Transport


def test_add_type_binds_class_and_name():
    registry = Registry()
    registry.add_type(Clock)

    assert Clock in registry
    assert "Clock" in registry
    assert isinstance(registry.instantiate("Clock"), Clock)
    assert isinstance(registry.instantiate(Clock), Clock)


def test_add_type_with_type_id():
    registry = Registry()
    registry.add_type(LocalClock, "Clock")

    assert "Clock" in registry
    assert LocalClock not in registry
    assert isinstance(registry.instantiate("Clock"), LocalClock)


def test_strict_registry_does_not_bind_names():
    registry = Registry(strict=True)
    registry.add_type(Clock)

    assert Clock in registry
    assert "Clock" not in registry
    assert registry.can_create("Clock") is False


def test_register_shortcut():
    registry = Registry()
    registry.register(Clock)
    registry.register("local", LocalClock)

    assert isinstance(registry.instantiate(Clock), Clock)
    assert isinstance(registry.instantiate("local"), LocalClock)


def test_register_string_without_type_raises():
    registry = Registry()

    with pytest.raises(InvalidComponentTypeException):
        registry.register("Clock")


def test_raises_for_overriding_type():
    registry = Registry()
    registry.add_type(Clock)

    with pytest.raises(OverridingTypeException) as context:
        registry.add_type(Clock)

    assert "Clock" in str(context.value)

    with pytest.raises(OverridingTypeException):
        registry.add_factory(lambda: Clock(), "Clock")


def test_name_alias_is_skipped_when_taken():
    registry = Registry()
    registry.add_factory(lambda: LocalClock(), "Clock")
    registry.add_type(Clock)

    assert isinstance(registry.instantiate("Clock"), LocalClock)
    assert type(registry.instantiate(Clock)) is Clock


@pytest.mark.parametrize("invalid_type", [NeedsArguments, Transport, "Clock", 42])
def test_add_type_raises_for_types_needing_arguments(invalid_type):
    registry = Registry()

    with pytest.raises(InvalidComponentTypeException):
        registry.add_type(invalid_type)


def test_factory_without_arguments():
    registry = Registry()
    registry.add_factory(lambda: Office(), "office")

    assert isinstance(registry.instantiate("office"), Office)


def test_factory_receiving_the_registry():
    registry = Registry()
    received = []

    def factory(registry):
        received.append(registry)
        return Office(registry)

    registry.add_factory(factory, "office")
    office = registry.instantiate("office")

    assert received == [registry]
    assert office.registry is registry


def test_factory_receiving_registry_and_type_id():
    registry = Registry()
    received = []

    def factory(registry, type_id):
        received.append((registry, type_id))
        return Office()

    registry.add_factory(factory, "office")
    registry.instantiate("office")

    assert received == [(registry, "office")]


def test_invalid_factory_too_many_arguments_throws():
    registry = Registry()

    with pytest.raises(InvalidFactory):
        registry.add_factory(lambda a, b, c: Office(), "office")


def test_invalid_factory_not_callable_throws():
    registry = Registry()

    with pytest.raises(InvalidFactory):
        registry.add_factory("office", "office")  # type: ignore


def test_factory_raises_for_missing_type():
    registry = Registry()

    def factory():
        return Office()

    with pytest.raises(MissingTypeException):
        registry.add_factory(factory)


def test_factory_type_from_return_annotation():
    registry = Registry()

    def make_office() -> Office:
        return Office()

    registry.add_factory(make_office)

    assert Office in registry
    assert "Office" in registry


def test_factory_type_from_string_annotation():
    registry = Registry()

    def make_clock() -> "GlobalClock":  # type: ignore # noqa: F821
        return Clock()

    registry.add_factory(make_clock)
    world = Component(registry)

    clock = world.create_component("GlobalClock")

    assert "GlobalClock" in registry
    assert isinstance(clock, Clock)
    assert world.get_component("GlobalClock") is clock


def test_unregister_removes_aliases():
    registry = Registry()
    registry.add_type(Clock)
    registry.add_type(Office)

    assert registry.unregister("Clock") is registry

    assert "Clock" not in registry
    assert Clock not in registry
    assert "Office" in registry


def test_unregister_missing_type_is_a_no_op():
    registry = Registry()
    registry.unregister("Clock")

    assert list(registry) == []
    assert registry.can_create(Clock) is True


def test_unregistered_class_is_not_created_implicitly():
    registry = Registry()
    registry.register(Clock)

    registry.unregister(Clock)

    assert registry.can_create(Clock) is False
    assert registry.can_create("Clock") is False
    assert registry.instantiate(Clock) is None
    assert Component(registry).create_component(Clock) is None


def test_unregistered_class_can_be_registered_again():
    registry = Registry()
    registry.register(Clock)
    registry.unregister("Clock")

    registry.register(Clock)

    assert registry.can_create(Clock) is True
    assert isinstance(registry.instantiate("Clock"), Clock)


def test_iteration_lists_bindings():
    registry = Registry()
    registry.add_type(Clock)

    assert set(dict(registry).keys()) == {Clock, "Clock"}


def test_can_create_unregistered_class_outside_strict_mode():
    assert Registry().can_create(Office) is True
    assert Registry(strict=True).can_create(Office) is False


@pytest.mark.parametrize("type_id", [None, "", "Nope", NeedsArguments, Transport])
def test_cannot_create(type_id):
    registry = Registry()

    assert registry.can_create(type_id) is False
    assert registry.instantiate(type_id) is None


def test_root_is_created_once():
    registry = Registry()

    root = registry.root

    assert isinstance(root, Component)
    assert registry.root is root
    assert root.registry is registry
    assert Registry().root is not root


def test_root_scoped_operations():
    registry = Registry()
    registry.add_type(Clock)

    clock = registry.create_root_component("Clock")
    office = Office()
    registry.add_root_component(office)

    assert registry.get_root_component(Clock) is clock
    assert registry.get_root_components() == [clock, office]
    assert registry.get_root_components_of_type(Component) == [clock, office]
    assert registry.has_root_component_of_type("Office") is True
    assert registry.root.get_components(Scope.FELLOW) == [clock, office]

    registry.remove_root_component(office)

    assert registry.has_root_component_of_type("Office") is False
    assert registry.get_root_component(Office) is None
    assert isinstance(registry.get_root_component(Office, True), Office)

    registry.remove_root_components_of_type(Component)

    assert registry.get_root_components() == []
