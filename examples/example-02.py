"""
This example illustrates backup dependency definitions: a commuter prefers a
car shared with its fellows, and falls back to the bicycle available to
everybody when no car can be created.
"""

from componentry import (
    Component,
    FellowDependency,
    Registry,
    RootDependency,
    UnmetDependencyException,
)


class Car(Component):
    pass


class Bicycle(Component):
    pass


class Commuter(Component):
    def __init__(self):
        super().__init__()
        self.transport = None

    def get_dependency_definitions(self):
        definitions = super().get_dependency_definitions()
        definitions.append(
            FellowDependency("Car", "transport", backup=RootDependency("Bicycle"))
        )
        return definitions


registry = Registry(strict=True)
registry.register(Commuter)

world = Component(registry)

try:
    world.create_component(Commuter)
except UnmetDependencyException as unmet:
    assert unmet.tried_type_ids == ["Car", "Bicycle"]
else:
    raise AssertionError("Commuter must not be created without transports")

registry.register("Bicycle", Bicycle)

cyclist = world.create_component(Commuter)

assert isinstance(cyclist.transport, Bicycle)

registry.register("Car", Car)

driver = world.create_component(Commuter)

assert isinstance(driver.transport, Car)
assert registry.get_root_component("Bicycle") is cyclist.transport
