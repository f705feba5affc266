"""
This example illustrates how two teams of a company, registered as fellow
components, are wired to each other automatically, and how a global clock is
shared by every company through the root scope.
"""

from componentry import Component, FellowDependency, Registry, RootDependency, Scope


class Clock(Component):
    pass


class Company(Component):
    def __init__(self):
        super().__init__()
        self.clock = None

    def get_dependency_definitions(self):
        definitions = super().get_dependency_definitions()
        definitions.append(RootDependency("Clock", "clock"))
        return definitions


class Developers(Component):
    def __init__(self):
        super().__init__()
        self.designers = None

    def get_dependency_definitions(self):
        definitions = super().get_dependency_definitions()
        definitions.append(FellowDependency("Designers", "designers"))
        return definitions


class Designers(Component):
    def __init__(self):
        super().__init__()
        self.developers = None

    def get_dependency_definitions(self):
        definitions = super().get_dependency_definitions()
        definitions.append(FellowDependency("Developers", "developers"))
        return definitions


registry = Registry()

registry.register(Clock)
registry.register(Company)
registry.register(Developers)
registry.register(Designers)

world = Component(registry)

acme = world.create_component("Company")
globex = world.create_component("Company", Scope.SUB)

assert isinstance(acme.clock, Clock)
assert acme.clock is globex.clock

developers = acme.create_component("Developers", Scope.FELLOW)

assert isinstance(developers.designers, Designers)
assert developers.designers.developers is developers
assert acme.get_components(Scope.FELLOW) == [developers, developers.designers]
