from componentry.common import class_name


class ComponentException(Exception):
    """Base exception class for component composition exceptions."""


class UnboundComponentException(ComponentException):
    """
    Exception risen when an operation needs a Registry, but the component was
    neither created with one, nor added to a component bound to one."""

    def __init__(self, component):
        super().__init__(
            f"The component '{class_name(type(component))}' is not bound to any "
            "Registry. Pass a registry to its constructor, or add it to a "
            "component that is bound to one."
        )


class OverridingTypeException(ComponentException):
    """
    Exception risen when registering a type would override an existing one."""

    def __init__(self, key, value):
        super().__init__(
            f"A component type with key '{class_name(key)}' is already "
            f"registered and would be overridden by {value}."
        )


class InvalidComponentTypeException(ComponentException):
    """
    Exception risen when registering a type that cannot be instantiated
    without arguments."""

    def __init__(self, concrete_type):
        super().__init__(
            f"The type '{class_name(concrete_type)}' cannot be registered as "
            "component type: it must be a concrete class that can be "
            "instantiated without arguments. Register a factory instead."
        )


class MissingTypeException(ComponentException):
    """Exception risen when a type id must be specified to use a factory"""

    def __init__(self):
        super().__init__(
            "Please specify the type id of the factory or "
            "annotate its return type; func() -> Foo:"
        )


class InvalidFactory(ComponentException):
    """Exception risen when a factory is not valid"""

    def __init__(self, type_id):
        super().__init__(
            f"The factory specified for type {class_name(type_id)} is not "
            "valid, it must be a function with either these signatures: "
            "def example_factory(registry, type_id): "
            "or,"
            "def example_factory(registry): "
            "or,"
            "def example_factory(): "
        )


class ComponentAlreadyOwnedException(ComponentException):
    """
    Exception risen when adding a sub component that is already owned by
    another component."""

    def __init__(self, component, owner):
        super().__init__(
            f"The component '{class_name(type(component))}' is already a sub "
            f"component of '{class_name(type(owner))}'. Remove it from its "
            "owner before adding it to another one."
        )


class DependencyResolutionException(ComponentException):
    """
    Base class for fatal errors risen while resolving the dependencies of a
    component. The construction of the component does not complete."""


class UnmetDependencyException(DependencyResolutionException):
    """
    Exception risen when a dependency definition and all its backups could
    not be resolved."""

    def __init__(self, depender, tried_type_ids):
        tried = list(tried_type_ids)
        self.type_id = tried[-1] if tried else None
        self.tried_type_ids = tried
        super().__init__(
            f"Unmet dependency '{class_name(self.type_id)}' "
            f"for '{class_name(type(depender))}'. Tried, in order: "
            f"{', '.join(repr(class_name(item)) for item in tried)}."
        )


class SubScopeDependencyException(DependencyResolutionException):
    """
    Exception risen when a dependency definition targets the sub scope: sub
    components cannot be resolved as dependencies."""

    def __init__(self, depender, type_id):
        self.type_id = type_id
        super().__init__(
            f"The component '{class_name(type(depender))}' declares a dependency "
            f"on '{class_name(type_id)}' in the sub scope. Dependencies can be "
            "declared only in the fellow or root scopes."
        )


class CircularDependencyException(DependencyResolutionException):
    """Exception risen when the creation of a component recursively requires
    the creation of components without end."""

    def __init__(self, chain):
        self.chain = list(chain)
        super().__init__(
            "A circular dependency was detected while creating "
            f"'{class_name(self.chain[0]) if self.chain else None}': "
            f"{' -> '.join(class_name(item) for item in self.chain[:20])}"
            f"{' -> ...' if len(self.chain) > 20 else ''}"
        )
