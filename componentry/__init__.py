from componentry.abc import ComponentProtocol as ComponentProtocol
from componentry.buckets import ComponentBucket as ComponentBucket
from componentry.buckets import FellowContainer as FellowContainer
from componentry.common import class_name as class_name
from componentry.common import type_ids_of as type_ids_of
from componentry.component import Component as Component
from componentry.definitions import DependencyDefinition as DependencyDefinition
from componentry.definitions import FellowDependency as FellowDependency
from componentry.definitions import RootDependency as RootDependency
from componentry.errors import *  # type: ignore
from componentry.registry import Registry as Registry
from componentry.resolvers import DependencyResolver as DependencyResolver
from componentry.resolvers import ResolutionContext as ResolutionContext
from componentry.scopes import ComponentState as ComponentState
from componentry.scopes import Scope as Scope
