from enum import Enum


class Scope(Enum):
    SUB = 1
    FELLOW = 2
    ROOT = 3


class ComponentState(Enum):
    CONSTRUCTED = 1
    RESOLVED = 2
    READY = 3
    REMOVED = 4
