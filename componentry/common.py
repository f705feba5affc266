from inspect import Parameter, Signature, isabstract, isclass
from typing import Any, Tuple, Type, Union

TypeId = Union[Type, str]

_TYPE_IDS_ATTRIBUTE = "__component_type_ids__"


def class_name(input_type):
    if isinstance(input_type, str):
        return input_type
    try:
        return input_type.__name__
    except AttributeError:
        # for example, this is the case for List[str], Tuple[str, ...], etc.
        return str(input_type)


def is_unset_type_id(type_id) -> bool:
    return type_id is None or type_id == ""


def _class_type_ids(cls: Type) -> Tuple[TypeId, ...]:
    # NB: read from the own namespace, subclasses compute their own ids
    ids = cls.__dict__.get(_TYPE_IDS_ATTRIBUTE)
    if ids is not None:
        return ids

    found = []
    for base in cls.__mro__:
        if base is object:
            continue
        found.append(base)
        if base.__name__ not in found:
            found.append(base.__name__)
    ids = tuple(found)

    try:
        setattr(cls, _TYPE_IDS_ATTRIBUTE, ids)
    except (AttributeError, TypeError):
        # builtin types do not accept new attributes, their ids are computed
        # on each call
        return ids
    return ids


def type_ids_of(obj: Any, tag: Any = None) -> Tuple[TypeId, ...]:
    """
    Returns the type identifiers matched by an object: the classes of its MRO
    (except object), their names, and the optional tag it was created under.
    """
    ids = _class_type_ids(type(obj))
    if is_unset_type_id(tag) or tag in ids:
        return ids
    return ids + (tag,)


def is_constructible_without_args(concrete_type) -> bool:
    """
    Returns a value indicating whether a class can be instantiated calling it
    without arguments.
    """
    if not isclass(concrete_type) or isabstract(concrete_type):
        return False

    try:
        signature = Signature.from_callable(concrete_type)
    except (TypeError, ValueError):
        # builtins may not expose a signature
        return True

    return all(
        param.default is not Parameter.empty
        or param.kind in (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)
        for param in signature.parameters.values()
    )
