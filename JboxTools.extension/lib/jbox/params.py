# -*- coding: utf-8 -*-
"""Typed access to named element parameters.

Parameters are looked up once, when an ``ElementParamCheck`` is built,
and read back by name with the kind the caller expects. A lookup that
cannot be satisfied fails closed with a result that is not loaded.

Example:
    >>> check = ElementParamCheck(doc, conduit_id, "Diameter(Trade Size)")
    >>> result = check.get("Diameter(Trade Size)", ParamKind.DOUBLE)
    >>> if result.is_loaded:
    ...     print(result.value)
"""
from typing import Any, Dict, Optional

from utils_revit import log_debug, log_warning

from jbox.errors import ParameterKindError


class ParamKind(object):
    """Closed set of parameter value kinds, one per Revit StorageType."""

    INTEGER = 'integer'
    DOUBLE = 'double'
    STRING = 'string'
    ELEMENT_ID = 'element_id'

    ALL = (INTEGER, DOUBLE, STRING, ELEMENT_ID)


# StorageType enum names as reported by the API
_STORAGE_KINDS = {
    'Integer': ParamKind.INTEGER,
    'Double': ParamKind.DOUBLE,
    'String': ParamKind.STRING,
    'ElementId': ParamKind.ELEMENT_ID,
}

_READERS = {
    ParamKind.INTEGER: lambda p: p.AsInteger(),
    ParamKind.DOUBLE: lambda p: p.AsDouble(),
    ParamKind.STRING: lambda p: p.AsString(),
    ParamKind.ELEMENT_ID: lambda p: p.AsElementId(),
}

_COERCERS = {
    ParamKind.INTEGER: int,
    ParamKind.DOUBLE: float,
    ParamKind.STRING: lambda v: '' if v is None else str(v),
    ParamKind.ELEMENT_ID: lambda v: v,
}


def storage_kind(param) -> Optional[str]:
    """Return the ParamKind of a Revit parameter, or None for StorageType.None."""
    try:
        return _STORAGE_KINDS.get(str(param.StorageType))
    except Exception:
        return None


class ParameterResult(object):
    """Outcome of a typed parameter read."""

    __slots__ = ('is_loaded', 'value')

    def __init__(self, is_loaded: bool, value: Any = None):
        self.is_loaded = is_loaded
        self.value = value

    def __repr__(self):
        return 'ParameterResult(is_loaded={0!r}, value={1!r})'.format(self.is_loaded, self.value)


_NOT_LOADED = ParameterResult(False, None)


class _ParamProp(object):
    """Snapshot of one parameter taken at construction time."""

    def __init__(self, element, name):
        self.name = name
        self.exists = False
        self.kind = None
        self.has_value = False
        self.value = None

        param = element.LookupParameter(name) if element is not None else None
        if param is None:
            return

        self.exists = True
        self.kind = storage_kind(param)
        self.has_value = bool(getattr(param, 'HasValue', True))
        reader = _READERS.get(self.kind)
        if reader is not None:
            self.value = reader(param)


class ElementParamCheck(object):
    """Existence, kind and value checks for a fixed set of parameters on one element."""

    def __init__(self, doc, element_id, *param_names):
        self._element_id = element_id
        element = doc.GetElement(element_id)
        self._props: Dict[str, _ParamProp] = {}
        for name in param_names:
            self._props[name] = _ParamProp(element, name)

    def is_loaded(self, name: str, kind: Optional[str] = None) -> bool:
        """True when the parameter exists on the element.

        With ``kind``, its storage must also be of that kind. Unlike
        ``get`` this does not require a value to be set.
        """
        prop = self._props.get(name)
        if prop is None or not prop.exists:
            return False
        return kind is None or prop.kind == kind

    def get(self, name: str, kind: str) -> ParameterResult:
        """Read a parameter value as ``kind``.

        Returns a result that is not loaded when the name was not part of
        this check, the parameter is missing or unset, or it stores a
        different kind.
        """
        prop = self._props.get(name)
        if prop is None:
            log_debug("Parameter '{0}' was not requested for element {1}".format(name, self._element_id))
            return _NOT_LOADED
        if not prop.exists:
            log_debug("Parameter '{0}' is not loaded on element {1}".format(name, self._element_id))
            return _NOT_LOADED
        if prop.kind != kind:
            log_debug("Parameter '{0}' stores {1}, not {2}".format(name, prop.kind, kind))
            return _NOT_LOADED
        if not prop.has_value:
            log_debug("Parameter '{0}' has no value on element {1}".format(name, self._element_id))
            return _NOT_LOADED
        return ParameterResult(True, prop.value)

    def set(self, element, name: str, kind: str, value: Any) -> bool:
        """Write ``value`` to the named parameter of ``element`` as ``kind``.

        Must run inside an open transaction.

        Returns:
            True if the host accepted the value.

        Raises:
            ParameterKindError: ``kind`` is not one of ParamKind.ALL.
        """
        if kind not in ParamKind.ALL:
            raise ParameterKindError("Value kind '{0}' is not valid for setting element parameters".format(kind))
        coerce = _COERCERS[kind]

        param = element.LookupParameter(name)
        if param is None:
            log_warning("Parameter '{0}' not found on element {1}".format(name, element.Id))
            return False
        if getattr(param, 'IsReadOnly', False):
            log_warning("Parameter '{0}' is read-only on element {1}".format(name, element.Id))
            return False

        result = param.Set(coerce(value))
        return result is not False
