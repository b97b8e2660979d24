# -*- coding: utf-8 -*-
"""One-hop connector matching.

A connector on a junction box is attached to a conduit when one of the
connectors it references sits at the same position. The owner of that
counterpart is the connected element.
"""
from collections import OrderedDict

from utils_revit import log_debug

from jbox.errors import ConnectorGeometryError


# Revit internal units (feet)
CONNECTOR_TOLERANCE = 1e-05

LOGICAL_KIND = 'Logical'


def _iter_set(connector_set):
    if connector_set is None:
        return []
    return list(connector_set)


def get_connectors(element):
    """Return the connectors of an MEP curve or a family instance as a list."""
    if element is None:
        return []

    manager = getattr(element, 'ConnectorManager', None)
    if manager is None:
        mep_model = getattr(element, 'MEPModel', None)
        manager = getattr(mep_model, 'ConnectorManager', None) if mep_model is not None else None
    if manager is None:
        return []
    return _iter_set(manager.Connectors)


def connector_kind(connector):
    """Name of the connector's ConnectorType, e.g. 'End' or 'Logical'."""
    return str(connector.ConnectorType)


def _to_xyz_tuple(p):
    if hasattr(p, 'X') and hasattr(p, 'Y') and hasattr(p, 'Z'):
        return (float(p.X), float(p.Y), float(p.Z))
    return (float(p[0]), float(p[1]), float(p[2]))


def points_coincide(p1, p2, tolerance=CONNECTOR_TOLERANCE):
    """True when every coordinate of the two points differs by at most tolerance."""
    a = _to_xyz_tuple(p1)
    b = _to_xyz_tuple(p2)
    return all(abs(a[i] - b[i]) <= tolerance for i in range(3))


def is_connected_to(c1, c2, tolerance=CONNECTOR_TOLERANCE):
    """Check whether two connectors sit at the same position.

    Logical connectors have no position and never match.

    Raises:
        ConnectorGeometryError: the origins of two non-logical
            connectors could not be read or compared.
    """
    kind1 = connector_kind(c1)
    kind2 = connector_kind(c2)
    if kind1 == LOGICAL_KIND or kind2 == LOGICAL_KIND:
        return False

    try:
        return points_coincide(c1.Origin, c2.Origin, tolerance)
    except Exception as exc:
        raise ConnectorGeometryError(kind1, kind2) from exc


def find_coincident(connector, tolerance=CONNECTOR_TOLERANCE):
    """Return the first connector referenced by ``connector`` at the same position.

    The connector itself is skipped. Candidates are visited in the order
    the host reports them.
    """
    for candidate in _iter_set(connector.AllRefs):
        if candidate is connector or candidate == connector:
            continue
        if is_connected_to(connector, candidate, tolerance):
            return candidate
    return None


def match_connectors(connectors, tolerance=CONNECTOR_TOLERANCE):
    """Map each attached source connector to the owner of its counterpart.

    Connectors that are not connected, or whose references hold no
    coincident connector, are left out.
    """
    matches = OrderedDict()
    for connector in connectors:
        if not connector.IsConnected:
            continue
        counterpart = find_coincident(connector, tolerance)
        if counterpart is None:
            continue
        owner = counterpart.Owner
        log_debug('Connector matched to element {0}'.format(owner.Id))
        matches[connector] = owner
    return matches


def connected_element_ids(element, tolerance=CONNECTOR_TOLERANCE):
    """Ids of the elements attached to ``element``, one per matched connector."""
    return [owner.Id for owner in match_connectors(get_connectors(element), tolerance).values()]
