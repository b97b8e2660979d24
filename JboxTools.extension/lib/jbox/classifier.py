# -*- coding: utf-8 -*-
"""Turn selected element ids into junction boxes with their connected conduits.

Each id is handled on its own: a box that cannot be used is recorded as
a ``JboxError`` and the rest of the selection is still processed.
``ConnectorGeometryError`` is the exception: it stops the whole batch.
"""
from utils_revit import element_id_value, log_debug

from jbox.connectors import CONNECTOR_TOLERANCE, connected_element_ids
from jbox.diameters import DEFAULT_DIAMETER_PARAM, MODE_MAX, MODE_MIN, extremum


JBOX_CATEGORY_NAME = 'Electrical Fixtures'

MSG_NOT_FOUND = 'Element not found'
MSG_NOT_FIXTURE = 'Not an electrical fixture'
MSG_NO_CONDUIT = 'The jbox has no connected conduit'


class JboxError(object):
    __slots__ = ('jbox_id', 'message')

    def __init__(self, jbox_id, message):
        self.jbox_id = jbox_id
        self.message = message

    def __repr__(self):
        return 'JboxError({0!r}, {1!r})'.format(self.jbox_id, self.message)


def format_errors(errors):
    """One '<id> - <message>' line per error."""
    return '\n'.join(
        '{0} - {1}'.format(element_id_value(e.jbox_id), e.message) for e in errors
    )


class JboxConnection(object):
    """Conduits attached to one junction box."""

    def __init__(self, conduit_ids):
        self.conduit_ids = list(conduit_ids)

    @classmethod
    def from_element(cls, jbox, tolerance=CONNECTOR_TOLERANCE):
        return cls(connected_element_ids(jbox, tolerance))

    @property
    def count(self):
        return len(self.conduit_ids)

    def largest_diameter(self, doc, param_name=DEFAULT_DIAMETER_PARAM):
        """Largest conduit diameter and the conduits that have it, or None."""
        return extremum(doc, self.conduit_ids, param_name, MODE_MAX)

    def smallest_diameter(self, doc, param_name=DEFAULT_DIAMETER_PARAM):
        """Smallest conduit diameter and the conduits that have it, or None."""
        return extremum(doc, self.conduit_ids, param_name, MODE_MIN)


class JboxInfo(object):
    def __init__(self, jbox_id, connections):
        self.jbox_id = jbox_id
        self.connections = connections

    def __repr__(self):
        return 'JboxInfo({0!r}, conduits={1})'.format(self.jbox_id, self.connections.count)


class ClassifyResult(object):
    def __init__(self):
        self.infos = []
        self.errors = []


def _category_name(element):
    category = getattr(element, 'Category', None)
    if category is None:
        return None
    return category.Name


def parse_ids(doc, box_ids, category_name=JBOX_CATEGORY_NAME, tolerance=CONNECTOR_TOLERANCE):
    """Classify ``box_ids`` into usable boxes and per-box errors, in input order."""
    result = ClassifyResult()
    for box_id in box_ids:
        jbox = doc.GetElement(box_id)
        if jbox is None:
            result.errors.append(JboxError(box_id, MSG_NOT_FOUND))
            continue

        if _category_name(jbox) != category_name:
            result.errors.append(JboxError(jbox.Id, MSG_NOT_FIXTURE))
            continue

        connections = JboxConnection.from_element(jbox, tolerance)
        if connections.count == 0:
            result.errors.append(JboxError(jbox.Id, MSG_NO_CONDUIT))
            continue

        log_debug('Jbox {0}: {1} connected conduit(s)'.format(box_id, connections.count))
        result.infos.append(JboxInfo(box_id, connections))
    return result
