# -*- coding: utf-8 -*-
"""Write the largest attached conduit diameter onto junction boxes.

Nothing here opens a transaction; callers wrap ``apply_largest_diameters``
in one.
"""
from utils_revit import log_debug

from jbox.classifier import JboxError
from jbox.diameters import DEFAULT_DIAMETER_PARAM
from jbox.params import ElementParamCheck, ParamKind


TARGET_PARAM_NAME = 'Largest Attached Diameter'


class TagResult(object):
    """One tagged box. ``conduit_ids`` are the conduits at the largest diameter."""

    __slots__ = ('jbox_id', 'diameter', 'conduit_ids', 'conduit_count')

    def __init__(self, jbox_id, diameter, conduit_ids, conduit_count):
        self.jbox_id = jbox_id
        self.diameter = diameter
        self.conduit_ids = conduit_ids
        self.conduit_count = conduit_count


class TaggingResult(object):
    def __init__(self):
        self.tagged = []
        self.errors = []


def apply_largest_diameters(doc, infos, target_param=TARGET_PARAM_NAME,
                            diameter_param=DEFAULT_DIAMETER_PARAM):
    """Set ``target_param`` on each box to its largest conduit diameter.

    Boxes without the target parameter, or whose conduits have no
    diameter at all, are reported in ``errors`` and left unchanged.
    """
    result = TaggingResult()
    for info in infos:
        check = ElementParamCheck(doc, info.jbox_id, target_param)
        if not check.is_loaded(target_param, ParamKind.DOUBLE):
            result.errors.append(
                JboxError(info.jbox_id, "'{0}' parameter is not loaded".format(target_param))
            )
            continue

        largest = info.connections.largest_diameter(doc, diameter_param)
        if largest is None:
            result.errors.append(
                JboxError(info.jbox_id, "No connected conduit has a '{0}' value".format(diameter_param))
            )
            continue

        box = doc.GetElement(info.jbox_id)
        if not check.set(box, target_param, ParamKind.DOUBLE, largest.value):
            result.errors.append(
                JboxError(info.jbox_id, "'{0}' parameter could not be set".format(target_param))
            )
            continue

        log_debug('Jbox {0}: {1} = {2}'.format(info.jbox_id, target_param, largest.value))
        result.tagged.append(TagResult(
            info.jbox_id, largest.value, largest.element_ids, info.connections.count,
        ))
    return result
