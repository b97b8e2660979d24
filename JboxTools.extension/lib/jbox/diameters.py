# -*- coding: utf-8 -*-
"""Min/max diameter selection over connected conduits."""
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from jbox.params import ElementParamCheck, ParamKind


MODE_MIN = 'min'
MODE_MAX = 'max'

DEFAULT_DIAMETER_PARAM = 'Diameter(Trade Size)'


class DiameterExtremum(object):
    """Extreme diameter and every element that has it."""

    __slots__ = ('value', 'element_ids')

    def __init__(self, value: float, element_ids: List):
        self.value = value
        self.element_ids = element_ids

    def __repr__(self):
        return 'DiameterExtremum(value={0!r}, element_ids={1!r})'.format(self.value, self.element_ids)


def read_diameters(doc, element_ids: Iterable, param_name: str = DEFAULT_DIAMETER_PARAM) -> Dict:
    """Read ``param_name`` as a double from each element.

    Elements where the parameter is missing, unset or not a double are
    skipped. Each id is read once, in first-seen order.
    """
    diameters = OrderedDict()
    for element_id in element_ids:
        if element_id in diameters:
            continue
        check = ElementParamCheck(doc, element_id, param_name)
        result = check.get(param_name, ParamKind.DOUBLE)
        if not result.is_loaded:
            continue
        diameters[element_id] = result.value
    return diameters


def select_extremum(values: Dict, mode: str) -> Optional[DiameterExtremum]:
    """Pick the min or max of ``values`` (id -> diameter).

    Ties are found with exact float equality. Returns None when
    ``values`` is empty.

    Raises:
        ValueError: ``mode`` is neither MODE_MIN nor MODE_MAX.
    """
    if mode == MODE_MAX:
        pick = max
    elif mode == MODE_MIN:
        pick = min
    else:
        raise ValueError("Unknown extremum mode: {0!r}".format(mode))

    if not values:
        return None

    target = pick(values.values())
    ties = [element_id for element_id, value in values.items() if value == target]
    return DiameterExtremum(target, ties)


def extremum(doc, element_ids: Iterable, param_name: str, mode: str) -> Optional[DiameterExtremum]:
    return select_extremum(read_diameters(doc, element_ids, param_name), mode)
