# -*- coding: utf-8 -*-

"""Units conversion helpers for Revit.

Revit internal units are feet. Conduit trade sizes are read in feet
and shown to the user in inches or millimeters.

Example:
    >>> from utils_units import ft_to_in, format_diameter
    >>> ft_to_in(0.0625)
    0.75
    >>> format_diameter(0.0625)
    '0.75"'
"""
from typing import Optional, Union


MM_PER_FOOT: float = 304.8
INCHES_PER_FOOT: float = 12.0

UNIT_INCHES = 'in'
UNIT_MILLIMETERS = 'mm'


def ft_to_mm(ft: Optional[Union[float, int, str]]) -> Optional[float]:
    """Convert feet to millimeters.

    Args:
        ft: Value in feet. Can be float, int, or numeric string.
            If None, returns None.

    Returns:
        Value converted to millimeters, or None if input is None.
    """
    if ft is None:
        return None
    return float(ft) * MM_PER_FOOT


def ft_to_in(ft: Optional[Union[float, int, str]]) -> Optional[float]:
    """Convert feet to inches, or None if input is None."""
    if ft is None:
        return None
    return float(ft) * INCHES_PER_FOOT


def format_diameter(ft: Optional[float], units: str = UNIT_INCHES, places: int = 2) -> str:
    """Format an internal diameter for display.

    Args:
        ft: Diameter in feet. None gives an empty string.
        units: 'in' or 'mm'.
        places: Maximum number of decimals. Trailing zeros are dropped.

    Returns:
        Text such as '0.75"' or '19.05 mm'.

    Raises:
        ValueError: Unknown units.

    Examples:
        >>> format_diameter(1.0 / 12.0)
        '1"'
        >>> format_diameter(0.0625, units='mm')
        '19.05 mm'
    """
    if ft is None:
        return ''
    if units == UNIT_INCHES:
        value, suffix = ft_to_in(ft), '"'
    elif units == UNIT_MILLIMETERS:
        value, suffix = ft_to_mm(ft), ' mm'
    else:
        raise ValueError('Unsupported units: {0}'.format(units))

    text = '{0:.{1}f}'.format(round(value, places), places)
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text + suffix
