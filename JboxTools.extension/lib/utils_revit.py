# -*- coding: utf-8 -*-

import traceback

from pyrevit import DB
from pyrevit import forms
from pyrevit import revit
from pyrevit import script


DEFAULT_TITLE = 'Jbox Tools'


def get_logger():
    return script.get_logger()


def _safe_log(logger_method, msg):
    try:
        logger_method(msg)
    except UnicodeEncodeError:
        try:
            # Fallback to repr which escapes non-ascii
            logger_method(repr(msg))
        except Exception:
            logger_method("<Log message encoding failed>")
    except Exception:
        pass


def log_debug(msg):
    _safe_log(get_logger().debug, msg)


def log_warning(msg):
    _safe_log(get_logger().warning, msg)


def alert(msg, title=DEFAULT_TITLE, warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # As a last resort if UI is unavailable
        log_warning(msg)


def confirm(msg, title=DEFAULT_TITLE):
    """Ask a yes/no question. Returns True only on an explicit yes."""
    try:
        return bool(forms.alert(msg, title=title, yes=True, no=True, warn_icon=False))
    except Exception:
        log_warning(msg)
        return False


def log_exception(prefix='Error'):
    logger = get_logger()
    _safe_log(logger.error, prefix)
    _safe_log(logger.error, traceback.format_exc())


def element_id_value(element_id):
    """Integer value of an ElementId.

    Revit 2024+ exposes ``Value``; older versions only ``IntegerValue``.
    """
    if element_id is None:
        return None
    for attr in ('Value', 'IntegerValue'):
        value = getattr(element_id, attr, None)
        if value is not None:
            return int(value)
    return int(element_id)


def _rollback(t):
    rb = getattr(t, 'Rollback', None) or getattr(t, 'RollBack', None)
    if rb:
        try:
            rb()
        except Exception:
            pass


def tx(name, doc=None):
    """Transaction context manager.

    Usage:
        with tx('My Tool', doc):
            ...
    """
    doc = doc or revit.doc
    t = DB.Transaction(doc, name)

    class _Tx(object):
        def __enter__(self):
            t.Start()
            return t

        def __exit__(self, exc_type, exc, tb):
            if exc_type:
                _rollback(t)
                return False

            try:
                t.Commit()
            except Exception:
                # Last resort rollback
                _rollback(t)
                raise
            return False

    return _Tx()


def tx_group(name, doc=None):
    """Transaction group context manager.

    Inner transactions are merged into a single undo entry on success
    and rolled back together on exception.
    """
    doc = doc or revit.doc
    g = DB.TransactionGroup(doc, name)

    class _TxGroup(object):
        def __enter__(self):
            g.Start()
            return g

        def __exit__(self, exc_type, exc, tb):
            if exc_type:
                _rollback(g)
                return False

            try:
                g.Assimilate()
            except Exception:
                _rollback(g)
                raise
            return False

    return _TxGroup()
