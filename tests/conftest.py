# -*- coding: utf-8 -*-
"""Pytest setup for Jbox Tools tests.

Puts the extension lib on sys.path and stands in for pyRevit, which
only exists inside Revit, with the Revit API mocks.
"""
import os
import sys
import types
from unittest.mock import MagicMock

TESTS = os.path.dirname(__file__)
ROOT = os.path.dirname(TESTS)
EXT = os.path.join(ROOT, "JboxTools.extension")
LIB = os.path.join(EXT, "lib")
for path in (LIB, TESTS):
    if path not in sys.path:
        sys.path.insert(0, path)

from mocks.revit_api import DB as MockDB  # noqa: E402


if "pyrevit" not in sys.modules:
    pyrevit_stub = types.ModuleType("pyrevit")
    pyrevit_stub.DB = MockDB
    pyrevit_stub.forms = MagicMock()
    pyrevit_stub.revit = MagicMock()
    pyrevit_stub.script = MagicMock()
    sys.modules["pyrevit"] = pyrevit_stub
