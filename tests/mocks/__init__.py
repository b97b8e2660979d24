# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .revit_api import DB, MockDocument, connect, mock_conduit, mock_jbox, mock_xyz

__all__ = ["DB", "MockDocument", "connect", "mock_conduit", "mock_jbox", "mock_xyz"]
