# -*- coding: utf-8 -*-

"""Jbox Tools shared library.

This folder is auto-added to sys.path by pyRevit for this extension.
Keep modules dependency-free (pyRevit + RevitAPI only).

Modules:
    utils_revit: Logger, alerts, transactions, element id helpers
    utils_units: Conversion of internal feet to inches/millimeters
    config_loader: Configuration file loading
    orchestrator: Largest attached diameter command flow
    jbox: Junction box connectivity, diameters and parameter access
"""

__version__ = "0.1.0"
__author__ = "Jbox Tools Team"
