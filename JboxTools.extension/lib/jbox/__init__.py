# -*- coding: utf-8 -*-
"""Junction box connectivity and conduit diameter tagging."""
