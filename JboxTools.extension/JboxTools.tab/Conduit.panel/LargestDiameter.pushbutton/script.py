# -*- coding: utf-8 -*-
"""Tag selected junction boxes with their largest attached conduit diameter."""

__title__ = "Largest\nDiameter"

from pyrevit import revit, script

from config_loader import load_rules
from orchestrator import INTRO, TITLE, run_largest_diameter
from utils_revit import confirm, log_exception

doc = revit.doc
uidoc = revit.uidoc
output = script.get_output()


def main():
    """Main entry point."""
    rules = load_rules()

    if not confirm(INTRO.format(rules['target_param_name']), title=TITLE):
        return

    selection_ids = list(uidoc.Selection.GetElementIds())
    run_largest_diameter(doc, selection_ids, rules, output=output)


if __name__ == '__main__':
    try:
        main()
    except Exception:
        log_exception('Largest diameter tagging failed')
        raise
