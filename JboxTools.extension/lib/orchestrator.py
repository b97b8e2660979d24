# -*- coding: utf-8 -*-
"""Orchestrator for the largest attached diameter command.

Prepares the shared parameter, classifies the selected junction boxes,
writes their largest conduit diameter and reports the boxes that failed.
"""
from utils_revit import alert, element_id_value, log_exception, tx, tx_group
from utils_units import format_diameter

from jbox.classifier import format_errors, parse_ids
from jbox.errors import ConnectorGeometryError, SharedParameterTypeError
from jbox.shared_params import (
    electrical_fixtures_category,
    ensure_shared_parameter,
    find_bound_definition,
)
from jbox.tagging import apply_largest_diameters


TITLE = 'JBox To Largest Conduit Diameter'
FAILED_TITLE = 'Jbox Tag Largest Diameter - Failed Jboxes'

INTRO = (
    "This program will aid in tagging your selected junction boxes with their "
    "largest attached diameter conduit.\n\n"
    "After running this script, your junction boxes will have a new parameter on them "
    "called '{0}'. You will need to load an electrical fixture tag into the model and "
    "edit it to include that parameter. You may then tag your junction boxes with this "
    "tag to get the desired result."
)


def print_summary(output, tagged, units):
    if output is None or not tagged:
        return
    rows = [
        [element_id_value(t.jbox_id), format_diameter(t.diameter, units), t.conduit_count]
        for t in tagged
    ]
    output.print_table(
        table_data=rows,
        title='Tagged junction boxes',
        columns=['Jbox', 'Largest Diameter', 'Conduits'],
    )


def run_largest_diameter(doc, selection_ids, rules, output=None):
    """Main entry point called by the pushbutton script."""
    target = rules['target_param_name']

    param_file = doc.Application.OpenSharedParameterFile()
    if param_file is None:
        alert("Shared parameter file not found. Please load a shared parameter file "
              "and rerun this program.", title=TITLE)
        return {'tagged': 0, 'failed': 0, 'error': 'No shared parameter file'}

    ids = list(selection_ids or [])
    if not ids:
        alert("Select one or more junction boxes and rerun this program.", title=TITLE)
        return {'tagged': 0, 'failed': 0, 'error': 'Nothing selected'}

    if find_bound_definition(doc, target) is None:
        try:
            with tx('Making Shared Parameter', doc):
                ensure_shared_parameter(
                    doc, param_file, rules['shared_param_group'], target,
                    electrical_fixtures_category(doc),
                )
        except SharedParameterTypeError as e:
            alert(str(e), title=TITLE)
            return {'tagged': 0, 'failed': 0, 'error': str(e)}

    try:
        with tx_group('Jbox Parameters', doc):
            parsed = parse_ids(
                doc, ids,
                category_name=rules['jbox_category_name'],
                tolerance=rules['connector_tolerance_ft'],
            )
            with tx('Setting Parameters', doc):
                tagging = apply_largest_diameters(
                    doc, parsed.infos, target, rules['diameter_param_name'],
                )
    except ConnectorGeometryError as e:
        log_exception('Connector comparison failed')
        alert("Connector comparison failed, no parameters were changed.\n\n{0}".format(e), title=TITLE)
        return {'tagged': 0, 'failed': len(ids), 'error': str(e)}

    errors = parsed.errors + tagging.errors
    print_summary(output, tagging.tagged, rules['report_units'])

    if errors:
        alert(format_errors(errors), title=FAILED_TITLE)

    return {'tagged': len(tagging.tagged), 'failed': len(errors)}
