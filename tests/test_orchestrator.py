# -*- coding: utf-8 -*-
"""Tests for the largest diameter orchestrator."""
import unittest
from unittest.mock import MagicMock, patch

from mocks.revit_api import (
    GENERIC_MODELS,
    MockConnector,
    MockConnectorType,
    MockDefinition,
    MockDefinitionFile,
    MockDefinitionGroup,
    MockDocument,
    MockElement,
    MockElementId,
    MockSpecTypeId,
    connect,
    mock_conduit,
    mock_jbox,
)

import config_loader
import orchestrator


def _ids(*values):
    return [MockElementId(v) for v in values]


class TestRunLargestDiameter(unittest.TestCase):
    def setUp(self):
        self.rules = dict(config_loader.DEFAULT_RULES)
        self.output = MagicMock()

        box_a = mock_jbox(1, [(0, 0, 0)], category=GENERIC_MODELS)
        box_b = mock_jbox(2, [(5, 0, 0)])
        self.box_c = mock_jbox(3, [(10, 0, 0), (10, 1, 0)])
        small = mock_conduit(12, 0.0625, (10, 0, 0))
        large = mock_conduit(13, 0.0833, (10, 1, 0))
        connect(self.box_c.connectors[0], small.connectors[0])
        connect(self.box_c.connectors[1], large.connectors[0])
        self.doc = MockDocument(
            [box_a, box_b, self.box_c, small, large],
            shared_parameter_file=MockDefinitionFile(),
        )

        patcher = patch.object(orchestrator, "alert")
        self.alert = patcher.start()
        self.addCleanup(patcher.stop)

    def test_full_run(self):
        result = orchestrator.run_largest_diameter(self.doc, _ids(1, 2, 3), self.rules, output=self.output)

        self.assertEqual(result, {"tagged": 1, "failed": 2})
        param = self.box_c.LookupParameter("Largest Attached Diameter")
        self.assertEqual(param.set_calls, [0.0833])

        self.alert.assert_called_once_with(
            "1 - Not an electrical fixture\n2 - The jbox has no connected conduit",
            title=orchestrator.FAILED_TITLE,
        )

        rows = self.output.print_table.call_args.kwargs["table_data"]
        self.assertEqual(rows, [[3, '1"', 2]])

    def test_transactions(self):
        orchestrator.run_largest_diameter(self.doc, _ids(3), self.rules)

        self.assertEqual(self.doc.transaction_log, [
            ("Making Shared Parameter", "start"),
            ("Making Shared Parameter", "commit"),
            ("Jbox Parameters", "start"),
            ("Setting Parameters", "start"),
            ("Setting Parameters", "commit"),
            ("Jbox Parameters", "assimilate"),
        ])
        self.assertEqual(len(self.doc.ParameterBindings.items), 1)
        self.alert.assert_not_called()

    def test_no_shared_parameter_file(self):
        self.doc.Application.shared_parameter_file = None

        result = orchestrator.run_largest_diameter(self.doc, _ids(3), self.rules)

        self.assertEqual(result["error"], "No shared parameter file")
        self.alert.assert_called_once()
        self.assertEqual(self.doc.transaction_log, [])

    def test_empty_selection(self):
        result = orchestrator.run_largest_diameter(self.doc, [], self.rules)
        self.assertEqual(result["error"], "Nothing selected")
        self.assertEqual(self.doc.transaction_log, [])

    def test_geometry_error_rolls_back(self):
        broken = MockConnector(MockElement(MockElementId(99)), None, MockConnectorType.Curve)
        box = mock_jbox(4, [(20, 0, 0)])
        connect(box.connectors[0], broken)
        self.doc.add(box)

        result = orchestrator.run_largest_diameter(self.doc, _ids(3, 4), self.rules)

        self.assertIn("Connector 1 Type: End | Connector 2 Type: Curve", result["error"])
        self.assertEqual(self.doc.transaction_log[-1], ("Jbox Parameters", "rollback"))
        self.assertEqual(self.box_c.LookupParameter("Largest Attached Diameter").set_calls, [])
        self.alert.assert_called_once()

    def test_conduit_count_includes_smaller_conduits(self):
        box = mock_jbox(5, [(30, 0, 0), (30, 1, 0), (30, 2, 0)])
        conduits = [
            mock_conduit(51, 0.05, (30, 0, 0)),
            mock_conduit(52, 0.05, (30, 1, 0)),
            mock_conduit(53, 0.08, (30, 2, 0)),
        ]
        for connector, conduit in zip(box.connectors, conduits):
            connect(connector, conduit.connectors[0])
            self.doc.add(conduit)
        self.doc.add(box)

        orchestrator.run_largest_diameter(self.doc, _ids(5), self.rules, output=self.output)

        rows = self.output.print_table.call_args.kwargs["table_data"]
        self.assertEqual(rows, [[5, '0.96"', 3]])

    def test_bound_parameter_skips_shared_parameter_transaction(self):
        orchestrator.run_largest_diameter(self.doc, _ids(3), self.rules)
        self.doc.transaction_log = []

        orchestrator.run_largest_diameter(self.doc, _ids(3), self.rules)

        names = [name for name, _ in self.doc.transaction_log]
        self.assertNotIn("Making Shared Parameter", names)
        self.assertEqual(self.doc.transaction_log[0], ("Jbox Parameters", "start"))

    def test_non_length_definition_in_file(self):
        group = MockDefinitionGroup(self.rules["shared_param_group"], [
            MockDefinition(self.rules["target_param_name"], MockSpecTypeId.Number),
        ])
        self.doc.Application.shared_parameter_file = MockDefinitionFile([group])

        result = orchestrator.run_largest_diameter(self.doc, _ids(3), self.rules)

        self.assertIn("is not a length parameter", result["error"])
        self.assertEqual(self.doc.transaction_log, [
            ("Making Shared Parameter", "start"),
            ("Making Shared Parameter", "rollback"),
        ])
        self.assertEqual(self.doc.ParameterBindings.items, [])
        self.alert.assert_called_once()

    def test_millimeter_report(self):
        self.rules["report_units"] = "mm"
        orchestrator.run_largest_diameter(self.doc, _ids(3), self.rules, output=self.output)
        rows = self.output.print_table.call_args.kwargs["table_data"]
        self.assertEqual(rows, [[3, "25.39 mm", 2]])


if __name__ == "__main__":
    unittest.main()
