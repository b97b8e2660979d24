# -*- coding: utf-8 -*-
"""Configuration loader for Jbox Tools.

Loads rules from a JSON configuration file and fills in defaults
for any key the file leaves out.
"""
import io
import json
import os


DEFAULT_RULES = {
    'target_param_name': 'Largest Attached Diameter',
    'diameter_param_name': 'Diameter(Trade Size)',
    'shared_param_group': 'Electrical Fixtures',
    'jbox_category_name': 'Electrical Fixtures',
    # Revit internal units (feet)
    'connector_tolerance_ft': 1e-05,
    'report_units': 'in',
}


def _extension_root_from_lib():
    """Return the extension root directory from the lib location."""
    return os.path.dirname(os.path.dirname(__file__))


def get_default_rules_path():
    """Return the path to the default rules file."""
    return os.path.join(_extension_root_from_lib(), 'config', 'rules.default.json')


def _read_json(path):
    try:
        with io.open(path, 'r', encoding='utf-8') as fp:
            return json.load(fp)
    except UnicodeDecodeError:
        pass
    except ValueError:
        # Files saved by Notepad start with a BOM
        pass
    with open(path, 'rb') as fb:
        raw = fb.read()
    return json.loads(raw.decode('utf-8-sig'))


def load_rules(path=None):
    """Load rules from a JSON configuration file.

    Args:
        path: Path to the JSON config file. If None, the default rules file is used.

    Returns:
        Dict with every configuration key, defaults applied.
    """
    rules_path = path or get_default_rules_path()
    data = _read_json(rules_path)
    if not isinstance(data, dict):
        raise ValueError('Rules file must contain a JSON object: {0}'.format(rules_path))

    for key, val in DEFAULT_RULES.items():
        if key not in data:
            data[key] = val

    return data
