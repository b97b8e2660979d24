# -*- coding: utf-8 -*-
"""Shared parameter file lookup and project binding.

The target parameter is a length-typed instance parameter bound to the
Electrical Fixtures category. Binding functions change the document and
must run inside a transaction.
"""
from pyrevit import DB

from utils_revit import log_debug

from jbox.errors import SharedParameterTypeError


STATUS_BOUND = 'bound'
STATUS_REUSED = 'reused'
STATUS_CREATED = 'created'


def _length_spec():
    # Revit 2022+ uses ForgeTypeId specs, older versions ParameterType
    spec_type_id = getattr(DB, 'SpecTypeId', None)
    if spec_type_id is not None:
        return spec_type_id.Length
    return DB.ParameterType.Length


def is_length_definition(definition):
    """True when a Definition holds a length value."""
    get_data_type = getattr(definition, 'GetDataType', None)
    if get_data_type is not None:
        try:
            return get_data_type().TypeId == _length_spec().TypeId
        except Exception:
            pass
    try:
        return definition.ParameterType == DB.ParameterType.Length
    except Exception:
        return False


def find_group(param_file, group_name):
    for group in param_file.Groups:
        if group.Name == group_name:
            return group
    return None


def find_definition(param_file, group_name, param_name):
    """Return the definition ``param_name`` from group ``group_name`` of the shared parameter file."""
    group = find_group(param_file, group_name)
    if group is None:
        return None
    for definition in group.Definitions:
        if definition.Name == param_name:
            return definition
    return None


def find_bound_definition(doc, param_name):
    """Return the length definition named ``param_name`` bound in the project, or None."""
    it = doc.ParameterBindings.ForwardIterator()
    while it.MoveNext():
        definition = it.Key
        if definition.Name == param_name and is_length_definition(definition):
            return definition
    return None


def create_definition(param_file, group_name, param_name):
    group = find_group(param_file, group_name)
    if group is None:
        group = param_file.Groups.Create(group_name)
    options = DB.ExternalDefinitionCreationOptions(param_name, _length_spec())
    options.Visible = True
    return group.Definitions.Create(options)


def bind_to_category(doc, definition, category):
    app = doc.Application
    categories = app.Create.NewCategorySet()
    categories.Insert(category)
    binding = app.Create.NewInstanceBinding(categories)
    return doc.ParameterBindings.Insert(definition, binding)


def electrical_fixtures_category(doc):
    return doc.Settings.Categories.get_Item(DB.BuiltInCategory.OST_ElectricalFixtures)


def ensure_shared_parameter(doc, param_file, group_name, param_name, category):
    """Make sure ``param_name`` is bound as an instance parameter of ``category``.

    Returns:
        STATUS_BOUND if the project already had it, STATUS_REUSED if the
        definition came from the shared parameter file, STATUS_CREATED if
        it had to be added to the file first.

    Raises:
        SharedParameterTypeError: the file already holds a definition named
            ``param_name`` in ``group_name`` that is not a length.
    """
    if find_bound_definition(doc, param_name) is not None:
        log_debug("Parameter '{0}' already bound".format(param_name))
        return STATUS_BOUND

    status = STATUS_REUSED
    definition = find_definition(param_file, group_name, param_name)
    if definition is None:
        definition = create_definition(param_file, group_name, param_name)
        status = STATUS_CREATED
    elif not is_length_definition(definition):
        raise SharedParameterTypeError(param_name, group_name)

    bind_to_category(doc, definition, category)
    log_debug("Parameter '{0}' {1} and bound".format(param_name, status))
    return status
