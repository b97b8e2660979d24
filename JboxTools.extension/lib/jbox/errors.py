# -*- coding: utf-8 -*-


class JboxToolsError(Exception):
    """Base class for errors raised by the jbox package."""


class ConnectorGeometryError(JboxToolsError):
    """Two connectors of comparable kinds could not be compared by position.

    Means the model breaks the assumption that physical connectors
    always expose an origin. Not recoverable for the current batch.
    """

    def __init__(self, first_kind, second_kind):
        self.first_kind = first_kind
        self.second_kind = second_kind
        super(ConnectorGeometryError, self).__init__(
            "Connector 1 Type: {0} | Connector 2 Type: {1}".format(first_kind, second_kind)
        )


class ParameterKindError(JboxToolsError, TypeError):
    """A parameter write was requested for an unsupported value kind."""


class SharedParameterTypeError(JboxToolsError):
    """The shared parameter file defines the target name with a non-length type."""

    def __init__(self, param_name, group_name):
        self.param_name = param_name
        self.group_name = group_name
        super(SharedParameterTypeError, self).__init__(
            "Shared parameter '{0}' in group '{1}' is not a length parameter. "
            "Rename or remove it in the shared parameter file and rerun this program.".format(
                param_name, group_name)
        )
