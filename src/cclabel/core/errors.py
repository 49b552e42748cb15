"""Exceptions raised by the label workflow and its gateways."""


class ClearCaseError(Exception):
    """Base class for cclabel errors."""


class ConfigurationError(ClearCaseError):
    """Raised when settings, file set and label do not make sense together.

    Always detected before any cleartool process is started.
    """


class CommandLineError(ClearCaseError):
    """Raised when a command could not be launched at all."""


class ToolExecutionError(ClearCaseError):
    """Raised by the workflow when a cleartool invocation could not be carried out.

    The underlying CommandLineError is chained as __cause__.
    """
