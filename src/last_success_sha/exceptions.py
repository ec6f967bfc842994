class UnrecoverableError(ValueError):
    """Base class for all unrecoverable errors raised while resolving the commit."""

    pass


class MissingInputError(UnrecoverableError):
    """Raised when a required action input is empty or not supplied."""

    pass


class MalformedRefError(UnrecoverableError):
    """Raised when no branch name can be derived from the triggering ref."""

    pass


class MalformedRepositoryError(UnrecoverableError):
    """Raised when the repository identifier is not of the form owner/repo."""

    pass


class NoWorkflowRunsError(UnrecoverableError):
    """Raised when the branch has no completed workflow runs to fall back to."""

    pass


class UpstreamApiError(UnrecoverableError):
    """Raised when listing workflow runs or jobs fails."""

    pass


class OutputWriteError(UnrecoverableError):
    """Raised when the output file cannot be opened or written."""

    pass
