"""Exception hierarchy shared by both command flows."""


class PfError(Exception):
    """Base class for every user-facing failure."""
    pass


class ValidationError(PfError):
    """Raised when a URL, type name or path is rejected."""
    pass


class NetworkError(PfError):
    """Raised when fetching the sample payload fails."""
    pass


class GenerationError(PfError):
    """Raised when the inference engine fails."""
    pass


class EmptyGenerationError(GenerationError):
    """Raised when inference produced nothing worth writing."""

    def __init__(self, message: str = "Generated types are empty, check the API response data"):
        super().__init__(message)


class GitError(PfError):
    """Raised when a git command fails."""
    pass


class MergeConflictError(GitError):
    """Raised when a pull stops on merge conflicts."""

    def __init__(self, message: str, files: list[str] | None = None):
        super().__init__(message)
        self.files = files or []


class PromptAborted(PfError):
    """Raised when the user hits Ctrl-C or EOF at a prompt."""
    pass
