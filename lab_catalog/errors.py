class LabCatalogError(Exception):
    pass


class CatalogLoadError(LabCatalogError):
    """Remote catalog fetch failed or returned malformed data."""


class MissingCommandError(LabCatalogError):
    def __init__(self, message: str = "Command is missing!") -> None:
        super().__init__(message)


class ExecutionUnavailableError(LabCatalogError):
    def __init__(self, message: str = "Execution bridge not available.") -> None:
        super().__init__(message)
