# list_manager/errors.py

class ListManagerError(Exception):
    """Base class for all list manager errors."""
    pass

class ConfigurationError(ListManagerError):
    """Error related to configuration (page size, column set)."""
    pass

class MissingFieldError(ListManagerError, KeyError):
    """A record has no value for the requested field."""

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Record has no field '{self.field}'"

class RecordsFileError(ListManagerError):
    """Error related to loading a records file."""
    pass
