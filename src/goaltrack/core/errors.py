"""Error kinds raised by the core and its adapters."""


class IndexOutOfRange(IndexError):
    """A mutation referenced an objective or task position that does not exist."""


class InvalidImportFormat(ValueError):
    """Payload is not shaped as a sequence of objective records."""


class PersistenceReadFailure(Exception):
    """Storage slot is missing, unreadable or corrupt."""
