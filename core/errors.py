class AmpacityError(Exception):
    """Base class for every error raised by the ampacity engine."""

class SizeNotFoundError(AmpacityError, LookupError):
    """The conductor type has no table entry for the requested size."""

    def __init__(self, conductor_type, size: str):
        self.conductor_type = conductor_type
        self.size = size
        super().__init__(f"Size '{size}' mm² is not listed for {conductor_type.label}")

class InvalidSelectionError(AmpacityError, ValueError):
    """A bundle or spacing/count selection is not a key of its factor table."""

    def __init__(self, table: str, selection):
        self.table = table
        self.selection = selection
        super().__init__(f"{selection!r} is not a valid selection for {table}")
