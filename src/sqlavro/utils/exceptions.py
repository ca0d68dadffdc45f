class AcceleratorError(Exception):
    """
    Base exception for all schema generation errors
    """
    pass


class MetadataUnavailableError(AcceleratorError, OSError):
    """
    Raised when column metadata cannot be retrieved for a table
    """
    pass


class InvalidTypeOverrideError(AcceleratorError, ValueError):
    """
    Raised when a user type override names a type outside the
    supported vocabulary
    """

    def __init__(self, column, token):
        super().__init__(
            f"Cannot convert column '{column}' to Avro type '{token}'"
        )
        self.column = column
        self.token = token


class InvalidDecimalError(AcceleratorError, ValueError):
    """
    Raised when decimal precision/scale cannot form a valid logical type
    """
    pass
