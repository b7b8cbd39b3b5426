"""Custom exceptions for query operations."""


class MissingArgumentError(ValueError):
    """Raised when a required argument is None."""

    def __init__(self, param_name: str):
        self.param_name: str = param_name
        super().__init__(f"Argument '{param_name}' must not be None")
