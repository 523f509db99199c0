class ValidationError(ValueError):
    """Base class for every input rejected by the grid or the finder."""


class EmptyInputError(ValidationError):
    def __init__(self, message: str = "empty grid"):
        super().__init__(message)


class SizeExceededError(ValidationError):
    def __init__(self, rows: int, cols: int, limit: int):
        self.rows = rows
        self.cols = cols
        self.limit = limit
        super().__init__(f"The grid size cannot exceed {limit}x{limit}, got {rows}x{cols}")


class RaggedInputError(ValidationError):
    def __init__(self, row_index: int, length: int, expected: int):
        self.row_index = row_index
        self.length = length
        self.expected = expected
        super().__init__(
            f"All grid rows must have the same length: row {row_index} has {length}, expected {expected}"
        )


class NullStreamError(ValidationError):
    def __init__(self, message: str = "word stream is None"):
        super().__init__(message)


class EmptyWordError(ValidationError):
    def __init__(self, message: str = "query words must not be empty"):
        super().__init__(message)
