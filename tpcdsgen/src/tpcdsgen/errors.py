"""Exception types raised by the generation engine."""

from typing import Optional


class GenerationError(Exception):
    """
    Raised when generation of a table chunk cannot continue.

    Carries the table, row number and chunk the fault happened in so the run
    can be reproduced.
    """

    def __init__(
        self,
        message: str,
        table: Optional[str] = None,
        row_number: Optional[int] = None,
        chunk_number: Optional[int] = None,
    ):
        self.table = table
        self.row_number = row_number
        self.chunk_number = chunk_number
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        context = []
        if self.table is not None:
            context.append(f"table={self.table}")
        if self.row_number is not None:
            context.append(f"row={self.row_number}")
        if self.chunk_number is not None:
            context.append(f"chunk={self.chunk_number}")
        if context:
            return f"{message} ({', '.join(context)})"
        return message


class InvalidOptionError(GenerationError):
    """Raised when a run option has an unusable value."""

    def __init__(self, option: str, value: object, reason: Optional[str] = None):
        self.option = option
        self.value = value
        message = f"Invalid value for {option}: '{value}'"
        if reason:
            message += f". {reason}"
        super().__init__(message)


class ConfigurationError(GenerationError):
    """Raised when the requested tables cannot be generated as configured."""

    pass


class InvariantViolationError(GenerationError):
    """Raised when engine state is inconsistent; indicates a defect."""

    pass


class OutputError(GenerationError):
    """Raised when an output sink cannot be opened or written."""

    pass
