"""Failure taxonomy for the validate-and-report flow.

These never reach HTTP clients: the service and the batch pipeline turn them
into ``ValidationOutcome`` data. ``str(exc)`` is the display line.
"""


class ValidationFailure(Exception):
    """Base class – a failure that ends validation with a single error line."""

    prefix = ""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}{detail}")


class SchemaParseError(ValidationFailure):
    prefix = "Parse error: "


class DataParseError(ValidationFailure):
    prefix = "Parse error: "


class SchemaCompileError(ValidationFailure):
    """The schema parsed as JSON but the engine cannot use it."""

    prefix = "Schema error: "
