from __future__ import annotations


class FormulaExtractorError(Exception):
    """Base class for errors raised by the extractor."""


class ParseError(FormulaExtractorError):
    """The input is not valid JSON or breaks the expected document shape."""


class InputNotFoundError(FormulaExtractorError):
    def __init__(self, path):
        super().__init__(f"Input file not found: {path}")
        self.path = path


class FieldWriteError(FormulaExtractorError):
    """Writing a single formula file failed.

    Never raised out of the writer; it is reported through the progress
    sink and the run continues with the next field.
    """

    def __init__(self, path, cause: Exception):
        super().__init__(f"{path.name} -> {getattr(cause, 'strerror', None) or cause}")
        self.path = path
        self.cause = cause
