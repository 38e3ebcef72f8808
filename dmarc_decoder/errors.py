from enum import Enum
from typing import Optional


class DecodeErrorKind(Enum):
    MISSING_PARAMETER = "missing parameter"
    MALFORMED_PARAMETER = "malformed parameter"
    INVALID_PARAMETER_VALUE = "invalid parameter value"
    OUT_OF_BOUNDS = "value out of bounds"
    INVALID_URI = "invalid URI"
    INVALID_DOCUMENT = "invalid document"


class DecodeError(Exception):
    """Base class of all decoding failures.

    ``parameter`` names the offending tag of a policy record. For
    :class:`InvalidDocument` it describes the structural problem instead.
    """

    kind: DecodeErrorKind

    def __init__(self, parameter: str):
        super().__init__(parameter)
        self.parameter = parameter

    def __str__(self):
        return f"dmarc: error with parameter '{self.parameter}': {self.kind.value}"


class MissingParameter(DecodeError):
    kind = DecodeErrorKind.MISSING_PARAMETER


class MalformedParameter(DecodeError):
    kind = DecodeErrorKind.MALFORMED_PARAMETER


class InvalidParameterValue(DecodeError):
    kind = DecodeErrorKind.INVALID_PARAMETER_VALUE


class OutOfBounds(DecodeError):
    kind = DecodeErrorKind.OUT_OF_BOUNDS


class InvalidURI(DecodeError):
    kind = DecodeErrorKind.INVALID_URI

    def __init__(self, parameter: str, index: Optional[int] = None):
        super().__init__(parameter)
        self.index = index

    def __str__(self):
        if self.index is None:
            return super().__str__()
        return f"{super().__str__()} (uri index {self.index})"


class InvalidDocument(DecodeError):
    kind = DecodeErrorKind.INVALID_DOCUMENT

    def __str__(self):
        return f"dmarc: invalid aggregate report: {self.parameter}"


class ReportExtractionError(Exception):
    def __init__(self, filename: str):
        super().__init__(filename)
        self.filename = filename

    def __str__(self):
        return f"Failed to extract an aggregate report from '{self.filename}'."
