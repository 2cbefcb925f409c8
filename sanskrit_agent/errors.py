"""
Exceptions raised by the translation pipeline.

InputError and ModelServiceError propagate to the caller unchanged.
DictionaryServiceError is absorbed by the orchestrator and turned into a warning.
"""


class TranslationError(Exception):
    """Base exception for all translation errors."""
    pass


class InputError(TranslationError):
    """Raised when the submitted text cannot be translated as given."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ModelServiceError(TranslationError):
    """Raised when the language model fails or returns unusable output."""

    MESSAGE = "Model service failed"

    def __init__(self, reason: str = ""):
        message = self.MESSAGE
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.reason = reason


class EmptyResponseError(ModelServiceError):
    """Raised when the model reply has no text content."""

    MESSAGE = "Empty response from model"


class ResponseParseError(ModelServiceError):
    """Raised when the model reply is not valid JSON."""

    MESSAGE = "Failed to parse model response"


class InvalidStructureError(ModelServiceError):
    """Raised when the parsed reply has no `words` array."""

    MESSAGE = "Invalid response structure: missing words array"


class InvalidEntryError(ModelServiceError):
    """Raised when an element of the `words` array is malformed."""

    MESSAGE = "Invalid word entry structure"


class DictionaryServiceError(TranslationError):
    """Raised when the dictionary lookup fails."""

    def __init__(self, reason: str = ""):
        message = "Dictionary service failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.reason = reason
