from typing import Optional


class RaahError(Exception):
    """Base class for errors raised by the Raah backend."""


class LocalConversionError(RaahError):
    pass


class TransliteratorError(RaahError):
    """A single call to the remote transliteration service failed."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class TransliterationUnavailable(RaahError):
    """Neither the local tables nor the remote service produced an output."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"Transliteration service unavailable. {reason}. "
            "Please retry or choose a different script pair."
        )


class OCRProcessingFailed(RaahError):
    def __init__(self, reason: str = "OCR processing failed"):
        super().__init__(reason)
        self.reason = reason


class InvalidImage(OCRProcessingFailed):
    pass
