"""Custom exceptions for Chaptercutter."""


class ChaptercutterError(Exception):
    """Base exception for all Chaptercutter errors."""

    exit_code: int = 1
    default_hint: str | None = None

    def __init__(
        self,
        message: str,
        details: str | None = None,
        hint: str | None = None,
    ):
        self.message = message
        self.details = details
        self.hint = hint or self.default_hint
        super().__init__(message)


# Extraction errors (20-29)
class ExtractionError(ChaptercutterError):
    """Error while turning a file into raw text."""

    exit_code = 20


class InvalidPDFError(ExtractionError):
    """PDF is corrupt or unreadable."""

    exit_code = 21
    default_hint = "Ensure the file is a valid PDF document"


class NoContentError(ExtractionError):
    """No extractable text found."""

    exit_code = 22
    default_hint = "The PDF may be scanned/image-only. OCR is not supported."


class UnsupportedFileError(ExtractionError):
    """Input file type is not handled."""

    exit_code = 23
    default_hint = "Supported inputs: .pdf, .txt, .md"


# Configuration errors (30-39)
class ConfigError(ChaptercutterError):
    """Configuration error."""

    exit_code = 30


class InvalidSettingsError(ConfigError):
    """Settings failed validation."""

    exit_code = 31
    default_hint = "Check CHAPTERCUTTER_* variables and ~/.chaptercutter/config.yaml"
