"""Custom exceptions for Camera Translator."""

from typing import Optional


class CameraTranslatorError(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error description
        error_code: Optional error code for programmatic handling
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class ConfigurationError(CameraTranslatorError):
    """Error in configuration or settings.

    Attributes:
        config_key: The configuration key that caused the error (if applicable)
    """

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, error_code="CONFIG_ERROR")
        self.config_key = config_key


class DictionaryError(CameraTranslatorError):
    """Error loading or parsing the translation dictionary.

    Attributes:
        path: Path to the dictionary file when the error occurred
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, error_code="DICTIONARY_ERROR")
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{super().__str__()} (dictionary: {self.path})"
        return super().__str__()


class OCRError(CameraTranslatorError):
    """Error reported by a text recognition engine.

    Attributes:
        frame_id: Generation number of the frame being processed
    """

    def __init__(self, message: str, frame_id: Optional[int] = None):
        super().__init__(message, error_code="OCR_ERROR")
        self.frame_id = frame_id


class SpeechError(CameraTranslatorError):
    """Error from the speech synthesis backend.

    Attributes:
        voice_id: The voice identifier in use (if applicable)
    """

    def __init__(self, message: str, voice_id: Optional[str] = None):
        super().__init__(message, error_code="SPEECH_ERROR")
        self.voice_id = voice_id


class ValidationError(CameraTranslatorError):
    """Error validating inputs or parameters.

    Attributes:
        field: The field that failed validation (if applicable)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.field = field
