"""Language identification adapters."""

from .langdetect_adapter import LangDetectIdentifier

__all__ = ['LangDetectIdentifier']
