"""Dictionary source adapters."""

from .json_source import DictionaryDocument, JSONDictionarySource

__all__ = ['DictionaryDocument', 'JSONDictionarySource']
