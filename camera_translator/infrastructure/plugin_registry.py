"""Plugin registry - discovers language identifiers via entry points."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..application.ports.language_identifier import LanguageIdentifier

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry for discovering and loading plugins.

    Uses entry points for plugin discovery:
    - camera_translator.language_identifiers: LanguageIdentifier implementations

    Third-party packages can register plugins:

    [project.entry-points."camera_translator.language_identifiers"]
    my_identifier = "my_package:MyIdentifier"
    """

    IDENTIFIER_GROUP = "camera_translator.language_identifiers"

    @classmethod
    @lru_cache(maxsize=1)
    def discover_language_identifiers(cls) -> dict[str, type]:
        """Discover all available language identifiers.

        Returns:
            Dict mapping identifier names to classes
        """
        identifiers = {}

        for ep in entry_points(group=cls.IDENTIFIER_GROUP):
            try:
                identifiers[ep.name] = ep.load()
                logger.debug(f"Discovered language identifier: {ep.name}")
            except Exception as e:
                logger.warning(f"Failed to load language identifier {ep.name}: {e}")

        # Always include built-in identifiers
        from ..adapters.language.langdetect_adapter import LangDetectIdentifier
        identifiers["langdetect"] = LangDetectIdentifier

        return identifiers

    @classmethod
    def create_language_identifier(cls, name: str, **kwargs) -> "LanguageIdentifier":
        """Create language identifier instance by name.

        Args:
            name: Identifier name (e.g., 'langdetect')
            **kwargs: Constructor arguments

        Returns:
            LanguageIdentifier instance

        Raises:
            ValueError: If identifier not found
        """
        identifiers = cls.discover_language_identifiers()

        if name not in identifiers:
            available = ", ".join(identifiers.keys())
            raise ValueError(f"Unknown language identifier: {name}. Available: {available}")

        return identifiers[name](**kwargs)

    @classmethod
    def list_available_identifiers(cls) -> list[str]:
        """List available language identifier names."""
        return list(cls.discover_language_identifiers().keys())
