"""Command-line interface for dictionary translation and region ranking."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError as PydanticValidationError, model_validator

from ...adapters.dictionary.json_source import JSONDictionarySource
from ...application.services.translation_engine import TranslationEngine
from ...config import FILTER_DEFAULTS
from ...domain.entities.text_region import TextObservation
from ...domain.services.region_ranking import rank_observations
from ...domain.value_objects.config import FilterConfig, TranslationConfig
from ...domain.value_objects.geometry import BoundingBox
from ...domain.value_objects.language import Language
from ...exceptions import CameraTranslatorError, ConfigurationError, ValidationError
from ...infrastructure.plugin_registry import PluginRegistry
from ...utils.env import resolve_dictionary_path, setup_logging

logger = logging.getLogger(__name__)

LANGUAGE_CHOICES = [lang.value for lang in Language]


class ObservationRecord(BaseModel):
    """One observation in a ``rank`` input file.

    The region is either a normalized ``bbox`` or a pixel ``polygon``
    together with the ``frame_size`` it was measured in.
    """
    text: str
    confidence: float = Field(ge=0.0, le=1.0)
    bbox: tuple[float, float, float, float] | None = None  # x, y, width, height (normalized)
    polygon: list[tuple[float, float]] | None = None  # pixel points, top-left origin
    frame_size: tuple[int, int] | None = None  # width, height in pixels

    @model_validator(mode='after')
    def check_region(self) -> ObservationRecord:
        if (self.bbox is None) == (self.polygon is None):
            raise ValueError("Exactly one of 'bbox' or 'polygon' is required")
        if self.polygon is not None and self.frame_size is None:
            raise ValueError("'polygon' requires 'frame_size'")
        return self

    def to_observation(self) -> TextObservation:
        if self.polygon is not None:
            box = BoundingBox.from_polygon(self.polygon, *self.frame_size)
        else:
            box = BoundingBox.from_rect(*self.bbox)
            if not box.is_normalized:
                raise ValueError(f"bbox {self.bbox} lies outside the unit square")
        return TextObservation(text=self.text, bounding_box=box, confidence=self.confidence)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="camera-translator",
        description="Offline dictionary translation for camera text"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        help="Dictionary JSON file (default: $CAMERA_TRANSLATOR_DICTIONARY or bundled)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # translate
    translate = subparsers.add_parser("translate", help="Translate text")
    translate.add_argument("text", help="Text to translate")
    translate.add_argument(
        "-f", "--from",
        dest="source",
        choices=LANGUAGE_CHOICES,
        help="Source language (identified from the text if omitted)"
    )
    translate.add_argument(
        "-t", "--to",
        dest="target",
        choices=LANGUAGE_CHOICES,
        default=Language.AZERBAIJANI.value,
        help="Target language (default: az)"
    )
    translate.add_argument(
        "--detector",
        default="langdetect",
        metavar="NAME",
        help="Language identifier used when --from is omitted, or 'none' (default: langdetect)"
    )
    translate.add_argument(
        "--think-time",
        type=float,
        default=0.0,
        metavar="SECONDS",
        help="Simulated backend latency (default: 0)"
    )

    # rank
    rank = subparsers.add_parser("rank", help="Filter and rank OCR observations")
    rank.add_argument(
        "observations",
        type=Path,
        help="JSON list of {text, confidence, bbox: [x, y, w, h]} or {text, confidence, polygon, frame_size}"
    )
    rank.add_argument(
        "--min-confidence",
        type=float,
        default=FILTER_DEFAULTS.min_confidence,
        help=f"Minimum confidence (default: {FILTER_DEFAULTS.min_confidence})"
    )
    rank.add_argument(
        "--min-length",
        type=int,
        default=FILTER_DEFAULTS.min_length,
        help=f"Minimum text length (default: {FILTER_DEFAULTS.min_length})"
    )
    rank.add_argument(
        "--min-height",
        type=float,
        default=FILTER_DEFAULTS.min_text_height,
        help=f"Minimum box height as frame fraction (default: {FILTER_DEFAULTS.min_text_height})"
    )
    rank.add_argument(
        "--max-results",
        type=int,
        default=FILTER_DEFAULTS.max_results,
        help=f"Maximum regions kept (default: {FILTER_DEFAULTS.max_results})"
    )

    # lookup
    lookup = subparsers.add_parser("lookup", help="Search dictionary for similar entries")
    lookup.add_argument("text", help="Search term")
    lookup.add_argument(
        "-t", "--to",
        dest="target",
        choices=LANGUAGE_CHOICES,
        default=Language.AZERBAIJANI.value,
        help="Target language (default: az)"
    )

    # stats
    subparsers.add_parser("stats", help="Show dictionary statistics")

    return parser


def build_engine(parsed: argparse.Namespace, think_time: float = 0.0) -> TranslationEngine:
    """Create an engine for the selected dictionary and identifier."""
    identifier = None
    detector = getattr(parsed, "detector", "none")
    if detector != "none":
        try:
            identifier = PluginRegistry.create_language_identifier(detector)
        except ValueError as e:
            raise ConfigurationError(str(e), config_key="detector") from e

    config = TranslationConfig(
        dictionary_path=resolve_dictionary_path(parsed.dictionary),
        think_time_seconds=think_time,
    )
    return TranslationEngine(
        JSONDictionarySource(config.dictionary_path),
        identifier=identifier,
        config=config,
    )


def load_observations(path: Path) -> list[TextObservation]:
    """Read observations from a JSON file."""
    try:
        records = TypeAdapter(list[ObservationRecord]).validate_json(path.read_bytes())
    except OSError as e:
        raise ValidationError(f"Cannot read {path}: {e}", field="observations") from e
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid observations file {path}: {e}", field="observations") from e

    try:
        return [r.to_observation() for r in records]
    except ValueError as e:
        raise ValidationError(f"Invalid bounding box in {path}: {e}", field="bbox") from e


def cmd_translate(parsed: argparse.Namespace) -> int:
    engine = build_engine(parsed, think_time=parsed.think_time)
    if not engine.state.dictionary_status.is_ready:
        logger.error(engine.state.dictionary_status.display_text)
        return 1

    source = Language(parsed.source) if parsed.source else None
    result = asyncio.run(engine.resolve(parsed.text, source, Language(parsed.target)))

    print(result.translated_text)
    logger.info(
        f"{result.source_language.value} -> {result.target_language.value}, "
        f"confidence {result.confidence:.1f}"
    )
    return 0


def cmd_rank(parsed: argparse.Namespace) -> int:
    try:
        config = FilterConfig(
            min_confidence=parsed.min_confidence,
            min_length=parsed.min_length,
            min_text_height=parsed.min_height,
            max_results=parsed.max_results,
        )
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid filter settings: {e}") from e
    observations = load_observations(parsed.observations)
    regions = rank_observations(observations, config)

    logger.info(f"Kept {len(regions)} of {len(observations)} observations")
    for region in regions:
        print(f"{region.confidence:.2f}\t{region.text}")
    return 0


def cmd_lookup(parsed: argparse.Namespace) -> int:
    engine = build_engine(parsed)
    if not engine.state.dictionary_status.is_ready:
        logger.error(engine.state.dictionary_status.display_text)
        return 1

    matches = engine.search_similar(parsed.text, Language(parsed.target))
    if not matches:
        logger.warning(f"No entries similar to '{parsed.text}'")
        return 1
    for line in matches:
        print(line)
    return 0


def cmd_stats(parsed: argparse.Namespace) -> int:
    engine = build_engine(parsed)
    if not engine.state.dictionary_status.is_ready:
        logger.error(engine.state.dictionary_status.display_text)
        return 1

    words, phrases, languages = engine.dictionary_stats()
    print(f"Words: {words}")
    print(f"Phrases: {phrases}")
    print(f"Languages: {', '.join(languages)}")
    return 0


COMMANDS = {
    "translate": cmd_translate,
    "rank": cmd_rank,
    "lookup": cmd_lookup,
    "stats": cmd_stats,
}


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    setup_logging(logging.DEBUG if parsed.verbose else logging.INFO)

    try:
        return COMMANDS[parsed.command](parsed)
    except CameraTranslatorError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
