"""Tests for the speech service."""

import pytest

from ..application.services.speech_service import SpeechService
from ..domain.entities.voice import Utterance, Voice, VoiceQuality
from ..domain.services.speech_text import clamp_unit, clean_text_for_speech
from ..domain.value_objects.config import SpeechConfig
from ..domain.value_objects.language import Language
from ..exceptions import SpeechError


class FakeSynthesizer:
    """Records utterances instead of playing them."""

    def __init__(self, voices=None, fail=False):
        self.voices = voices or []
        self.fail = fail
        self.error = SpeechError("audio device unavailable")
        self.spoken: list[Utterance] = []
        self.is_speaking = False
        self.is_paused = False
        self.stop_calls = 0

    def available_voices(self):
        return list(self.voices)

    def speak(self, utterance):
        if self.fail:
            raise self.error
        self.spoken.append(utterance)
        self.is_speaking = True

    def stop(self):
        self.stop_calls += 1
        self.is_speaking = False
        self.is_paused = False

    def pause(self):
        self.is_paused = True

    def resume(self):
        self.is_paused = False


YELDA = Voice("com.apple.ttsbundle.Yelda-compact", "tr-TR", "Yelda")
SAMANTHA = Voice("com.apple.ttsbundle.Samantha-compact", "en-US", "Samantha", VoiceQuality.ENHANCED)
DANIEL = Voice("com.apple.ttsbundle.Daniel-compact", "en-GB", "Daniel")


@pytest.fixture
def synthesizer():
    return FakeSynthesizer([SAMANTHA, DANIEL, YELDA])


@pytest.fixture
def service(synthesizer):
    return SpeechService(synthesizer)


class TestSpeak:
    """Tests for speaking text."""

    def test_translation_pitch_and_fallback_voice(self, service, synthesizer):
        utterance = service.speak_translation("Salam", Language.AZERBAIJANI)
        assert utterance.voice == YELDA
        assert utterance.pitch == 1.1
        assert utterance.rate == 0.5
        assert utterance.volume == 1.0
        assert synthesizer.spoken == [utterance]
        assert service.current_utterance == utterance

    def test_original_pitch(self, service):
        assert service.speak_original("Hello", Language.ENGLISH).pitch == 1.0

    def test_no_voice_uses_platform_default(self, service):
        assert service.speak("Привет", Language.RUSSIAN).voice is None

    def test_text_cleaned(self, service, synthesizer):
        service.speak("Yaxşı [coffee] Dr. Smith", Language.AZERBAIJANI)
        assert synthesizer.spoken[0].text == "Yaxşı Doctor Smith"

    def test_only_markers_not_spoken(self, service, synthesizer):
        assert service.speak("[xyzzy]", Language.ENGLISH) is None
        assert synthesizer.spoken == []

    def test_stops_current_speech(self, service, synthesizer):
        service.speak("One", Language.ENGLISH)
        service.speak("Two", Language.ENGLISH)
        assert synthesizer.stop_calls == 1
        assert [u.text for u in synthesizer.spoken] == ["One", "Two"]

    def test_disabled(self, synthesizer):
        service = SpeechService(synthesizer, SpeechConfig(enabled=False))
        assert service.speak("Hello", Language.ENGLISH) is None
        assert synthesizer.spoken == []

    def test_backend_failure_recorded(self):
        service = SpeechService(FakeSynthesizer([SAMANTHA], fail=True))
        assert service.speak("Hello", Language.ENGLISH) is None
        assert service.error == "Speech playback failed"

        service._synthesizer.fail = False
        service.speak("Hello", Language.ENGLISH)
        assert service.error is None

    def test_backend_failure_tagged_with_voice(self):
        synthesizer = FakeSynthesizer([SAMANTHA], fail=True)
        SpeechService(synthesizer).speak("Hello", Language.ENGLISH)
        assert synthesizer.error.voice_id == SAMANTHA.identifier

    def test_backend_failure_without_voice(self):
        synthesizer = FakeSynthesizer([], fail=True)
        SpeechService(synthesizer).speak("Hello", Language.ENGLISH)
        assert synthesizer.error.voice_id is None


class TestControls:
    """Tests for playback controls and settings."""

    def test_pause_resume(self, service, synthesizer):
        service.speak("Hello", Language.ENGLISH)
        service.pause()
        assert synthesizer.is_paused
        service.resume()
        assert not synthesizer.is_paused

    def test_pause_when_idle_is_noop(self, service, synthesizer):
        service.pause()
        assert not synthesizer.is_paused

    def test_stop_clears_current_utterance(self, service):
        service.speak("Hello", Language.ENGLISH)
        service.stop()
        assert service.current_utterance is None
        assert not service.is_speaking

    def test_rate_and_volume_clamped(self, service):
        service.set_rate(1.5)
        service.set_volume(-0.2)
        assert service.rate == 1.0
        assert service.volume == 0.0

    def test_toggle_enabled_stops_speech(self, service, synthesizer):
        service.speak("Hello", Language.ENGLISH)
        assert service.toggle_enabled() is False
        assert not synthesizer.is_speaking
        assert service.toggle_enabled() is True


class TestVoiceInfo:

    def test_enhanced(self, service):
        assert service.voice_info(Language.ENGLISH) == (2, "Enhanced")

    def test_standard(self):
        service = SpeechService(FakeSynthesizer([DANIEL]))
        assert service.voice_info(Language.ENGLISH) == (1, "Standard")

    def test_not_available(self, service):
        assert service.voice_info(Language.GERMAN) == (0, "Not Available")


class TestSpeechText:

    @pytest.mark.parametrize("text,expected", [
        ("Salam [world]", "Salam"),
        ("[a] b [c]", "b"),
        ("Mr. & Mrs. Smith", "Mister and Misses Smith"),
        ("50% off", "50percent off"),
        ("  spaced   out ", "spaced out"),
    ])
    def test_clean_text(self, text, expected):
        assert clean_text_for_speech(text) == expected

    @pytest.mark.parametrize("value,expected", [(-1.0, 0.0), (0.3, 0.3), (2.0, 1.0)])
    def test_clamp_unit(self, value, expected):
        assert clamp_unit(value) == expected
