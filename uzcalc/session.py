"""
Voice session — the microphone toggle around the calculator.

Defines the two states a session can be in and the transitions driven by
the button and by recognizer callbacks. The audio engine itself is
injected: anything with `start()` and `stop()` will do.

    IDLE ──toggle──▶ LISTENING ──toggle / end / error──▶ IDLE

Results arrive through handle_result() while listening; the calculator
itself stays stateless.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Protocol

from .models import CalculationResult
from .pipeline import Calculator

logger = logging.getLogger(__name__)

LISTENING_TEXT = "Eshitilmoqda..."
UNSUPPORTED_TEXT = (
    "Brauzeringiz SpeechRecognition ni qo'llab-quvvatlamaydi. "
    "(Chrome/HTTPS tavsiya qilinadi)"
)
UNKNOWN_ERROR = "noma'lum"


class Recognizer(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...


class ListeningState(str, Enum):
    IDLE = "IDLE"  # Button released, recognizer stopped
    LISTENING = "LISTENING"  # Recognizer running, waiting for a phrase


class VoiceSession:
    """Tracks what the microphone button and the two text panes show."""

    def __init__(
        self,
        recognizer: Optional[Recognizer],
        calculator: Calculator | None = None,
    ):
        self.recognizer = recognizer
        self.calculator = calculator or Calculator()
        self.state = ListeningState.IDLE
        self.transcript_text = ""
        self.result_text = ""
        self.last_result: CalculationResult | None = None

    @property
    def supported(self) -> bool:
        return self.recognizer is not None

    def toggle(self) -> ListeningState:
        """Button press: start listening when idle, stop when listening."""
        if self.recognizer is None:
            self.transcript_text = UNSUPPORTED_TEXT
            return self.state

        if self.state is ListeningState.IDLE:
            self.recognizer.start()
            self.state = ListeningState.LISTENING
            self.transcript_text = LISTENING_TEXT
        else:
            self.recognizer.stop()
            self.state = ListeningState.IDLE
        return self.state

    def handle_result(self, text: str) -> CalculationResult:
        """Recognizer produced a phrase: show it and its result."""
        transcript = text.strip()
        self.transcript_text = transcript
        result = self.calculator.run(transcript)
        self.result_text = result.display
        self.last_result = result
        return result

    def handle_end(self) -> None:
        """Recognizer stopped on its own (silence, timeout)."""
        self.state = ListeningState.IDLE

    def handle_error(self, error: str | None = None) -> None:
        """Recognizer reported an error: show it and drop back to idle."""
        logger.error("Recognizer error: %s", error)
        self.transcript_text = f"Xatolik: {error or UNKNOWN_ERROR}"
        self.state = ListeningState.IDLE
