from __future__ import annotations

from typing import Protocol


class CapabilityUnavailableError(RuntimeError):
    pass


class SpeechToText(Protocol):
    """Optional speech input. Hosts without a recognizer report unsupported."""

    def is_supported(self) -> bool: ...

    def transcribe(self, audio: bytes) -> str: ...


class UnsupportedSpeechToText:
    def is_supported(self) -> bool:
        return False

    def transcribe(self, audio: bytes) -> str:
        raise CapabilityUnavailableError("Speech recognition is not supported in this environment.")
