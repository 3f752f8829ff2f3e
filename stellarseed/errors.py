from __future__ import annotations
from typing import Optional


class SeedPhraseException(Exception):
    """Base exception for all seed phrase and key derivation errors."""

    def __init__(self, message: str, code: str):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidEntropyError(SeedPhraseException):
    """Raised when entropy length is not one of the supported sizes."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_ENTROPY")


class InvalidPhraseError(SeedPhraseException):
    """Raised when a phrase has unknown words, a bad checksum or word count."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_PHRASE")


class InvalidIndexError(SeedPhraseException):
    """Raised when a derivation path cannot be parsed or derived."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Invalid derivation path: {path}", "INVALID_INDEX")


class InvalidKeyError(SeedPhraseException):
    """Raised when an encoded key string cannot be decoded."""

    def __init__(self, message: str):
        super().__init__(message, "INVALID_KEY")


class KeyWipedError(SeedPhraseException):
    """Raised when a wiped key pair is read."""

    def __init__(self, message: str):
        super().__init__(message, "KEY_WIPED")
