from typing import Union
import logging

from bip_utils import (
    Bip39Languages,
    Bip39MnemonicDecoder,
    Bip39MnemonicGenerator,
    Bip39MnemonicValidator,
    Bip39SeedGenerator,
    Bip39WordsNum,
)
from bip_utils.utils.mnemonic import MnemonicChecksumError

from ..errors import InvalidEntropyError, InvalidPhraseError

logger = logging.getLogger(__name__)

SEED_LENGTH = 64  # Length of a BIP-39 seed in bytes
ENTROPY_LENGTHS = (16, 20, 24, 28, 32)  # Supported entropy sizes in bytes


class MnemonicCodec:
    """Encapsulates all BIP-39 operations of bip_utils"""

    @staticmethod
    def encode(
        entropy: bytes, language: Bip39Languages = Bip39Languages.ENGLISH
    ) -> str:
        """Encode entropy as a checksummed mnemonic phrase"""
        if len(entropy) not in ENTROPY_LENGTHS:
            raise InvalidEntropyError(
                f"Entropy must be one of {ENTROPY_LENGTHS} bytes, got {len(entropy)}"
            )
        try:
            return Bip39MnemonicGenerator(language).FromEntropy(bytes(entropy)).ToStr()
        except ValueError as e:
            raise InvalidEntropyError(f"Invalid entropy: {e}") from e

    @staticmethod
    def validate(
        phrase: str, language: Bip39Languages = Bip39Languages.ENGLISH
    ) -> bytes:
        """Validate a phrase and return the entropy it encodes"""
        if phrase != phrase.lower():
            raise InvalidPhraseError("Seed phrase words must be lowercase")
        try:
            Bip39MnemonicValidator(language).Validate(phrase)
            return Bip39MnemonicDecoder(language).Decode(phrase)
        except MnemonicChecksumError as e:
            raise InvalidPhraseError("Invalid seed phrase checksum") from e
        except ValueError as e:
            raise InvalidPhraseError(f"Invalid seed phrase: {e}") from e

    @staticmethod
    def random(
        word_count: Union[int, Bip39WordsNum],
        language: Bip39Languages = Bip39Languages.ENGLISH,
    ) -> str:
        """Generate a random phrase with the given number of words"""
        try:
            words_num = Bip39WordsNum(int(word_count))
        except (TypeError, ValueError) as e:
            raise InvalidEntropyError(f"Unsupported word count: {word_count}") from e
        logger.debug("Generating random %d word seed phrase", words_num)
        return Bip39MnemonicGenerator(language).FromWordsNumber(words_num).ToStr()

    @staticmethod
    def derive_seed(
        phrase: str,
        passphrase: str = "",
        language: Bip39Languages = Bip39Languages.ENGLISH,
    ) -> bytes:
        """Derive the 64 byte BIP-39 seed of a phrase and passphrase"""
        try:
            return Bip39SeedGenerator(phrase, language).Generate(passphrase)
        except (MnemonicChecksumError, ValueError) as e:
            raise InvalidPhraseError(f"Invalid seed phrase: {e}") from e
