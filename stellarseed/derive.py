from typing import Optional

from .models import SeedConfig
from .seed_phrase import KeyPair, SeedPhrase
from .utils.decorators import SeedResult, handle_errors


@handle_errors
def derive_keypair(
    phrase: str,
    path: str = "",
    passphrase: Optional[str] = None,
    config: Optional[SeedConfig] = None,
) -> KeyPair:
    """
    Derives a key pair from a seed phrase and a path suffix.

    Args:
        phrase: Seed phrase, whitespace is normalized
        path: Suffix appended to m/44'/148' ("" for the account root)
        passphrase: Optional BIP-39 passphrase
        config: Optional seed configuration

    Returns:
        SeedResult wrapping the KeyPair, or the error code on failure:
        INVALID_PHRASE or INVALID_INDEX
    """
    seed_phrase = SeedPhrase.from_seed_phrase(phrase, config)
    return seed_phrase.from_path_string(path, passphrase)


@handle_errors
def derive_keypair_at_index(
    phrase: str,
    index: int,
    passphrase: Optional[str] = None,
    config: Optional[SeedConfig] = None,
) -> KeyPair:
    """
    Derives the key pair of account ``index`` (m/44'/148'/index').

    Returns:
        SeedResult wrapping the KeyPair, or the error code on failure
    """
    seed_phrase = SeedPhrase.from_seed_phrase(phrase, config)
    return seed_phrase.from_path_index(index, passphrase)


__all__ = ["derive_keypair", "derive_keypair_at_index", "SeedResult"]
