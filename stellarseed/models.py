# stellarseed/models.py
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from bip_utils import Bip39Languages
from stellar_sdk import Keypair

from .errors import InvalidKeyError
from .libs.key_encoder import KeyEncoder, KEY_LENGTH


class Curve(Enum):
    """Elliptic curves supported by the path deriver"""

    ED25519 = "ed25519"


class WordCount(IntEnum):
    """Number of words of a generated mnemonic"""

    WORDS_12 = 12
    WORDS_15 = 15
    WORDS_18 = 18
    WORDS_21 = 21
    WORDS_24 = 24


@dataclass(frozen=True)
class SeedConfig:
    """Configuration for SeedPhrase"""

    language: Bip39Languages = Bip39Languages.ENGLISH
    curve: Curve = Curve.ED25519


def _check_length(raw: bytes, kind: str) -> None:
    if len(raw) != KEY_LENGTH:
        raise InvalidKeyError(f"{kind} must be {KEY_LENGTH} bytes, got {len(raw)}")


@dataclass(frozen=True)
class PublicKey:
    """Raw ed25519 public key in the Stellar account namespace"""

    raw: bytes

    def __post_init__(self):
        object.__setattr__(self, "raw", bytes(self.raw))
        _check_length(self.raw, "Public key")

    @property
    def strkey(self) -> str:
        """Account id (G...)"""
        return KeyEncoder.encode_public(self.raw)

    @classmethod
    def from_strkey(cls, account_id: str) -> "PublicKey":
        return cls(KeyEncoder.decode_public(account_id))

    def __str__(self) -> str:
        return self.strkey


@dataclass(frozen=True)
class PrivateKey:
    """Raw ed25519 private key (secret seed)"""

    raw: bytes = field(repr=False)

    def __post_init__(self):
        object.__setattr__(self, "raw", bytes(self.raw))
        _check_length(self.raw, "Private key")

    @property
    def strkey(self) -> str:
        """Secret seed (S...)"""
        return KeyEncoder.encode_private(self.raw)

    @classmethod
    def from_strkey(cls, secret: str) -> "PrivateKey":
        return cls(KeyEncoder.decode_private(secret))

    def to_keypair(self) -> Keypair:
        """stellar_sdk Keypair able to sign with this key"""
        return Keypair.from_raw_ed25519_seed(self.raw)
