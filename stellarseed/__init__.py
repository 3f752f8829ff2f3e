# stellarseed/__init__.py

# Core
from .seed_phrase import SeedPhrase, KeyPair, ACCOUNT_PATH
from .derive import derive_keypair, derive_keypair_at_index

# Models
from .models import (
    Curve,
    WordCount,
    SeedConfig,
    PublicKey,
    PrivateKey,
)
from .utils import SeedResult

# Errors
from .errors import (
    SeedPhraseException,
    InvalidEntropyError,
    InvalidPhraseError,
    InvalidIndexError,
    InvalidKeyError,
    KeyWipedError,
)

__all__ = [
    # Core
    "SeedPhrase",
    "KeyPair",
    "ACCOUNT_PATH",
    "derive_keypair",
    "derive_keypair_at_index",
    # ------------------------
    # Models
    "Curve",
    "WordCount",
    "SeedConfig",
    "PublicKey",
    "PrivateKey",
    "SeedResult",
    # ------------------------
    # Errors
    "SeedPhraseException",
    "InvalidEntropyError",
    "InvalidPhraseError",
    "InvalidIndexError",
    "InvalidKeyError",
    "KeyWipedError",
]
