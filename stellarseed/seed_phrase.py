# stellarseed/seed_phrase.py
from typing import Optional, Union
import logging

from .errors import InvalidIndexError, KeyWipedError
from .libs.mnemonic_codec import MnemonicCodec
from .libs.path_deriver import PathDeriver, RawKey
from .libs.key_encoder import KEY_LENGTH
from .models import Curve, PrivateKey, PublicKey, SeedConfig, WordCount

logger = logging.getLogger(__name__)

# Stellar account namespace (SEP-0005)
ACCOUNT_PATH = "m/44'/148'"


class KeyPair:
    """A key derived from a seed phrase, with typed Stellar views.

    Instances are only produced by SeedPhrase derivations. The raw key is
    owned exclusively and can be zeroed with ``wipe`` or by using the pair
    as a context manager. A wiped pair refuses to expose any key.
    """

    def __init__(self, *args, **kwargs):
        raise TypeError("KeyPair instances are created by SeedPhrase derivations")

    @classmethod
    def _from_raw(cls, raw_key: RawKey, path: str) -> "KeyPair":
        key_pair = cls.__new__(cls)
        key_pair._raw_key = raw_key
        key_pair._wiped = False
        key_pair.path = path
        return key_pair

    @property
    def wiped(self) -> bool:
        return self._wiped

    def _check_not_wiped(self) -> None:
        if self._wiped:
            raise KeyWipedError(f"Key pair at {self.path} has been wiped")

    def public(self) -> PublicKey:
        """Public key, without the deriver's prefix byte"""
        self._check_not_wiped()
        raw = bytes(self._raw_key.public[1:])
        assert len(raw) == KEY_LENGTH, f"deriver returned {len(raw)} byte public key"
        return PublicKey(raw)

    def private(self) -> PrivateKey:
        """Private key (raw ed25519 seed)"""
        self._check_not_wiped()
        return PrivateKey(bytes(self._raw_key.private))

    def wipe(self) -> None:
        """Zero the private key material held by this pair"""
        self._raw_key.wipe()
        self._wiped = True

    def __enter__(self) -> "KeyPair":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __repr__(self) -> str:
        if self._wiped:
            return f"KeyPair(path={self.path!r}, wiped=True)"
        return f"KeyPair(path={self.path!r}, public={self.public().strkey!r})"


class SeedPhrase:
    """A validated BIP-39 mnemonic bound to a derivation curve.

    SeedPhrase values are immutable. Seeds and keys are recomputed on every
    call, so the passphrase can differ between calls.
    """

    def __init__(self, phrase: str, config: Optional[SeedConfig] = None):
        """
        Initialize from an already normalized, checksum-valid phrase.

        Use the ``from_*`` constructors for untrusted input.

        :param phrase: Mnemonic words separated by single spaces
        :param config: Optional configuration (language and curve)
        """
        self._config = config or SeedConfig()
        self._phrase = phrase

    @property
    def curve(self) -> Curve:
        return self._config.curve

    @property
    def config(self) -> SeedConfig:
        return self._config

    @classmethod
    def new_ed25519(
        cls, phrase: str, config: Optional[SeedConfig] = None
    ) -> "SeedPhrase":
        """Bind a valid phrase to the ed25519 curve"""
        config = config or SeedConfig()
        return cls(phrase, SeedConfig(language=config.language, curve=Curve.ED25519))

    @classmethod
    def from_entropy(
        cls, entropy: bytes, config: Optional[SeedConfig] = None
    ) -> "SeedPhrase":
        """
        Create a seed phrase encoding ``entropy``.

        :param entropy: 16, 20, 24, 28 or 32 bytes
        :raises InvalidEntropyError: If the entropy length is not supported
        """
        config = config or SeedConfig()
        return cls.new_ed25519(MnemonicCodec.encode(entropy, config.language), config)

    @classmethod
    def from_seed_phrase(
        cls, seed_phrase: str, config: Optional[SeedConfig] = None
    ) -> "SeedPhrase":
        """
        Create a seed phrase from user input.

        Runs of whitespace are collapsed to single spaces and the ends are
        trimmed before the checksum is validated.

        :raises InvalidPhraseError: On unknown words, bad checksum or word count
        """
        config = config or SeedConfig()
        phrase = " ".join(seed_phrase.split())
        MnemonicCodec.validate(phrase, config.language)
        return cls.new_ed25519(phrase, config)

    from_str = from_seed_phrase

    @classmethod
    def random(
        cls,
        word_count: Union[WordCount, int] = WordCount.WORDS_24,
        config: Optional[SeedConfig] = None,
    ) -> "SeedPhrase":
        """
        Generate a fresh random seed phrase.

        :raises InvalidEntropyError: If ``word_count`` is not a supported length
        """
        config = config or SeedConfig()
        return cls.new_ed25519(MnemonicCodec.random(word_count, config.language), config)

    def phrase(self) -> str:
        """Normalized phrase text"""
        return self._phrase

    def entropy(self) -> bytes:
        """Entropy encoded by the phrase"""
        return MnemonicCodec.validate(self._phrase, self._config.language)

    def to_seed(self, passphrase: Optional[str] = None) -> bytes:
        """64 byte BIP-39 seed; ``None`` is the same as an empty passphrase"""
        return MnemonicCodec.derive_seed(
            self._phrase, passphrase or "", self._config.language
        )

    def from_path_string(
        self, path: str, passphrase: Optional[str] = None
    ) -> KeyPair:
        """
        Derive the key at ``m/44'/148'`` followed by ``path``.

        :param path: Path suffix such as ``"/0'"`` or ``""`` for the account root
        :param passphrase: Optional BIP-39 passphrase
        :raises InvalidIndexError: If the full path cannot be parsed or derived
        """
        full_path = f"{ACCOUNT_PATH}{path}"
        try:
            parsed = PathDeriver.parse_path(full_path)
            raw_key = PathDeriver.derive(self.to_seed(passphrase), self.curve, parsed)
        except InvalidIndexError as e:
            logger.error("Invalid derivation path: %s", full_path)
            raise InvalidIndexError(full_path) from e
        return KeyPair._from_raw(raw_key, full_path)

    def from_path_index(
        self, index: int, passphrase: Optional[str] = None
    ) -> KeyPair:
        """Derive the key at ``m/44'/148'/{index}'``"""
        if not isinstance(index, int) or index < 0:
            raise InvalidIndexError(f"{ACCOUNT_PATH}/{index}'")
        return self.from_path_string(f"/{index}'", passphrase)

    def empty_key(self, passphrase: Optional[str] = None) -> KeyPair:
        """Derive the account root key at ``m/44'/148'``"""
        return self.from_path_string("", passphrase)

    def __bytes__(self) -> bytes:
        return self.to_seed(None)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SeedPhrase):
            return NotImplemented
        return self._config == other._config and self._phrase == other._phrase

    def __hash__(self) -> int:
        return hash((self._config, self._phrase))

    def __repr__(self) -> str:
        return f"SeedPhrase(curve={self.curve.name}, words={len(self._phrase.split())})"
