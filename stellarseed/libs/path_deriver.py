from dataclasses import dataclass, field
import logging

from bip_utils import (
    Bip32KeyError,
    Bip32Path,
    Bip32PathError,
    Bip32PathParser,
    Bip32Slip10Ed25519,
)

from ..errors import InvalidIndexError
from ..models import Curve

logger = logging.getLogger(__name__)

HARDENED_OFFSET = 2**31  # First hardened index
HARDENED_MARKERS = "'hp"

# Curve -> SLIP-10 key class
_CURVE_CLASSES = {
    Curve.ED25519: Bip32Slip10Ed25519,
}


@dataclass
class RawKey:
    """Key material produced by a SLIP-10 derivation.

    Buffers are mutable so that ``wipe`` can zero them once the key is no
    longer needed.
    """

    public: bytearray  # prefix byte + 32 byte key
    private: bytearray = field(repr=False)
    chain_code: bytearray = field(repr=False)

    def wipe(self) -> None:
        for buf in (self.private, self.chain_code):
            buf[:] = bytes(len(buf))


class PathDeriver:
    """Encapsulates all SLIP-10 operations of bip_utils"""

    @staticmethod
    def parse_path(path: str) -> Bip32Path:
        """Parse a BIP-32 path such as ``m/44'/148'/0'``"""
        for elem in path.split("/")[1:]:
            if not elem.strip():
                raise InvalidIndexError(path, f"Empty element in path: {path}")
            index = elem.strip().rstrip(HARDENED_MARKERS)
            if index.isdigit() and int(index) >= HARDENED_OFFSET:
                raise InvalidIndexError(path, f"Index out of range in path: {path}")
        try:
            return Bip32PathParser.Parse(path)
        except (Bip32PathError, ValueError) as e:
            raise InvalidIndexError(path) from e

    @staticmethod
    def derive(seed: bytes, curve: Curve, path: Bip32Path) -> RawKey:
        """Derive the key at ``path`` from a BIP-39 seed"""
        try:
            key_class = _CURVE_CLASSES[curve]
        except KeyError as e:
            raise ValueError(f"Unsupported curve: {curve}") from e

        path_str = path.ToStr()
        logger.debug("Deriving %s key at %s", curve.value, path_str)
        try:
            ctx = key_class.FromSeed(seed).DerivePath(path)
        except (Bip32KeyError, Bip32PathError, ValueError) as e:
            raise InvalidIndexError(path_str) from e

        return RawKey(
            public=bytearray(ctx.PublicKey().RawCompressed().ToBytes()),
            private=bytearray(ctx.PrivateKey().Raw().ToBytes()),
            chain_code=bytearray(ctx.ChainCode().ToBytes()),
        )
