from stellar_sdk import StrKey

from ..errors import InvalidKeyError

KEY_LENGTH = 32


class KeyEncoder:
    """Encapsulates all StrKey operations of stellar_sdk"""

    @staticmethod
    def encode_public(raw: bytes) -> str:
        """Encode a raw ed25519 public key as a G... account id"""
        return StrKey.encode_ed25519_public_key(bytes(raw))

    @staticmethod
    def encode_private(raw: bytes) -> str:
        """Encode a raw ed25519 private key as an S... secret seed"""
        return StrKey.encode_ed25519_secret_seed(bytes(raw))

    @staticmethod
    def decode_public(account_id: str) -> bytes:
        """Decode a G... account id into raw public key bytes"""
        try:
            return StrKey.decode_ed25519_public_key(account_id)
        except Exception as e:
            raise InvalidKeyError(f"Invalid public key: {account_id}") from e

    @staticmethod
    def decode_private(secret: str) -> bytes:
        """Decode an S... secret seed into raw private key bytes"""
        try:
            return StrKey.decode_ed25519_secret_seed(secret)
        except Exception as e:
            raise InvalidKeyError(f"Invalid secret seed: {secret[:4]}...") from e
