"""JWK key provisioning, signatures and RSA-OAEP encryption on pyca/cryptography."""

from .codec import bytes_to_text, text_to_bytes
from .crypto.alg_registry import ECDSA_P256, RSA_OAEP, RSASSA_PKCS1_V1_5, AlgorithmSpec, get_algorithm
from .crypto.jwk import EcPrivateKey, EcPublicKey, Jwk, KeyPair, RsaPrivateKey, RsaPublicKey, parse_jwk
from .crypto.subtle import KeyHandle
from .encryption import decrypt, encrypt
from .errors import (
    CryptoError,
    DataError,
    InvalidAccessError,
    InvalidUsageError,
    MalformedInputError,
    NotSupportedError,
    OperationError,
    ProviderRejection,
)
from .keys import export_key, generate_key_pair, load_key
from .signing import create_signature, sign, verify, verify_signature

__all__ = [
    "bytes_to_text",
    "text_to_bytes",
    "AlgorithmSpec",
    "RSA_OAEP",
    "RSASSA_PKCS1_V1_5",
    "ECDSA_P256",
    "get_algorithm",
    "Jwk",
    "KeyPair",
    "RsaPublicKey",
    "RsaPrivateKey",
    "EcPublicKey",
    "EcPrivateKey",
    "parse_jwk",
    "KeyHandle",
    "generate_key_pair",
    "load_key",
    "export_key",
    "sign",
    "verify",
    "create_signature",
    "verify_signature",
    "encrypt",
    "decrypt",
    "CryptoError",
    "ProviderRejection",
    "NotSupportedError",
    "InvalidAccessError",
    "InvalidUsageError",
    "OperationError",
    "MalformedInputError",
    "DataError",
]
