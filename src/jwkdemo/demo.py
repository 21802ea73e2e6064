"""Demonstration sequences.

Each run_* coroutine performs a linear sequence of awaited provider calls,
logs every step, and reports provider rejections / malformed input in its
result instead of raising them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import load_config
from .crypto.alg_registry import RSA_OAEP, RSASSA_PKCS1_V1_5, get_algorithm
from .crypto.jwk import KeyPair
from .crypto.provider import Provider, default_provider
from .encryption import decrypt, encrypt
from .errors import CryptoError
from .keys import AlgorithmLike, generate_key_pair, load_key
from .samples import RSASSA_SAMPLE
from .signing import sign, verify
from .utils.logging import get_logger

log = get_logger()


def tamper_text(text: str) -> str:
    """Return ``text`` with its last character flipped (one bit of the code point)."""
    if not text:
        return "x"
    return text[:-1] + chr(ord(text[-1]) ^ 1)


@dataclass
class SigningDemoResult:
    algorithm: str
    message: str
    signature: Optional[str] = None
    verified: Optional[bool] = None
    tampered_verified: Optional[bool] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.verified is True and self.tampered_verified is False


@dataclass
class EncryptionDemoResult:
    message: str
    ciphertext: Optional[str] = None
    decrypted: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.decrypted == self.message


async def _sign_and_check(
    result: SigningDemoResult, key_pair: KeyPair, algorithm: AlgorithmLike, provider: Provider
) -> SigningDemoResult:
    private_key = await load_key(key_pair.private_key, algorithm, provider=provider)
    public_key = await load_key(key_pair.public_key, algorithm, provider=provider)
    result.signature = await sign(result.message, private_key, provider=provider)
    log.info("signature: %s", result.signature)
    result.verified = await verify(result.signature, result.message, public_key, provider=provider)
    log.info("verified: %s", result.verified)
    tampered = tamper_text(result.message)
    result.tampered_verified = await verify(result.signature, tampered, public_key, provider=provider)
    log.info("verified against %r: %s", tampered, result.tampered_verified)
    return result


async def run_signing_demo(
    key_pair: KeyPair = RSASSA_SAMPLE,
    message: Optional[str] = None,
    algorithm: AlgorithmLike = RSASSA_PKCS1_V1_5,
    *,
    provider: Optional[Provider] = None,
) -> SigningDemoResult:
    """Sign with a fixed pair, verify, then verify a tampered message."""
    spec = get_algorithm(algorithm)
    message = load_config().demo_message if message is None else message
    result = SigningDemoResult(algorithm=spec.name, message=message)
    try:
        await _sign_and_check(result, key_pair, spec, provider or default_provider())
    except CryptoError as e:
        log.error("%s signing demo failed: %s", spec.name, e)
        result.error = str(e)
    return result


async def run_roundtrip_demo(
    algorithm: AlgorithmLike,
    message: Optional[str] = None,
    *,
    provider: Optional[Provider] = None,
) -> SigningDemoResult:
    """Generate, export, re-import, sign and verify with a fresh pair."""
    spec = get_algorithm(algorithm)
    provider = provider or default_provider()
    message = load_config().demo_message if message is None else message
    result = SigningDemoResult(algorithm=spec.name, message=message)
    try:
        key_pair = await generate_key_pair(spec, provider=provider)
        log.info("public key: %s", key_pair.public_key.to_json())
        await _sign_and_check(result, key_pair, spec, provider)
    except CryptoError as e:
        log.error("%s round-trip demo failed: %s", spec.name, e)
        result.error = str(e)
    return result


async def run_encryption_demo(
    message: Optional[str] = None,
    key_pair: Optional[KeyPair] = None,
    *,
    provider: Optional[Provider] = None,
) -> EncryptionDemoResult:
    """Encrypt with the public half, decrypt with the private half, compare."""
    provider = provider or default_provider()
    message = load_config().demo_message if message is None else message
    result = EncryptionDemoResult(message=message)
    try:
        if key_pair is None:
            key_pair = await generate_key_pair(RSA_OAEP, provider=provider)
        public_key = await load_key(key_pair.public_key, RSA_OAEP, provider=provider)
        private_key = await load_key(key_pair.private_key, RSA_OAEP, provider=provider)
        result.ciphertext = await encrypt(message, public_key, provider=provider)
        log.info("ciphertext: %s", result.ciphertext)
        result.decrypted = await decrypt(result.ciphertext, private_key, provider=provider)
        log.info("decrypted matches: %s", result.decrypted == message)
    except CryptoError as e:
        log.error("encryption demo failed: %s", e)
        result.error = str(e)
    return result


__all__ = [
    "SigningDemoResult",
    "EncryptionDemoResult",
    "tamper_text",
    "run_signing_demo",
    "run_roundtrip_demo",
    "run_encryption_demo",
]
