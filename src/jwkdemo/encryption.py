"""RSA-OAEP encryption of text messages; ciphertexts travel as base64."""
from __future__ import annotations

from typing import Any, Optional

from .codec import bytes_to_text, text_to_bytes
from .crypto.alg_registry import RSA_OAEP
from .crypto.provider import Provider, default_provider
from .crypto.subtle import KeyHandle
from .errors import OperationError
from .keys import AlgorithmLike, load_key


async def encrypt(plaintext: str, public_key: KeyHandle, *, provider: Optional[Provider] = None) -> str:
    provider = provider or default_provider()
    ciphertext = await provider.encrypt(public_key, plaintext.encode("utf-8"))
    return bytes_to_text(ciphertext)


async def decrypt(ciphertext: str, private_key: KeyHandle, *, provider: Optional[Provider] = None) -> str:
    raw = text_to_bytes(ciphertext)
    provider = provider or default_provider()
    plaintext = await provider.decrypt(private_key, raw)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OperationError("decrypted payload is not UTF-8 text") from e


async def encrypt_with_jwk(
    plaintext: str,
    public_jwk: Any,
    algorithm: AlgorithmLike = RSA_OAEP,
    *,
    provider: Optional[Provider] = None,
) -> str:
    provider = provider or default_provider()
    handle = await load_key(public_jwk, algorithm, provider=provider)
    return await encrypt(plaintext, handle, provider=provider)


async def decrypt_with_jwk(
    ciphertext: str,
    private_jwk: Any,
    algorithm: AlgorithmLike = RSA_OAEP,
    *,
    provider: Optional[Provider] = None,
) -> str:
    provider = provider or default_provider()
    handle = await load_key(private_jwk, algorithm, provider=provider)
    return await decrypt(ciphertext, handle, provider=provider)


__all__ = ["encrypt", "decrypt", "encrypt_with_jwk", "decrypt_with_jwk"]
