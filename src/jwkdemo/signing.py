"""Sign and verify text messages.

Messages are UTF-8 encoded before signing; signatures travel as standard
base64. verify() answers False for a signature that does not match and only
raises for malformed input or a key that may not verify.
"""
from __future__ import annotations

from typing import Any, Optional

from .codec import bytes_to_text, text_to_bytes
from .crypto.alg_registry import RSASSA_PKCS1_V1_5
from .crypto.provider import Provider, default_provider
from .crypto.subtle import KeyHandle
from .keys import AlgorithmLike, load_key


async def sign(message: str, private_key: KeyHandle, *, provider: Optional[Provider] = None) -> str:
    provider = provider or default_provider()
    signature = await provider.sign(private_key, message.encode("utf-8"))
    return bytes_to_text(signature)


async def verify(
    signature: str,
    message: str,
    public_key: KeyHandle,
    *,
    provider: Optional[Provider] = None,
) -> bool:
    raw = text_to_bytes(signature)
    provider = provider or default_provider()
    return await provider.verify(public_key, raw, message.encode("utf-8"))


async def create_signature(
    message: str,
    private_jwk: Any,
    algorithm: AlgorithmLike = RSASSA_PKCS1_V1_5,
    *,
    provider: Optional[Provider] = None,
) -> str:
    provider = provider or default_provider()
    handle = await load_key(private_jwk, algorithm, provider=provider)
    return await sign(message, handle, provider=provider)


async def verify_signature(
    signature: str,
    message: str,
    public_jwk: Any,
    algorithm: AlgorithmLike = RSASSA_PKCS1_V1_5,
    *,
    provider: Optional[Provider] = None,
) -> bool:
    provider = provider or default_provider()
    handle = await load_key(public_jwk, algorithm, provider=provider)
    return await verify(signature, message, handle, provider=provider)


__all__ = ["sign", "verify", "create_signature", "verify_signature"]
