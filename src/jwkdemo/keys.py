"""Key provisioning: generate, import and export key pairs in JWK form."""
from __future__ import annotations

from typing import Any, Optional, Union

from .config import load_config
from .crypto.alg_registry import AlgorithmSpec, get_algorithm
from .crypto.jwk import Jwk, KeyPair
from .crypto.provider import Provider, default_provider
from .crypto.subtle import KeyHandle
from .utils.logging import get_logger

log = get_logger()

AlgorithmLike = Union[str, AlgorithmSpec]


async def generate_key_pair(
    algorithm: AlgorithmLike,
    *,
    modulus_length: Optional[int] = None,
    provider: Optional[Provider] = None,
) -> KeyPair:
    """Create a fresh key pair and return both halves as exported JWKs.

    RSA sizes default to JWKDEMO_RSA_MODULUS_LENGTH (2048).
    """
    spec = get_algorithm(algorithm)
    if spec.kty == "RSA" and modulus_length is None:
        modulus_length = load_config().rsa_modulus_length
    provider = provider or default_provider()
    pair = await provider.generate_key_pair(spec, modulus_length)
    log.debug("generated %s key pair", spec.name)
    return pair


async def load_key(
    jwk: Any,
    algorithm: AlgorithmLike,
    *,
    extractable: bool = False,
    provider: Optional[Provider] = None,
) -> KeyHandle:
    """Import a JWK, bound to ``algorithm`` and to the JWK's own key_ops."""
    spec = get_algorithm(algorithm)
    provider = provider or default_provider()
    handle = await provider.import_key(jwk, spec, extractable)
    log.debug("loaded %s %s key for %s", spec.name, handle.type, ",".join(handle.usages))
    return handle


async def export_key(handle: KeyHandle, *, provider: Optional[Provider] = None) -> Jwk:
    provider = provider or default_provider()
    return await provider.export_key(handle)


__all__ = ["generate_key_pair", "load_key", "export_key", "KeyHandle", "KeyPair"]
