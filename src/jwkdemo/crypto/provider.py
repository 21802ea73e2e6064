from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Optional, Protocol, runtime_checkable

from anyio import to_thread

from . import subtle
from .alg_registry import AlgorithmSpec
from .jwk import Jwk, KeyPair
from .subtle import KeyHandle


@runtime_checkable
class Provider(Protocol):
    async def generate_key_pair(self, spec: AlgorithmSpec, modulus_length: Optional[int] = None) -> KeyPair: ...
    async def import_key(self, jwk: Any, spec: AlgorithmSpec, extractable: bool = False) -> KeyHandle: ...
    async def export_key(self, handle: KeyHandle) -> Jwk: ...
    async def sign(self, handle: KeyHandle, data: bytes) -> bytes: ...
    async def verify(self, handle: KeyHandle, signature: bytes, data: bytes) -> bool: ...
    async def encrypt(self, handle: KeyHandle, data: bytes) -> bytes: ...
    async def decrypt(self, handle: KeyHandle, data: bytes) -> bytes: ...


@dataclass
class PycaProvider:
    """Provider backed by pyca/cryptography.

    Each request runs on an anyio worker thread so RSA key generation and
    private-key operations never block the event loop. Handles are immutable,
    so concurrent requests against one handle need no coordination.
    """

    async def _run(self, fn, *args):
        return await to_thread.run_sync(partial(fn, *args))

    async def generate_key_pair(self, spec: AlgorithmSpec, modulus_length: Optional[int] = None) -> KeyPair:
        return await self._run(subtle.generate_key_pair, spec, modulus_length)

    async def import_key(self, jwk: Any, spec: AlgorithmSpec, extractable: bool = False) -> KeyHandle:
        return await self._run(subtle.import_jwk, jwk, spec, extractable)

    async def export_key(self, handle: KeyHandle) -> Jwk:
        return await self._run(subtle.export_jwk, handle)

    async def sign(self, handle: KeyHandle, data: bytes) -> bytes:
        return await self._run(subtle.sign, handle, data)

    async def verify(self, handle: KeyHandle, signature: bytes, data: bytes) -> bool:
        return await self._run(subtle.verify, handle, signature, data)

    async def encrypt(self, handle: KeyHandle, data: bytes) -> bytes:
        return await self._run(subtle.encrypt, handle, data)

    async def decrypt(self, handle: KeyHandle, data: bytes) -> bytes:
        return await self._run(subtle.decrypt, handle, data)


def default_provider() -> Provider:
    return PycaProvider()


__all__ = ["Provider", "PycaProvider", "default_provider"]
