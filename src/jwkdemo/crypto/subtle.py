"""Synchronous bindings onto pyca/cryptography.

Every primitive is delegated to pyca/cryptography; this module only maps JWK
members and algorithm parameters onto its API and enforces the preconditions
a platform engine would (usage set, algorithm, key half) before calling it.

ECDSA signatures use the raw r||s form (IEEE P1363) rather than DER so that
they stay interchangeable with browser-produced signatures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from ..codec import b64url_to_int, int_to_b64url
from ..errors import (
    DataError,
    InvalidAccessError,
    InvalidUsageError,
    NotSupportedError,
    OperationError,
)
from .alg_registry import ALL_USAGES, AlgorithmSpec
from .jwk import (
    EcPrivateKey,
    EcPublicKey,
    Jwk,
    KeyPair,
    RsaPrivateKey,
    RsaPublicKey,
    parse_jwk,
)

_HASHES = {"SHA-256": hashes.SHA256}
_CURVES = {"P-256": (ec.SECP256R1, 32)}


@dataclass(frozen=True)
class KeyHandle:
    """Opaque, immutable reference to a provider key bound to one algorithm."""

    algorithm: AlgorithmSpec
    type: str
    usages: Tuple[str, ...]
    extractable: bool
    key: Any = field(repr=False, compare=False)

    def allows(self, usage: str) -> bool:
        return usage in self.usages


def _hash(spec: AlgorithmSpec) -> hashes.HashAlgorithm:
    try:
        return _HASHES[spec.hash_name]()
    except KeyError:
        raise NotSupportedError(f"unsupported hash: {spec.hash_name}") from None


def _curve(name: Optional[str]) -> Tuple[ec.EllipticCurve, int]:
    try:
        curve_cls, size = _CURVES[name or ""]
    except KeyError:
        raise NotSupportedError(f"unsupported curve: {name}") from None
    return curve_cls(), size


def _oaep(spec: AlgorithmSpec) -> padding.OAEP:
    return padding.OAEP(mgf=padding.MGF1(algorithm=_hash(spec)), algorithm=_hash(spec), label=None)


def _require(handle: KeyHandle, usage: str, key_type: str) -> None:
    if usage not in handle.algorithm.usages:
        raise InvalidAccessError(f"{handle.algorithm.name} does not support {usage}")
    if handle.type != key_type:
        raise InvalidAccessError(f"{usage} requires a {key_type} key, got {handle.type}")
    if not handle.allows(usage):
        raise InvalidAccessError(f"key usages {list(handle.usages)} do not permit {usage}")


# Generation / export


def generate_key(spec: AlgorithmSpec, modulus_length: Optional[int] = None) -> Tuple[KeyHandle, KeyHandle]:
    """Return (public, private) extractable handles for a fresh key pair."""
    if spec.kty == "RSA":
        size = modulus_length or spec.modulus_length or 2048
        if size < 1024 or size % 8:
            raise NotSupportedError(f"unsupported RSA modulus length: {size}")
        sk: Any = rsa.generate_private_key(public_exponent=spec.public_exponent or 65537, key_size=size)
    elif spec.kty == "EC":
        curve, _ = _curve(spec.named_curve)
        sk = ec.generate_private_key(curve)
    else:
        raise NotSupportedError(f"unsupported key type: {spec.kty}")
    pub = KeyHandle(spec, "public", spec.public_usages, True, sk.public_key())
    priv = KeyHandle(spec, "private", spec.private_usages, True, sk)
    return pub, priv


def export_jwk(handle: KeyHandle) -> Jwk:
    if not handle.extractable:
        raise InvalidAccessError("key is not extractable")
    spec = handle.algorithm
    common = {"key_ops": handle.usages, "ext": True}
    if spec.kty == "RSA":
        common["alg"] = spec.jwk_alg
        if handle.type == "public":
            pn = handle.key.public_numbers()
            return RsaPublicKey(n=int_to_b64url(pn.n), e=int_to_b64url(pn.e), **common)
        sn = handle.key.private_numbers()
        pn = sn.public_numbers
        return RsaPrivateKey(
            n=int_to_b64url(pn.n),
            e=int_to_b64url(pn.e),
            d=int_to_b64url(sn.d),
            p=int_to_b64url(sn.p),
            q=int_to_b64url(sn.q),
            dp=int_to_b64url(sn.dmp1),
            dq=int_to_b64url(sn.dmq1),
            qi=int_to_b64url(sn.iqmp),
            **common,
        )
    # EC keys go out without "alg", matching browser exports
    _, size = _curve(spec.named_curve)
    if handle.type == "public":
        pn = handle.key.public_numbers()
        return EcPublicKey(crv=spec.named_curve, x=int_to_b64url(pn.x, size), y=int_to_b64url(pn.y, size), **common)
    sn = handle.key.private_numbers()
    pn = sn.public_numbers
    return EcPrivateKey(
        crv=spec.named_curve,
        x=int_to_b64url(pn.x, size),
        y=int_to_b64url(pn.y, size),
        d=int_to_b64url(sn.private_value, size),
        **common,
    )


def generate_key_pair(spec: AlgorithmSpec, modulus_length: Optional[int] = None) -> KeyPair:
    pub, priv = generate_key(spec, modulus_length)
    return KeyPair(public_key=export_jwk(pub), private_key=export_jwk(priv))


# Import


def _check_usages(spec: AlgorithmSpec, key_type: str, usages: Sequence[str]) -> Tuple[str, ...]:
    if not usages:
        raise InvalidUsageError("key_ops must name at least one operation")
    out = []
    for u in usages:
        if u not in ALL_USAGES:
            raise InvalidUsageError(f"unknown key operation: {u!r}")
        if u not in spec.usages_for(key_type):
            raise InvalidUsageError(f"{key_type} {spec.name} key cannot be used to {u}")
        if u not in out:
            out.append(u)
    return tuple(out)


def _rsa_from_jwk(jwk: Jwk) -> Any:
    try:
        pn = rsa.RSAPublicNumbers(b64url_to_int(jwk.e), b64url_to_int(jwk.n))
        if isinstance(jwk, RsaPublicKey):
            return pn.public_key()
        d = b64url_to_int(jwk.d)
        if jwk.has_crt:
            p, q = b64url_to_int(jwk.p), b64url_to_int(jwk.q)
            dmp1, dmq1, iqmp = b64url_to_int(jwk.dp), b64url_to_int(jwk.dq), b64url_to_int(jwk.qi)
        else:
            p, q = rsa.rsa_recover_prime_factors(pn.n, pn.e, d)
            dmp1, dmq1, iqmp = rsa.rsa_crt_dmp1(d, p), rsa.rsa_crt_dmq1(d, q), rsa.rsa_crt_iqmp(p, q)
        return rsa.RSAPrivateNumbers(p, q, d, dmp1, dmq1, iqmp, pn).private_key()
    except (ValueError, UnsupportedAlgorithm) as e:
        raise DataError("RSA JWK members do not form a valid key") from e


def _ec_from_jwk(jwk: Jwk, spec: AlgorithmSpec) -> Any:
    if jwk.crv != spec.named_curve:
        raise DataError(f"JWK curve {jwk.crv} does not match {spec.named_curve}")
    curve, size = _curve(jwk.crv)
    try:
        pn = ec.EllipticCurvePublicNumbers(b64url_to_int(jwk.x), b64url_to_int(jwk.y), curve)
        if isinstance(jwk, EcPublicKey):
            return pn.public_key()
        return ec.EllipticCurvePrivateNumbers(b64url_to_int(jwk.d), pn).private_key()
    except ValueError as e:
        raise DataError("EC JWK members do not form a valid key") from e


def import_jwk(data: Any, spec: AlgorithmSpec, extractable: bool = False) -> KeyHandle:
    jwk = parse_jwk(data)
    if jwk.kty != spec.kty:
        raise DataError(f"JWK kty {jwk.kty} cannot be used with {spec.name}")
    if jwk.alg is not None and jwk.alg != spec.jwk_alg:
        raise DataError(f"JWK alg {jwk.alg} does not match {spec.jwk_alg}")
    if jwk.use is not None and jwk.use != spec.use:
        raise DataError(f"JWK use {jwk.use} does not match {spec.use}")
    if jwk.ext is False and extractable:
        raise DataError("JWK is marked non-extractable")
    key_type = "private" if jwk.is_private else "public"
    usages = _check_usages(spec, key_type, jwk.key_ops)
    key = _rsa_from_jwk(jwk) if spec.kty == "RSA" else _ec_from_jwk(jwk, spec)
    return KeyHandle(spec, key_type, usages, extractable, key)


# Operations


def sign(handle: KeyHandle, data: bytes) -> bytes:
    _require(handle, "sign", "private")
    spec = handle.algorithm
    if spec.kty == "RSA":
        return handle.key.sign(data, padding.PKCS1v15(), _hash(spec))
    _, size = _curve(spec.named_curve)
    r, s = decode_dss_signature(handle.key.sign(data, ec.ECDSA(_hash(spec))))
    return r.to_bytes(size, "big") + s.to_bytes(size, "big")


def verify(handle: KeyHandle, signature: bytes, data: bytes) -> bool:
    _require(handle, "verify", "public")
    spec = handle.algorithm
    try:
        if spec.kty == "RSA":
            handle.key.verify(signature, data, padding.PKCS1v15(), _hash(spec))
        else:
            _, size = _curve(spec.named_curve)
            if len(signature) != 2 * size:
                return False
            r = int.from_bytes(signature[:size], "big")
            s = int.from_bytes(signature[size:], "big")
            handle.key.verify(encode_dss_signature(r, s), data, ec.ECDSA(_hash(spec)))
    except InvalidSignature:
        return False
    return True


def encrypt(handle: KeyHandle, data: bytes) -> bytes:
    _require(handle, "encrypt", "public")
    try:
        return handle.key.encrypt(data, _oaep(handle.algorithm))
    except ValueError as e:
        # plaintext longer than the modulus allows
        raise OperationError("encryption failed") from e


def decrypt(handle: KeyHandle, data: bytes) -> bytes:
    _require(handle, "decrypt", "private")
    try:
        return handle.key.decrypt(data, _oaep(handle.algorithm))
    except ValueError as e:
        raise OperationError("decryption failed") from e


__all__ = [
    "KeyHandle",
    "generate_key",
    "generate_key_pair",
    "export_jwk",
    "import_jwk",
    "sign",
    "verify",
    "encrypt",
    "decrypt",
]
