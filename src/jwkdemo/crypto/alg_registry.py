"""Algorithm registry for key provisioning and key operations.

Supported configurations:
  - RSA-OAEP            (encrypt/decrypt, SHA-256, JWK alg "RSA-OAEP-256")
  - RSASSA-PKCS1-v1_5   (sign/verify, SHA-256, JWK alg "RS256")
  - ECDSA               (sign/verify, curve P-256, SHA-256, JWK alg "ES256")

Lookups accept either the algorithm name or the JWK ``alg`` value, case
insensitive. RSA configurations default to a 2048-bit modulus with public
exponent 65537.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from ..errors import NotSupportedError

ALL_USAGES = ("encrypt", "decrypt", "sign", "verify")


@dataclass(frozen=True)
class AlgorithmSpec:
    name: str
    kty: str
    jwk_alg: str
    use: str
    public_usages: Tuple[str, ...]
    private_usages: Tuple[str, ...]
    hash_name: str = "SHA-256"
    modulus_length: Optional[int] = None
    public_exponent: Optional[int] = None
    named_curve: Optional[str] = None

    @property
    def usages(self) -> Tuple[str, ...]:
        return self.public_usages + self.private_usages

    def usages_for(self, key_type: str) -> Tuple[str, ...]:
        return self.private_usages if key_type == "private" else self.public_usages


RSA_OAEP = AlgorithmSpec(
    name="RSA-OAEP",
    kty="RSA",
    jwk_alg="RSA-OAEP-256",
    use="enc",
    public_usages=("encrypt",),
    private_usages=("decrypt",),
    modulus_length=2048,
    public_exponent=65537,
)

RSASSA_PKCS1_V1_5 = AlgorithmSpec(
    name="RSASSA-PKCS1-v1_5",
    kty="RSA",
    jwk_alg="RS256",
    use="sig",
    public_usages=("verify",),
    private_usages=("sign",),
    modulus_length=2048,
    public_exponent=65537,
)

ECDSA_P256 = AlgorithmSpec(
    name="ECDSA",
    kty="EC",
    jwk_alg="ES256",
    use="sig",
    public_usages=("verify",),
    private_usages=("sign",),
    named_curve="P-256",
)

_REGISTRY: Dict[str, AlgorithmSpec] = {}
for _spec in (RSA_OAEP, RSASSA_PKCS1_V1_5, ECDSA_P256):
    _REGISTRY[_spec.name.lower()] = _spec
    _REGISTRY[_spec.jwk_alg.lower()] = _spec
del _spec


def get_algorithm(alg: Union[str, AlgorithmSpec]) -> AlgorithmSpec:
    if isinstance(alg, AlgorithmSpec):
        return alg
    try:
        return _REGISTRY[str(alg).lower()]
    except KeyError:
        raise NotSupportedError(f"Unsupported alg: {alg}") from None


def supported_algorithms() -> Tuple[str, ...]:
    return (RSA_OAEP.name, RSASSA_PKCS1_V1_5.name, ECDSA_P256.name)


__all__ = [
    "AlgorithmSpec",
    "RSA_OAEP",
    "RSASSA_PKCS1_V1_5",
    "ECDSA_P256",
    "ALL_USAGES",
    "get_algorithm",
    "supported_algorithms",
]
