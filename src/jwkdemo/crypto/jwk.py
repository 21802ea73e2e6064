"""JSON Web Key models.

A JWK is one of four tagged variants; each carries only the members valid for
its key type and half:

  RsaPublicKey   kty=RSA  n, e
  RsaPrivateKey  kty=RSA  n, e, d (+ p, q, dp, dq, qi, all or none)
  EcPublicKey    kty=EC   crv, x, y
  EcPrivateKey   kty=EC   crv, x, y, d

Common members: alg, key_ops, ext, use. Unknown members are dropped on parse.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from ..codec import is_b64url
from ..errors import DataError


def _check_b64url(v: str) -> str:
    if not v or not is_b64url(v):
        raise ValueError("must be non-empty unpadded base64url")
    return v


class _JwkBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    kty: str
    alg: Optional[str] = None
    key_ops: Tuple[str, ...] = ()
    ext: Optional[bool] = None
    use: Optional[str] = None

    @property
    def is_private(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        out = self.model_dump(exclude_none=True)
        if self.key_ops:
            out["key_ops"] = list(self.key_ops)
        else:
            out.pop("key_ops", None)
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), sort_keys=True)


class RsaPublicKey(_JwkBase):
    kty: Literal["RSA"] = "RSA"
    n: str
    e: str

    @field_validator("n", "e")
    @classmethod
    def check_members(cls, v: str) -> str:
        return _check_b64url(v)


class RsaPrivateKey(_JwkBase):
    kty: Literal["RSA"] = "RSA"
    n: str
    e: str
    d: str
    p: Optional[str] = None
    q: Optional[str] = None
    dp: Optional[str] = None
    dq: Optional[str] = None
    qi: Optional[str] = None

    @field_validator("n", "e", "d")
    @classmethod
    def check_members(cls, v: str) -> str:
        return _check_b64url(v)

    @field_validator("p", "q", "dp", "dq", "qi")
    @classmethod
    def check_crt_members(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_b64url(v)

    @model_validator(mode="after")
    def check_crt_complete(self) -> "RsaPrivateKey":
        present = [f for f in ("p", "q", "dp", "dq", "qi") if getattr(self, f) is not None]
        if present and len(present) != 5:
            raise ValueError("RSA CRT members p, q, dp, dq, qi must be all present or all absent")
        return self

    @property
    def is_private(self) -> bool:
        return True

    @property
    def has_crt(self) -> bool:
        return self.p is not None

    def public_key(self, key_ops: Tuple[str, ...] = ()) -> RsaPublicKey:
        return RsaPublicKey(n=self.n, e=self.e, alg=self.alg, key_ops=key_ops, ext=self.ext, use=self.use)


class EcPublicKey(_JwkBase):
    kty: Literal["EC"] = "EC"
    crv: str
    x: str
    y: str

    @field_validator("x", "y")
    @classmethod
    def check_members(cls, v: str) -> str:
        return _check_b64url(v)


class EcPrivateKey(_JwkBase):
    kty: Literal["EC"] = "EC"
    crv: str
    x: str
    y: str
    d: str

    @field_validator("x", "y", "d")
    @classmethod
    def check_members(cls, v: str) -> str:
        return _check_b64url(v)

    @property
    def is_private(self) -> bool:
        return True

    def public_key(self, key_ops: Tuple[str, ...] = ()) -> EcPublicKey:
        return EcPublicKey(
            crv=self.crv, x=self.x, y=self.y, alg=self.alg, key_ops=key_ops, ext=self.ext, use=self.use
        )


Jwk = Union[RsaPublicKey, RsaPrivateKey, EcPublicKey, EcPrivateKey]

_VARIANTS = {
    ("RSA", False): RsaPublicKey,
    ("RSA", True): RsaPrivateKey,
    ("EC", False): EcPublicKey,
    ("EC", True): EcPrivateKey,
}


def parse_jwk(data: Union[Jwk, Mapping[str, Any], str, bytes]) -> Jwk:
    """Turn a mapping or JSON text into the matching JWK variant."""
    if isinstance(data, _JwkBase):
        return data  # type: ignore[return-value]
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except ValueError as e:
            raise DataError("JWK is not valid JSON") from e
    if not isinstance(data, Mapping):
        raise DataError("JWK must be a JSON object")
    kty = data.get("kty")
    if not isinstance(kty, str):
        raise DataError(f"unsupported kty: {kty!r}")
    model = _VARIANTS.get((kty, "d" in data))
    if model is None:
        raise DataError(f"unsupported kty: {kty!r}")
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "jwk" for err in e.errors())
        raise DataError(f"invalid {kty} JWK ({fields})") from e


def load_jwk_file(path: Union[str, Path]) -> Jwk:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DataError(f"cannot read JWK file {path}") from e
    return parse_jwk(text)


def dump_jwk(jwk: Jwk, path: Union[str, Path]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(jwk.to_dict(), indent=2, sort_keys=True) + "\n", encoding="utf-8")
    return p


@dataclass(frozen=True)
class KeyPair:
    public_key: Jwk
    private_key: Jwk

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {"publicKey": self.public_key.to_dict(), "privateKey": self.private_key.to_dict()}


__all__ = [
    "Jwk",
    "RsaPublicKey",
    "RsaPrivateKey",
    "EcPublicKey",
    "EcPrivateKey",
    "KeyPair",
    "parse_jwk",
    "load_jwk_file",
    "dump_jwk",
]
