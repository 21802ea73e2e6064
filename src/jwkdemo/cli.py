from __future__ import annotations

import argparse
import json
from functools import partial
from pathlib import Path

import anyio

from .config import load_config
from .crypto.alg_registry import ECDSA_P256, RSA_OAEP, RSASSA_PKCS1_V1_5, get_algorithm, supported_algorithms
from .crypto.jwk import Jwk, dump_jwk, load_jwk_file
from .demo import run_encryption_demo, run_roundtrip_demo, run_signing_demo
from .encryption import decrypt_with_jwk, encrypt_with_jwk
from .errors import CryptoError, DataError
from .keys import generate_key_pair
from .signing import create_signature, verify_signature
from .utils.logging import get_logger

log = get_logger()


def _algorithm_for(args: argparse.Namespace, jwk: Jwk, default):
    # explicit --alg wins, then the JWK's own alg, then its key type
    if args.alg:
        return get_algorithm(args.alg)
    if jwk.alg:
        return get_algorithm(jwk.alg)
    return ECDSA_P256 if jwk.kty == "EC" else default


async def cmd_generate(args: argparse.Namespace) -> int:
    spec = get_algorithm(args.alg)
    pair = await generate_key_pair(spec, modulus_length=args.modulus_length)
    if args.out_dir:
        prefix = Path(args.out_dir) / (args.name or spec.jwk_alg.lower())
        pub = dump_jwk(pair.public_key, f"{prefix}_public.json")
        priv = dump_jwk(pair.private_key, f"{prefix}_private.json")
        print(f"wrote {pub} and {priv}")
    else:
        print(json.dumps(pair.to_dict(), indent=2, sort_keys=True))
    return 0


async def cmd_sign(args: argparse.Namespace) -> int:
    jwk = load_jwk_file(args.key)
    print(await create_signature(args.message, jwk, _algorithm_for(args, jwk, RSASSA_PKCS1_V1_5)))
    return 0


async def cmd_verify(args: argparse.Namespace) -> int:
    jwk = load_jwk_file(args.key)
    ok = await verify_signature(args.signature, args.message, jwk, _algorithm_for(args, jwk, RSASSA_PKCS1_V1_5))
    print(json.dumps({"verified": ok}))
    return 0 if ok else 1


async def cmd_public(args: argparse.Namespace) -> int:
    jwk = load_jwk_file(args.key)
    if not jwk.is_private:
        raise DataError(f"{args.key} already holds a public key")
    spec = _algorithm_for(args, jwk, RSASSA_PKCS1_V1_5)
    pub = jwk.public_key(key_ops=spec.public_usages)
    if args.out:
        print(f"wrote {dump_jwk(pub, args.out)}")
    else:
        print(json.dumps(pub.to_dict(), indent=2, sort_keys=True))
    return 0


async def cmd_encrypt(args: argparse.Namespace) -> int:
    jwk = load_jwk_file(args.key)
    print(await encrypt_with_jwk(args.message, jwk, RSA_OAEP))
    return 0


async def cmd_decrypt(args: argparse.Namespace) -> int:
    jwk = load_jwk_file(args.key)
    print(await decrypt_with_jwk(args.ciphertext, jwk, RSA_OAEP))
    return 0


async def cmd_demo(args: argparse.Namespace) -> int:
    if args.which == "sign":
        result = await run_signing_demo(message=args.message)
    elif args.which == "ecdsa":
        result = await run_roundtrip_demo(ECDSA_P256, message=args.message)
    else:
        result = await run_encryption_demo(message=args.message)
    print(json.dumps({"ok": result.ok, "error": result.error}))
    return 0 if result.ok else 1


async def _dispatch(args: argparse.Namespace) -> int:
    try:
        return await args.func(args)
    except CryptoError as e:
        log.error("%s failed: %s", args.cmd, e)
        return 2


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    p = argparse.ArgumentParser("jwkdemo")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_gen = sub.add_parser("generate")
    p_gen.add_argument("--alg", choices=supported_algorithms(), default=RSASSA_PKCS1_V1_5.name)
    p_gen.add_argument("--modulus-length", dest="modulus_length", type=int, default=None)
    p_gen.add_argument("--out-dir", dest="out_dir", nargs="?", const=cfg.keys_dir, default=None)
    p_gen.add_argument("--name", default=None)
    p_gen.set_defaults(func=cmd_generate)

    p_sign = sub.add_parser("sign")
    p_sign.add_argument("--key", required=True)
    p_sign.add_argument("--message", required=True)
    p_sign.add_argument("--alg", default=None)
    p_sign.set_defaults(func=cmd_sign)

    p_ver = sub.add_parser("verify")
    p_ver.add_argument("--key", required=True)
    p_ver.add_argument("--message", required=True)
    p_ver.add_argument("--signature", required=True)
    p_ver.add_argument("--alg", default=None)
    p_ver.set_defaults(func=cmd_verify)

    p_pub = sub.add_parser("public")
    p_pub.add_argument("--key", required=True)
    p_pub.add_argument("--alg", default=None)
    p_pub.add_argument("--out", default=None)
    p_pub.set_defaults(func=cmd_public)

    p_enc = sub.add_parser("encrypt")
    p_enc.add_argument("--key", required=True)
    p_enc.add_argument("--message", required=True)
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt")
    p_dec.add_argument("--key", required=True)
    p_dec.add_argument("--ciphertext", required=True)
    p_dec.set_defaults(func=cmd_decrypt)

    p_demo = sub.add_parser("demo")
    p_demo.add_argument("which", choices=["sign", "ecdsa", "encrypt"])
    p_demo.add_argument("--message", default=None)
    p_demo.set_defaults(func=cmd_demo)

    args = p.parse_args(argv)
    return anyio.run(partial(_dispatch, args))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
