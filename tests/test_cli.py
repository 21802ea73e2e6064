import json

from jwkdemo.cli import main
from jwkdemo.crypto.jwk import dump_jwk
from jwkdemo.samples import RSA_OAEP_SAMPLE, RSASSA_SAMPLE


def test_generate_prints_pair(capsys):
    assert main(["generate", "--alg", "ECDSA"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["publicKey"]["crv"] == "P-256"
    assert out["privateKey"]["key_ops"] == ["sign"]


def test_generate_sign_verify_files(tmp_path, capsys):
    assert main(["generate", "--alg", "ECDSA", "--out-dir", str(tmp_path), "--name", "demo"]) == 0
    capsys.readouterr()
    priv = tmp_path / "demo_private.json"
    pub = tmp_path / "demo_public.json"
    assert priv.exists() and pub.exists()

    assert main(["sign", "--key", str(priv), "--message", "hi"]) == 0
    signature = capsys.readouterr().out.strip()

    assert main(["verify", "--key", str(pub), "--message", "hi", "--signature", signature]) == 0
    assert json.loads(capsys.readouterr().out) == {"verified": True}
    assert main(["verify", "--key", str(pub), "--message", "ho", "--signature", signature]) == 1


def test_sample_sign_with_jwk_alg(tmp_path, capsys):
    priv = dump_jwk(RSASSA_SAMPLE.private_key, tmp_path / "priv.json")
    pub = dump_jwk(RSASSA_SAMPLE.public_key, tmp_path / "pub.json")
    assert main(["sign", "--key", str(priv), "--message", "this is something to sign"]) == 0
    signature = capsys.readouterr().out.strip()
    rc = main(["verify", "--key", str(pub), "--message", "this is something to sign", "--signature", signature])
    assert rc == 0


def test_encrypt_decrypt(tmp_path, capsys):
    pub = dump_jwk(RSA_OAEP_SAMPLE.public_key, tmp_path / "pub.json")
    priv = dump_jwk(RSA_OAEP_SAMPLE.private_key, tmp_path / "priv.json")
    assert main(["encrypt", "--key", str(pub), "--message", "secret"]) == 0
    ciphertext = capsys.readouterr().out.strip()
    assert main(["decrypt", "--key", str(priv), "--ciphertext", ciphertext]) == 0
    assert capsys.readouterr().out.strip() == "secret"


def test_errors_exit_2(tmp_path, capsys):
    pub = dump_jwk(RSASSA_SAMPLE.public_key, tmp_path / "pub.json")
    # a verify-only key cannot sign
    assert main(["sign", "--key", str(pub), "--message", "x"]) == 2
    assert main(["sign", "--key", str(tmp_path / "missing.json"), "--message", "x"]) == 2
    assert main(["verify", "--key", str(pub), "--message", "x", "--signature", "@@"]) == 2


def test_demo_command(capsys):
    assert main(["demo", "sign"]) == 0
    assert json.loads(capsys.readouterr().out.strip().splitlines()[-1]) == {"ok": True, "error": None}


def test_key_file_with_non_string_kty_exits_2(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"kty": ["RSA"], "n": "AQAB", "e": "AQAB", "key_ops": ["verify"]}))
    assert main(["verify", "--key", str(bad), "--message", "x", "--signature", "AAAA"]) == 2


def test_public_derived_from_private_verifies(tmp_path, capsys):
    priv = dump_jwk(RSASSA_SAMPLE.private_key, tmp_path / "priv.json")
    pub = tmp_path / "derived_public.json"
    assert main(["public", "--key", str(priv), "--out", str(pub)]) == 0
    capsys.readouterr()
    derived = json.loads(pub.read_text())
    assert derived["key_ops"] == ["verify"]
    assert "d" not in derived

    assert main(["sign", "--key", str(priv), "--message", "hi"]) == 0
    signature = capsys.readouterr().out.strip()
    assert main(["verify", "--key", str(pub), "--message", "hi", "--signature", signature]) == 0


def test_public_of_ec_key_prints_jwk(tmp_path, capsys):
    assert main(["generate", "--alg", "ECDSA", "--out-dir", str(tmp_path), "--name", "ec"]) == 0
    capsys.readouterr()
    assert main(["public", "--key", str(tmp_path / "ec_private.json")]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == json.loads((tmp_path / "ec_public.json").read_text())


def test_public_of_public_key_exits_2(tmp_path):
    pub = dump_jwk(RSASSA_SAMPLE.public_key, tmp_path / "pub.json")
    assert main(["public", "--key", str(pub)]) == 2
