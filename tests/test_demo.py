import pytest

from jwkdemo.crypto.alg_registry import ECDSA_P256, RSASSA_PKCS1_V1_5
from jwkdemo.demo import run_encryption_demo, run_roundtrip_demo, run_signing_demo, tamper_text
from jwkdemo.samples import RSA_OAEP_SAMPLE, RSASSA_SAMPLE


def test_tamper_text():
    assert tamper_text("this is something to sign") == "this is something to sigo"
    assert tamper_text("") == "x"


@pytest.mark.anyio
async def test_signing_demo_with_sample():
    result = await run_signing_demo()
    assert result.ok
    assert result.message == "this is something to sign"
    assert result.verified is True
    assert result.tampered_verified is False


@pytest.mark.anyio
async def test_signing_demo_message_from_env(monkeypatch):
    monkeypatch.setenv("JWKDEMO_DEMO_MESSAGE", "hello")
    result = await run_signing_demo(RSASSA_SAMPLE)
    assert result.message == "hello" and result.ok


@pytest.mark.anyio
@pytest.mark.parametrize("spec", [ECDSA_P256, RSASSA_PKCS1_V1_5])
async def test_roundtrip_demo(spec):
    result = await run_roundtrip_demo(spec)
    assert result.ok, result.error
    assert result.algorithm == spec.name


@pytest.mark.anyio
async def test_encryption_demo():
    result = await run_encryption_demo()
    assert result.ok
    assert result.decrypted == "this is something to sign"


@pytest.mark.anyio
async def test_encryption_demo_with_sample_pair():
    result = await run_encryption_demo("short", key_pair=RSA_OAEP_SAMPLE)
    assert result.ok


@pytest.mark.anyio
async def test_demo_reports_rejection_instead_of_raising():
    # the encryption pair cannot be imported for RS256 signing
    result = await run_signing_demo(RSA_OAEP_SAMPLE)
    assert not result.ok
    assert "alg" in result.error
    assert result.signature is None
