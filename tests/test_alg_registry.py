import pytest

from jwkdemo.crypto.alg_registry import (
    ECDSA_P256,
    RSA_OAEP,
    RSASSA_PKCS1_V1_5,
    get_algorithm,
    supported_algorithms,
)
from jwkdemo.errors import NotSupportedError


@pytest.mark.parametrize(
    "name,expected",
    [
        ("RSA-OAEP", RSA_OAEP),
        ("rsa-oaep-256", RSA_OAEP),
        ("RSASSA-PKCS1-v1_5", RSASSA_PKCS1_V1_5),
        ("RS256", RSASSA_PKCS1_V1_5),
        ("ecdsa", ECDSA_P256),
        ("ES256", ECDSA_P256),
    ],
)
def test_lookup(name, expected):
    assert get_algorithm(name) is expected


def test_spec_passthrough():
    assert get_algorithm(ECDSA_P256) is ECDSA_P256


def test_unknown_alg():
    with pytest.raises(NotSupportedError):
        get_algorithm("RSA-PSS")


def test_fixed_parameters():
    for spec in (RSA_OAEP, RSASSA_PKCS1_V1_5):
        assert spec.modulus_length == 2048
        assert spec.public_exponent == 65537
        assert spec.hash_name == "SHA-256"
    assert ECDSA_P256.named_curve == "P-256"
    assert RSA_OAEP.usages_for("public") == ("encrypt",)
    assert RSA_OAEP.usages_for("private") == ("decrypt",)
    assert supported_algorithms() == ("RSA-OAEP", "RSASSA-PKCS1-v1_5", "ECDSA")
