import pytest

from jwkdemo.crypto import subtle
from jwkdemo.crypto.alg_registry import ECDSA_P256, RSA_OAEP, RSASSA_PKCS1_V1_5


@pytest.fixture
def anyio_backend():
    return "asyncio"


# Fresh pairs are generated once per session; RSA generation is slow.
@pytest.fixture(scope="session")
def ecdsa_pair():
    return subtle.generate_key_pair(ECDSA_P256)


@pytest.fixture(scope="session")
def oaep_pair():
    return subtle.generate_key_pair(RSA_OAEP)


@pytest.fixture(scope="session")
def rsassa_pair():
    return subtle.generate_key_pair(RSASSA_PKCS1_V1_5)
