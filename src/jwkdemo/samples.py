"""Fixed sample key pairs for the demonstrations and tests.

RSA_OAEP_SAMPLE is the pair exported by a browser RSA-OAEP generateKey call.
RSASSA_SAMPLE re-declares the same RSA numbers for RS256 signing. There is no
EC sample; the ECDSA demo generates its pair on the fly.
"""
from __future__ import annotations

from .crypto.jwk import KeyPair, RsaPrivateKey, RsaPublicKey

SAMPLE_MESSAGE = "this is something to sign"

_N = (
    "uAYWnh8s1NgUqlKLjUVtnshWN1yuwzWJKY2iLDKG4BZqt1ViVjlOarFOUDX8ZLmw"
    "eJKU1snEbMPacQmB2SGw2tM0PbXchO_520qrH9QqVaHX6ONkyeFCcPJLsnRxOxD4"
    "hafpkesuExqMSyuSBcYWqTJALNPy_1DI3KpM_cnHprZeZmv4JBZxt0IVgOvVutTY"
    "aQkXleIGAIsxrZ__MMyi-4_viZdz8xNg8cE_ce_V58Gj7PWy_ao0oohTc46QlB39"
    "k3ivpDh7U3jTCWzj9jCedaVh6C9qAc2cauKp_YYvCHDMxQpFsEPfjR8PsaGjd1sN"
    "3J1EZdJMORf09RbKZLtE3w"
)
_E = "AQAB"
_D = (
    "iDdBgLP03GxCB71oPR8aQIFsiDhbyHWVXSPQ2kRgX_lX7vMOAmMS75jlLix38hsd"
    "THK8J61cb2IeDLQL4Ky2m5PgxJkcbW6xFSjVOI808wQErQe9ME5EfxRrAeJ9ekpa"
    "m5yqIO_jwBJTrMTIput1FLL0m_obke-7btPEf8tftL9gHzFjacwslyKvLVC_BRwP"
    "OF2qnzgjnRxzXMyK4roqBvChVNfMMwYb7tepdVrZgoVsKGDSjPtoZgndjXA14UWk"
    "TTMmuqov1QoiZ260Hkh9XIvZ58HGoecf7wUVuj8fRetBXg50sJBTdaLcKC7ggTFw"
    "oFTLezamCx8z--V9adqQyQ"
)
_P = (
    "8nI23dMwzt9b9Lr166JFHTbH_8957SWdjZAbk9JBfmRA-lLO3st3_Oysu1A0-L-K"
    "bMWH80qxp1UhC-kwzqqs1D_rxlAoXS5xto5B3mInrSXyTf_OiSQbAgkBzOEJap79"
    "CqknyaxUM_LRgy9EgJ7WiPnApRSmSAuqMrjvDcMe2A0"
)
_Q = (
    "wk_CEXW_4vbj5OYRNMNd3ZyVkHgrNyfAtB_3Y577itXZi4f-MsNcTXR6S4YNYipx"
    "aIcy1yAboemdyLfkvB1yFPfLTxKnMIIIUpnCV10Yt8juMgFiHdBEwo0f4oNp7NBH"
    "rpOXtAboPBSzFRegv6fxFkB57hQb-6PmSHgrd1XOCZs"
)
_DP = (
    "IO6OsVbsfE0uqnFy0gz6ols8k2zVPPctDXuTo2Kd7tMjWF1DKFQu-jYTyGW-rEMo"
    "RFoYe12cAAS6Nmn4bToVu8bq-ccNlIqoe4mbPN_MT-KlpR6oKUy0NnSOwAuZQdhS"
    "us37T5OO5HeJKe6TuXzZ20VBe6rwYzziY31nS1FDsUk"
)
_DQ = (
    "Fp6MO9YWMUiGPOYfSKIZcivBKWEjvrbs8srp1Hn0VDQSr_BzwdsGCqotdk8zjaLd"
    "MsrSO0KslMuKJ4xonxFab2BtFVZZigcJCvyFKABZWUOVntKUZl4RMwiUlpyvnvab"
    "8ZGSzk0jiaLrOeBXQRg-s1VsHC_RFhj9PKBohurBIlM"
)
_QI = (
    "sAMqaf14UD_536xxtZLMmo3szBNAVX-8nRF4MeKXU-zQp0gl9A58VZXEwmo97BvL"
    "ErktTyto3srvsloynUEgaF62_B6-cTMVV7wDOWcAGMhCuCt5ZZBTT6Y_vz2WV_0N"
    "UrWw24uFS1bFdzTsXtXQgwlXIBWMvW6CevoUtNeiw-M"
)

_PRIVATE_MEMBERS = dict(n=_N, e=_E, d=_D, p=_P, q=_Q, dp=_DP, dq=_DQ, qi=_QI)

RSA_OAEP_SAMPLE = KeyPair(
    public_key=RsaPublicKey(alg="RSA-OAEP-256", ext=True, key_ops=("encrypt",), n=_N, e=_E),
    private_key=RsaPrivateKey(alg="RSA-OAEP-256", ext=True, key_ops=("decrypt",), **_PRIVATE_MEMBERS),
)

RSASSA_SAMPLE = KeyPair(
    public_key=RsaPublicKey(alg="RS256", ext=True, key_ops=("verify",), n=_N, e=_E),
    private_key=RsaPrivateKey(alg="RS256", ext=True, key_ops=("sign",), **_PRIVATE_MEMBERS),
)
