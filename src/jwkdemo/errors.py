"""Error taxonomy for key provisioning and key operations.

Two families are exposed:

  ProviderRejection   the provider refused the request (bad algorithm,
                      usage mismatch, operation failure)
  MalformedInputError the caller handed over something that does not parse
                      (JWK members, base64 text)

A signature that does not verify is NOT an error; verify() returns False.
"""
from __future__ import annotations


class CryptoError(Exception):
    """Base class for every error raised by jwkdemo."""


class ProviderRejection(CryptoError):
    """The cryptographic provider refused the operation."""


class NotSupportedError(ProviderRejection):
    """Unknown algorithm name, curve or key size."""


class InvalidAccessError(ProviderRejection):
    """Key handle used for an operation it is not permitted to perform."""


class InvalidUsageError(ProviderRejection):
    """key_ops at import time is empty or names an impossible operation."""


class OperationError(ProviderRejection):
    """Provider failed while performing an otherwise valid request."""


class MalformedInputError(CryptoError):
    """Input could not be parsed in the expected format."""


class DataError(MalformedInputError):
    """Invalid JWK structure or invalid base64 text."""


__all__ = [
    "CryptoError",
    "ProviderRejection",
    "NotSupportedError",
    "InvalidAccessError",
    "InvalidUsageError",
    "OperationError",
    "MalformedInputError",
    "DataError",
]
