"""Errors raised by the certificate store and verification engine."""


class CredentialVaultError(Exception):
    """Base class for every error surfaced to callers of the store."""


class CertificateValidationError(CredentialVaultError):
    """A draft or update was missing a required field or carried a bad value."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = errors or []


class CertificateNotFoundError(CredentialVaultError):
    def __init__(self, certificate_id: str):
        super().__init__(f"Certificate not found: {certificate_id}")
        self.certificate_id = certificate_id
