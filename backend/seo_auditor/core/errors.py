"""
Error taxonomy for the auditor.
Every failure surfaced to a caller carries a stable `kind` string and the HTTP
status the API answers with. Nothing here is retried.
"""


class AuditError(Exception):
    """Base class for errors reported to the caller."""

    kind = "internal"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "kind": self.kind,
            "demo_available": self.kind == NetworkError.kind,
        }


class ValidationError(AuditError, ValueError):
    kind = "validation"
    status_code = 400


class NetworkError(AuditError):
    kind = "network"
    status_code = 502


class CredentialMissingError(AuditError):
    kind = "credential-missing"
    status_code = 401


class CredentialInvalidError(AuditError):
    kind = "credential-invalid"
    status_code = 401


class UpstreamParseError(AuditError):
    kind = "upstream-parse-failure"
    status_code = 502
