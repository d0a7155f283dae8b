# shared/errors.py
"""
Relay error kinds

Each error carries the HTTP status it maps to; the app registers one
handler for RelayError that turns any of them into {"error": message}.
"""


class RelayError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationError(RelayError):
    """Missing or malformed request body fields"""
    status_code = 400


class DuplicateResourceError(RelayError):
    """Record already exists in the remote list"""
    status_code = 400


class RequestTimeoutError(RelayError):
    status_code = 504


class DownstreamError(RelayError):
    """Any failure talking to the identity provider or the list API"""
    status_code = 500


class TokenAcquisitionError(DownstreamError):
    pass


class ListServiceError(DownstreamError):
    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status
