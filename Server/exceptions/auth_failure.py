"""
Postboard Server - Authentication Failures

Every way a request can fail authentication. All of them are rendered
as the same 401 response, so the message is for logs only.
"""

from exceptions.postboard_error import PostboardError


class AuthFailure(PostboardError):
    """Base exception for every authentication failure."""
    pass


class ExtractionFailure(AuthFailure):
    """Authorization header missing or not of the form 'Bearer <token>'."""
    pass


class VerificationFailure(AuthFailure):
    """Token malformed, tampered with, expired, or signed with another secret."""
    pass


class CredentialMismatch(AuthFailure):
    """Login with an unknown email or a wrong password."""
    pass
