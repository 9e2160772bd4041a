"""
Postboard Server - Exceptions Package

Contains all exception classes raised by the Postboard server.
Handlers for each family are registered in server.py.
"""

from exceptions.postboard_error import PostboardError
from exceptions.auth_failure import (
    AuthFailure,
    ExtractionFailure,
    VerificationFailure,
    CredentialMismatch
)
from exceptions.storage_conflict import StorageConflict
from exceptions.record_not_found import RecordNotFound

__all__ = [
    'PostboardError',
    'AuthFailure',
    'ExtractionFailure',
    'VerificationFailure',
    'CredentialMismatch',
    'StorageConflict',
    'RecordNotFound',
]
