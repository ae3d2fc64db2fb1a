# ABOUTME: vercel_client - a control-plane client for the Vercel REST API.
# ABOUTME: Exports VercelClient, its settings, and the error types callers branch on.

from vercel_client.config import ClientSettings
from vercel_client.core import (
    APIError,
    Cancellation,
    ClientRequest,
    DecodeError,
    ErrorKind,
    RequestCancelledError,
    TransportError,
    VercelClient,
    VercelClientError,
    no_content,
    not_found,
)
from vercel_client.reader import Reader

__all__ = [
    "APIError",
    "Cancellation",
    "ClientRequest",
    "ClientSettings",
    "DecodeError",
    "ErrorKind",
    "Reader",
    "RequestCancelledError",
    "TransportError",
    "VercelClient",
    "VercelClientError",
    "no_content",
    "not_found",
]
