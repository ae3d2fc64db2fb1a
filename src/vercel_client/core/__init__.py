# ABOUTME: Request-execution engine for the Vercel API client.
# ABOUTME: URL building, error classification, the request executor, and the rate-limit retry loop.

from vercel_client.core.cancellation import Cancellation
from vercel_client.core.client import VercelClient
from vercel_client.core.errors import (
    APIError,
    DecodeError,
    ErrorKind,
    RequestCancelledError,
    TransportError,
    VercelClientError,
    classify_response,
    has_status,
    no_content,
    not_found,
)
from vercel_client.core.executor import ClientRequest, RequestExecutor
from vercel_client.core.retry import RetryCoordinator, RetryState
from vercel_client.core.scope import resolve_scope
from vercel_client.core.urls import build_url, escape_segment, with_team

__all__ = [
    "APIError",
    "Cancellation",
    "ClientRequest",
    "DecodeError",
    "ErrorKind",
    "RequestCancelledError",
    "RequestExecutor",
    "RetryCoordinator",
    "RetryState",
    "TransportError",
    "VercelClient",
    "VercelClientError",
    "build_url",
    "classify_response",
    "escape_segment",
    "has_status",
    "no_content",
    "not_found",
    "resolve_scope",
    "with_team",
]
