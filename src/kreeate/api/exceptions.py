"""Exceptions raised at the HTTP boundary."""


class APIError(Exception):
    """Base exception for request-level failures."""


class UnauthorizedError(APIError):
    """Caller is not signed in or has no GitHub token."""


class ForbiddenError(APIError):
    """Caller is signed in but not allowed to use the endpoint."""


class BadRequestError(APIError):
    """Request parameters are invalid after normalization."""
