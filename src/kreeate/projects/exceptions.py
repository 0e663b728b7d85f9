"""Custom exceptions for GitHub Projects access."""


class ProjectsError(Exception):
    """Base exception for project board errors."""


class RemoteAPIError(ProjectsError):
    """GitHub GraphQL call failed (transport, GraphQL errors, or missing data)."""


class BoardNotFoundError(RemoteAPIError):
    """Project board does not exist or the viewer cannot see it."""


class InvalidProjectURLError(ProjectsError, ValueError):
    """String is not a supported GitHub project URL."""
