"""Custom exceptions for State Store."""


class StateStoreError(Exception):
    """Base exception for State Store errors."""


class InvalidEventStatusError(StateStoreError, ValueError):
    """Analytics event status is not one of requested/success/failed."""
