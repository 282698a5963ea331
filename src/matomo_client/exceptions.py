"""
Matomo client runtime exceptions.
"""

from __future__ import annotations

import typing as t


class MatomoError(Exception):
    """
    Base class for every error raised by the client.
    """


class TransportError(MatomoError):
    """
    Network, HTTP or decoding failure while talking to the Matomo endpoint.

    Parameters
    ----------
    message : str
        Human readable failure description.
    status_code : int | None, optional
        HTTP status code when a response was received.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BatchResultMismatchError(TransportError):
    """
    Bulk response does not contain exactly one result per queued call.

    Parameters
    ----------
    expected : int
        Number of queued calls.
    received : int | None
        Number of results decoded, ``None`` when the payload is not a list.
    """

    def __init__(self, *, expected: int, received: int | None) -> None:
        if received is None:
            message = f"Bulk response is not a list (expected {expected} results)"
        else:
            message = f"Bulk response returned {received} results for {expected} requests"
        super().__init__(message)
        self.expected = expected
        self.received = received


class ApiError(MatomoError):
    """
    Error envelope returned by the Matomo API.

    Parameters
    ----------
    message : str
        Message reported by the remote API.
    method : str | None, optional
        API method that produced the error.
    payload : typing.Any, optional
        Decoded error envelope.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        payload: t.Any = None,
    ) -> None:
        super().__init__(f"Matomo API error: {message}")
        self.message = message
        self.method = method
        self.payload = payload


class BatchStateError(MatomoError):
    """
    A consumed batch request was reused.
    """


def is_error_envelope(payload: t.Any) -> bool:
    """
    Detect the Matomo ``{"result": "error", "message": ...}`` envelope.

    Parameters
    ----------
    payload : typing.Any
        Decoded response payload.

    Returns
    -------
    bool
        ``True`` when the payload signals a logical API failure.
    """
    return isinstance(payload, dict) and payload.get("result") == "error"
