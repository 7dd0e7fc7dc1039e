"""
Typed failures raised by the whisky store.

The store never talks HTTP; it raises one of these exceptions and the
request layer maps ``status_code`` onto the response.  No detail is
sent back to the client, the message only ends up in the logs.
"""


class WhiskyStoreError(Exception):
    """Base class for all store failures."""

    status_code: int = 500


class InvalidIdentifier(WhiskyStoreError):
    """The identifier cannot be parsed as an integer."""

    status_code = 400

    def __init__(self, raw) -> None:
        super().__init__(f"Invalid whisky identifier: {raw!r}")
        self.raw = raw


class NotFound(WhiskyStoreError):
    """No whisky is stored under the requested identifier."""

    status_code = 404

    def __init__(self, whisky_id: int) -> None:
        super().__init__(f"Whisky {whisky_id} not found")
        self.whisky_id = whisky_id


class MalformedPayload(WhiskyStoreError):
    """The request body cannot be decoded into a whisky."""

    status_code = 400
