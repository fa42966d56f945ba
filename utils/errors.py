"""
utils/errors.py
---------------
Failures raised while talking to the upstream APIs.
"""


class ApiError(Exception):
    """Base class for every upstream API failure."""


class TransportError(ApiError):
    """Network, DNS or timeout failure, or an error response without a JSON body."""


class SchemaError(ApiError):
    """The response body did not have the expected JSON shape."""


class UpstreamFailure(ApiError):
    """A well-formed response whose status sentinel is not 'success'."""

    def __init__(self, status: str, detail: str = ""):
        self.status = status
        self.detail = detail
        message = f"upstream reported status '{status}'"
        if detail:
            message += f": {detail}"
        super().__init__(message)
