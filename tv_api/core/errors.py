"""
Domain error taxonomy for the channel directory.

Every failure the service reports is one of the four kinds below; the
HTTP layer only looks at ``status_code`` to build the response.
"""


class DirectoryError(Exception):
    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidError(DirectoryError):
    """Malformed or missing input."""
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(DirectoryError):
    status_code = 404
    default_message = "Channel not found"


class ConflictError(DirectoryError):
    """A live channel already holds the requested id."""
    status_code = 400
    default_message = "A channel with this id already exists"


class UnavailableError(DirectoryError):
    """Store unreachable or failed for infrastructure reasons."""
    status_code = 500
    default_message = "Service temporarily unavailable"


def status_for_error(error: DirectoryError) -> int:
    return error.status_code


def describe_validation_errors(errors: list) -> str:
    """Flatten pydantic error dicts into "field: message; ..." for response bodies."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
    return "; ".join(parts) or InvalidError.default_message
