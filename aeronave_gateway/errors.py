"""
Error types raised by aeronave mutations.

Every failure is normalized into an AeronaveError tagged with an ErrorKind.
The message follows the "Failed to <action> aeronave: <reason>" contract seen
by GraphQL clients, while the original exception stays reachable through
__cause__ for server-side diagnostics.
"""

from pydantic import ValidationError

from aeronave_gateway.enums import ErrorKind


def describe_error(error: BaseException) -> str:
    """Render an exception as a single-line message for clients"""
    if isinstance(error, ValidationError):
        details = ", ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'aeronave'}: {err['msg']}"
            for err in error.errors()
        )
        return f"Aeronave validation failed: {details}"
    return str(error) or error.__class__.__name__


class AeronaveError(Exception):
    """Base class for normalized aeronave failures"""
    kind: ErrorKind
    action: str

    def __init__(self, reason: str, cause: BaseException | None = None):
        super().__init__(f"Failed to {self.action} aeronave: {reason}")
        self.reason = reason
        self.__cause__ = cause

    @property
    def extensions(self) -> dict:
        # Picked up by graphql-core when it wraps this error for the response
        return {"code": self.kind.value}


class CreationError(AeronaveError):
    kind = ErrorKind.CREATION
    action = "create"

    def __init__(self, cause: BaseException):
        super().__init__(describe_error(cause), cause)


class UpdateError(AeronaveError):
    kind = ErrorKind.UPDATE
    action = "update"

    def __init__(self, cause: BaseException):
        super().__init__(describe_error(cause), cause)


class DeletionError(AeronaveError):
    kind = ErrorKind.DELETION
    action = "delete"

    def __init__(self, cause: BaseException):
        super().__init__(describe_error(cause), cause)


class NotFoundError(AeronaveError):
    """No record matches the identifier given to an update or delete"""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, action: str, aeronave_id: str):
        self.action = action
        self.aeronave_id = aeronave_id
        super().__init__(f"Aeronave with id {aeronave_id} not found")
