"""
Domain errors raised by the core components.

The core never speaks HTTP; ``hr_portal.main`` maps each kind onto a status code.
"""


class DomainError(Exception):
    kind = "domain_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(DomainError):
    kind = "not_found"


class InvalidInput(DomainError):
    kind = "invalid_input"


class PermissionDenied(DomainError):
    kind = "permission_denied"


class PreconditionFailed(DomainError):
    kind = "precondition_failed"


class IllegalTransition(DomainError):
    kind = "illegal_transition"
