"""
Users API - Exceptions
Errors raised by the user lookup gateway and mapped to HTTP by the app
"""


class UsersAPIError(Exception):
    """Base class for errors raised by this service"""


class MissingAuthContext(UsersAPIError):
    """
    The request reached a protected operation without claims attached.

    Means the authentication middleware did not run or did not attach
    claims: a deployment error, never the caller's fault.
    """

    def __init__(self, message: str = "Did not receive required data from JWT token"):
        super().__init__(message)


class AccessDenied(UsersAPIError):
    """Authenticated caller asked for a record they do not own"""

    def __init__(self, message: str = "No access for requested entity"):
        super().__init__(message)
