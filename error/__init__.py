
class ServerError(Exception):
    """Base class for server-related errors"""

    def __init__(self, msg="Server error occurred", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class AuthenticationError(ServerError):
    """Raised when the session token cannot be trusted"""

    def __init__(self, msg="Authentication failed", status_code=401):
        super().__init__(msg=msg, status_code=status_code)


class AuthorizationError(ServerError):
    """Raised when the caller lacks the role for a protected operation"""

    def __init__(self, msg="Acesso negado", status_code=403):
        super().__init__(msg=msg, status_code=status_code)


class ResourceNotFoundError(ServerError):
    """Raised when requested resource is not found"""

    def __init__(self, msg="Resource not found", status_code=404):
        super().__init__(msg=msg, status_code=status_code)


class DatabaseError(ServerError):
    """Raised when a database operation fails"""

    def __init__(self, msg="Database operation failed", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class StoreError(DatabaseError):
    """Raised by the submission store when the underlying database fails"""

    def __init__(
        self,
        msg="An internal error occurred. Please try again or contact support.",
        status_code=500,
    ):
        super().__init__(msg=msg, status_code=status_code)


class SubmissionError(ServerError):
    """Raised when a contact submission could not be recorded"""

    def __init__(
        self,
        msg="Erro ao enviar mensagem. Tente novamente mais tarde.",
        status_code=500,
    ):
        super().__init__(msg=msg, status_code=status_code)
