class LunchlyError(Exception):
    """Base error for the model layer. Carries an HTTP-friendly status and code."""

    status = 500
    code = "SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(LunchlyError):
    """A lookup by id found nothing."""

    status = 404
    code = "NOT_FOUND"


class BadRequestError(LunchlyError):
    """A field was assigned a value that breaks one of its invariants."""

    status = 400
    code = "BAD_REQUEST"
