# shopapp/exceptions.py


class ShopAppError(Exception):
    """Base error for conditions a service reports to the HTTP boundary."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DataNotFoundError(ShopAppError):
    status_code = 404


class DuplicateDataError(ShopAppError):
    status_code = 400


class PermissionDeniedError(ShopAppError):
    status_code = 403


class BadCredentialsError(ShopAppError):
    status_code = 401


class InvalidParamError(ShopAppError):
    status_code = 400
