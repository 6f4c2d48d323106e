# storefront/domain/errors.py


class StorefrontError(Exception):
    """Bazowy blad domeny, status_code mapowany na odpowiedz HTTP."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StorefrontError):
    status_code = 400


class UnauthorizedError(StorefrontError):
    status_code = 401


class NotFoundError(StorefrontError):
    status_code = 404


class ConflictError(StorefrontError):
    status_code = 409


class StoreError(StorefrontError):
    """Blad odczytu/zapisu pliku kolekcji (I/O albo zly JSON)."""

    status_code = 500
