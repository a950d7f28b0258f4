"""Исключения для работы со счетами и платежами."""


class InvoiceBaseException(Exception):
    """Базовое исключение для счетов."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvoiceNotFoundError(InvoiceBaseException):
    """Счет для платежа не найден."""


class InvoiceInvalidStateError(InvoiceBaseException):
    """Счет находится в противоречивом состоянии."""


class InvoiceAlreadyExistsError(InvoiceBaseException):
    """Счет с таким reference уже существует."""


class RepositoryError(InvoiceBaseException):
    """Ошибка при работе с репозиторием."""
