# dashboard/data/errors.py

import functools
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """Data-access operations; each value is the message callers get on failure."""

    REVENUE = "Failed to fetch revenue data."
    LATEST_INVOICES = "Failed to fetch the latest invoices."
    CARD_DATA = "Failed to fetch card data."
    FILTERED_INVOICES = "Failed to fetch invoices."
    INVOICES_PAGES = "Failed to fetch total number of invoices."
    INVOICE_BY_ID = "Failed to fetch invoice."
    ALL_CUSTOMERS = "Failed to fetch all customers."
    CUSTOMER_TABLE = "Failed to fetch customer table."
    CUSTOMERS_PAGES = "Failed to fetch total number of customers."


class DataAccessError(Exception):
    """
    Raised by every fetch operation, whatever went wrong underneath
    (connection, query, or a row that doesn't fit its model).

    Only `message` is meant for callers; `cause` is kept for operators.
    """

    def __init__(self, operation: Operation, cause: BaseException):
        super().__init__(operation.value)
        self.operation = operation
        self.cause = cause

    @property
    def message(self) -> str:
        return self.operation.value


def data_access(operation: Operation):
    """Log the underlying failure of the wrapped fetch and raise DataAccessError."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DataAccessError:
                raise
            except Exception as e:
                logger.error("Database Error: %r", e)
                raise DataAccessError(operation, e) from e

        return wrapper

    return decorator
