"""
Transaction service for managing database transactions centrally.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from skillz.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService:
    """Commit/rollback boundary shared by the use cases.

    Repositories only flush; a use case decides when a unit of work is
    durable by calling ``commit`` or by wrapping it in
    ``execute_in_transaction``.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = logger

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``operation`` and commit it, rolling back on any error.

        Args:
            operation: Async callable doing repository work

        Returns:
            Whatever the operation returned
        """
        try:
            result = await operation()
            await self.session.commit()
            self.logger.debug("Transaction committed")
            return result

        except Exception as e:
            await self.session.rollback()
            self.logger.warning(
                "Transaction rolled back", error=str(e), error_type=type(e).__name__
            )
            raise

    async def commit(self) -> None:
        """Explicitly commit the current transaction."""
        await self.session.commit()
        self.logger.debug("Transaction committed")

    async def rollback(self) -> None:
        """Explicitly rollback the current transaction."""
        await self.session.rollback()
        self.logger.debug("Transaction rolled back")
