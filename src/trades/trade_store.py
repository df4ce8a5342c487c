"""In-memory store for a user's trade history."""
import logging

from src.trades.mock_trades import MockTradeGenerator
from src.trades.models import Trade

logger = logging.getLogger(__name__)


class TradeStore:
    """Holds the caller's trade list.

    Trades are never edited in place; they are added, deleted by id, or the
    whole list is replaced by a fresh mock load.
    """

    def __init__(self, generator: MockTradeGenerator | None = None) -> None:
        """Initialize an empty store.

        Args:
            generator: Source used by load_mock_trades.
        """
        self._generator = generator or MockTradeGenerator()
        self._trades: list[Trade] = []

    @property
    def trades(self) -> list[Trade]:
        """Snapshot of the stored trades in insertion order."""
        return list(self._trades)

    def __len__(self) -> int:
        return len(self._trades)

    async def load_mock_trades(self) -> list[Trade]:
        """Replace the stored trades with a generated mock history.

        Returns:
            The newly stored trades.
        """
        self._trades = await self._generator.fetch_mock_trades()
        logger.info(f"Trade store loaded {len(self._trades)} mock trades")
        return self.trades

    def add_trade(self, trade: Trade) -> None:
        """Append a single trade."""
        self._trades.append(trade)

    def add_trades(self, trades: list[Trade]) -> None:
        """Append several trades, preserving their order."""
        self._trades.extend(trades)

    def delete_trade(self, trade_id: str) -> bool:
        """Remove the trade with the given id.

        Returns:
            True if a trade was removed.
        """
        remaining = [t for t in self._trades if t.trade_id != trade_id]
        removed = len(remaining) != len(self._trades)
        self._trades = remaining
        return removed

    def clear(self) -> None:
        self._trades = []
