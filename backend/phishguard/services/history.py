# Name: history.py
# Description: Bounded in-memory history of past analyses
# Date: 2026-10-16

from collections import deque
from typing import Iterator, Optional

from phishguard.core.config import HISTORY_LIMIT
from phishguard.models.analysis import HistoryItem


class HistoryStore:
    """
    Most-recent-first log of analyses, capped at a fixed size.
    
    Recording an item beyond the cap evicts the oldest entry. Items are
    immutable, and record() is the only mutation.
    """
    
    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._items: deque[HistoryItem] = deque(maxlen=limit)
    
    @property
    def limit(self) -> int:
        return self._items.maxlen
    
    def record(self, item: HistoryItem) -> None:
        """Prepend an item, dropping the oldest one if the store is full."""
        self._items.appendleft(item)
    
    def select(self, item_id: str) -> Optional[HistoryItem]:
        """Look up an item by id, or None if it was never recorded or has been evicted."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None
    
    def items(self) -> tuple[HistoryItem, ...]:
        """Snapshot of the history, newest first."""
        return tuple(self._items)
    
    def phishing_count(self) -> int:
        return sum(1 for item in self._items if item.result.is_phishing)
    
    def __len__(self) -> int:
        return len(self._items)
    
    def __iter__(self) -> Iterator[HistoryItem]:
        return iter(tuple(self._items))
