"""Unique code allocator.

The allocator hands out a code that, at the moment of the check, no
persisted order holds. Candidates are drawn uniformly at random from the
whole pool and checked one by one against the store, up to a fixed attempt
budget. Because the draw is random it can fail while free codes remain;
callers treat that as a normal ``AllocationExhausted`` outcome.
"""

import logging
import random
from dataclasses import dataclass, field, asdict
from typing import List

from .codes import CodePool, DEFAULT_POOL
from .domain import AllocationExhausted, OrderStorePort

logger = logging.getLogger("orders.allocator")

DEFAULT_MAX_ATTEMPTS = 100

__all__ = ["AllocationExhausted", "CodeStatistics", "UniqueCodeAllocator", "DEFAULT_MAX_ATTEMPTS"]


@dataclass(frozen=True)
class CodeStatistics:
    """Snapshot of the code pool usage.

    ``used_codes + available_codes == total_codes`` holds for every
    snapshot.
    """

    total_codes: int
    used_codes: int
    available_codes: int
    used_codes_list: List[str] = field(default_factory=list)
    available_codes_list: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


class UniqueCodeAllocator:
    """Allocate unused codes from a CodePool by random probing.

    Args:
        store: Order store used to look codes up.
        pool: Code universe; defaults to ``"01"`` .. ``"10"``.
        max_attempts: Attempt budget for a single ``allocate`` call.
        rng: Random source, injectable for deterministic tests.
    """

    def __init__(
        self,
        store: OrderStorePort,
        pool: CodePool = DEFAULT_POOL,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: random.Random | None = None,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.store = store
        self.pool = pool
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()

    def allocate(self) -> str:
        """Return a code no persisted order holds.

        Attempts are immediate; there is no delay between attempts.

        Returns:
            str: A two-digit code from the pool.

        Raises:
            AllocationExhausted: When ``max_attempts`` draws all hit used
                codes.
            StoreError: When a store lookup fails.
        """
        codes = self.pool.codes
        for attempt in range(1, self.max_attempts + 1):
            candidate = self._rng.choice(codes)
            if self.store.find_by_code(candidate) is None:
                logger.debug("allocated unique code", extra={"unique_code": candidate, "attempt": attempt})
                return candidate
        raise AllocationExhausted(self.max_attempts)

    def statistics(self) -> CodeStatistics:
        """Compute pool usage from the codes persisted right now."""
        persisted = self.store.list_codes()
        used = sorted({c for c in persisted if c in self.pool})
        available = self.pool.available(used)
        return CodeStatistics(
            total_codes=len(self.pool),
            used_codes=len(used),
            available_codes=len(available),
            used_codes_list=used,
            available_codes_list=available,
        )
