"""Pool of unique payment codes.

Payers add the order's code to the bank transfer amount so manual
reconciliation can tell transfers of the same price apart. The pool is the
closed range of zero-padded two-digit strings ``"01"`` .. ``"10"``.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

CODE_RE = r"^\d{2}$"


@dataclass(frozen=True)
class CodePool:
    """Finite, ordered set of allocatable codes.

    Attributes:
        size: Number of codes; codes are the integers 1..size.
        width: Zero-padded width of each code string.
    """

    size: int = 10
    width: int = 2

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self.format(n) for n in range(1, self.size + 1))

    def format(self, n: int) -> str:
        return str(n).zfill(self.width)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __len__(self) -> int:
        return self.size

    def available(self, used: Iterable[str]) -> List[str]:
        """Return the codes not in ``used``, in ascending order."""
        taken = set(used)
        return [c for c in self.codes if c not in taken]


DEFAULT_POOL = CodePool()
