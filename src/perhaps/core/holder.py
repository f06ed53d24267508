from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Holder:
    """Caller-owned record that ``Maybe.extract_into`` writes into."""

    value: Optional[Any] = None
