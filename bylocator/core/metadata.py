from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(slots=True)
class LookupRecord:
    element_key: str
    locator: str
    wire: dict[str, str]
    candidates: list[str] = field(default_factory=list)
    matched_by: str = ""
    match_count: int = 0
    success: bool = False
    failure_type: str = ""
    elapsed_ms: float = 0.0

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)
