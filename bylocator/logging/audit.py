from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bylocator.core.metadata import LookupRecord


class LookupAuditLogger:
    """Appends one JSON line per finder lookup."""

    def __init__(self, root: str | Path = "artifacts") -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.lookups_path = self.root / "lookups.jsonl"

    def write(self, record: LookupRecord) -> None:
        line = json.dumps(record.to_payload(), sort_keys=True) + "\n"
        with self.lookups_path.open("a", encoding="utf-8") as handle:
            handle.write(line)

    def read_records(self) -> list[dict[str, Any]]:
        if not self.lookups_path.exists():
            return []
        with self.lookups_path.open("r", encoding="utf-8") as handle:
            return [json.loads(line) for line in handle if line.strip()]
