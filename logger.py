"""Structured logging helpers for shuffle results."""

from __future__ import annotations

import csv
import json
from typing import Optional

from group_types import GroupSet


class GroupLogger:
    def __init__(self, path: str, *, fmt: str = "jsonl") -> None:
        self.path = path
        self.format = fmt.lower()
        if self.format not in {"jsonl", "csv"}:
            raise ValueError(f"Unsupported log format: {self.format}")
        newline = "\n" if self.format == "csv" else ""
        self._handle = open(path, "w", encoding="utf-8", newline=newline)
        self._writer: Optional[csv.DictWriter] = None
        if self.format == "csv":
            fieldnames = ["seed", "total", "group_count", "groups"]
            self._writer = csv.DictWriter(self._handle, fieldnames=fieldnames)
            self._writer.writeheader()

    def __enter__(self) -> "GroupLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def log(self, result: GroupSet) -> None:
        if self.format == "jsonl":
            json.dump(result.to_dict(), self._handle, ensure_ascii=False)
            self._handle.write("\n")
        else:
            assert self._writer is not None
            self._writer.writerow(self._as_csv_row(result))
        self._handle.flush()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def _as_csv_row(self, result: GroupSet) -> dict:
        payload = result.to_dict()
        return {
            "seed": "" if result.seed is None else result.seed,
            "total": payload["total"],
            "group_count": payload["group_count"],
            "groups": json.dumps(payload["groups"], ensure_ascii=False),
        }


__all__ = ["GroupLogger"]
