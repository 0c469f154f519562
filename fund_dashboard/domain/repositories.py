"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import FundRecord


class RecordSource(Protocol):
    """Provides the flat fund records, one per asset row."""

    def list_records(self) -> Sequence[FundRecord]:
        ...
