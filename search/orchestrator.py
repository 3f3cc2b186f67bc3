"""
Batch Orchestrator.

Drives the resolver across a field list, one field at a time:

  1. Snapshot the enabled, named fields (list order preserved)
  2. Resolve each field's effective query
  3. Pause a fixed delay between requests
  4. Return a single result row, reporting progress along the way

A failure on one field becomes a sentinel value in the row; the batch
itself always completes.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from models.enums import FieldStatus
from models.schema import FieldDefinition, ResultRow

logger = logging.getLogger(__name__)

ERROR_VALUE = "Error fetching data"
EMPTY_VALUE = "No data found"

STARTING_MESSAGE = "Starting search..."
COMPLETED_MESSAGE = "Search completed!"


@dataclass
class FieldOutcome:
    """How one field fared in a batch."""

    name: str
    query: str
    status: FieldStatus
    error: Optional[str] = None


@dataclass
class BatchReport:
    """Per-field outcomes of the last run, for display."""

    outcomes: List[FieldOutcome] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == FieldStatus.ERROR)

    @property
    def empty_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == FieldStatus.EMPTY)


class BatchOrchestrator:
    """
    Sequential batch runner.

    Usage:
        orchestrator = BatchOrchestrator(resolve=Resolver().resolve)
        rows = orchestrator.run(fields, on_status=print)
    """

    def __init__(
        self,
        resolve: Callable[[str], str],
        delay_seconds: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._resolve = resolve
        self._delay = delay_seconds
        self._sleep = sleep
        self.last_report = BatchReport()

    def run(
        self,
        fields: Sequence[FieldDefinition],
        on_status=None,  # callback(str) for UI progress
    ) -> List[ResultRow]:
        """Resolve every runnable field and return ``[row]``."""
        if on_status:
            on_status(STARTING_MESSAGE)

        # Snapshot so edits made elsewhere during the run can't leak in
        runnable = [f.model_copy() for f in fields if f.is_runnable]
        total = len(runnable)
        report = BatchReport()
        row: ResultRow = {}

        for index, fd in enumerate(runnable):
            if on_status:
                on_status(f"Searching {index + 1}/{total}: {fd.name}")

            query = fd.effective_query
            try:
                value = self._resolve(query)
            except Exception as e:
                logger.error(f"Resolving field '{fd.name}' failed: {e}", exc_info=True)
                row[fd.name] = ERROR_VALUE
                report.outcomes.append(
                    FieldOutcome(fd.name, query, FieldStatus.ERROR, error=str(e))
                )
            else:
                if value:
                    row[fd.name] = value
                    report.outcomes.append(FieldOutcome(fd.name, query, FieldStatus.OK))
                else:
                    row[fd.name] = EMPTY_VALUE
                    report.outcomes.append(FieldOutcome(fd.name, query, FieldStatus.EMPTY))

            self._sleep(self._delay)

        self.last_report = report
        if on_status:
            on_status(COMPLETED_MESSAGE)

        logger.info(
            f"Batch finished: {total} fields, "
            f"{report.error_count} errors, {report.empty_count} empty"
        )
        return [row]
