"""Aggregation table.

This is the only component allowed to create or update state
accumulators.
"""

from __future__ import annotations

import copy
import logging

from pyclimate._constants import DEFAULT_STATE_CAPACITY
from pyclimate.exceptions import CapacityExceededError
from pyclimate.models.observation import ObservationRecord
from pyclimate.models.summary import StateSummary
from pyclimate.state.accumulator import StateAccumulator

_logger = logging.getLogger(__name__)


class AggregationTable:
    """Insertion-ordered mapping from state code to running accumulator.

    The table is deterministic: folding the same sequence of records
    always produces the same summaries. It does no locking; callers that
    parse in parallel should give each worker its own table and combine
    them with :meth:`merge` from a single owner.
    """

    def __init__(self, capacity: int = DEFAULT_STATE_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        # dict preserves first-seen insertion order.
        self._states: dict[str, StateAccumulator] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def codes(self) -> tuple[str, ...]:
        """State codes in the order they were first seen."""
        return tuple(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, code: object) -> bool:
        return code in self._states

    def _check_capacity(self, code: str) -> None:
        if len(self._states) >= self._capacity:
            raise CapacityExceededError(code, self._capacity)

    def fold(self, record: ObservationRecord) -> None:
        """Fold one record into the accumulator for its state code.

        Raises
        ------
        CapacityExceededError
            *record* introduces a new state code and the table is full.
            The table is left unchanged.
        """
        state = self._states.get(record.state_code)
        if state is None:
            self._check_capacity(record.state_code)
            self._states[record.state_code] = StateAccumulator.from_record(record)
            _logger.debug("Tracking new state %s (%d/%d)", record.state_code, len(self._states), self._capacity)
            return
        state.fold(record)

    def merge(self, other: AggregationTable) -> None:
        """Fold every accumulator of *other* into this table.

        Codes new to this table are appended in *other*'s first-seen order.
        Capacity is checked for all new codes before anything is changed.
        """
        new_codes = [code for code in other._states if code not in self._states]
        if len(self._states) + len(new_codes) > self._capacity:
            overflow = new_codes[self._capacity - len(self._states)]
            raise CapacityExceededError(overflow, self._capacity)
        for code, incoming in other._states.items():
            state = self._states.get(code)
            if state is None:
                self._states[code] = copy.deepcopy(incoming)
            else:
                state.merge(incoming)

    def get(self, code: str) -> StateAccumulator | None:
        """Return a copy of the accumulator for *code*, or ``None``."""
        state = self._states.get(code)
        if state is None:
            return None
        return copy.deepcopy(state)

    def summary(self, code: str) -> StateSummary | None:
        state = self._states.get(code)
        if state is None:
            return None
        return state.summarize()

    def finalize(self) -> list[StateSummary]:
        """Summaries for every tracked state, in first-seen order.

        Read-only: calling it repeatedly without folding in between gives
        identical results.
        """
        return [state.summarize() for state in self._states.values()]
