"""Deterministic extremal-update policy.

Both the per-record fold and the table merge go through these helpers so
tie handling stays identical: an incoming value only replaces the current
extreme when it is strictly beyond it, which keeps the timestamp of the
first record that reached the extreme.
"""

from __future__ import annotations


def should_replace_max(current: float, incoming: float) -> bool:
    return incoming > current


def should_replace_min(current: float, incoming: float) -> bool:
    return incoming < current
