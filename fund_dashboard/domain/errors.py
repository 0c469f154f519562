"""Exceptions raised by the fund dashboard core."""
from __future__ import annotations


class DashboardError(Exception):
    """Base class for dashboard errors."""


class RecordLoadError(DashboardError):
    """The record source could not be read or is missing required columns."""


class SelectionError(DashboardError, ValueError):
    """A selection command was issued in a state that does not allow it."""
