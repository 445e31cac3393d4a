"""Core primitives: the precision model, orderings and temporal helpers.

This module aggregates enums, value types, comparators, utility helpers and
error classes. The config and telemetry packages import from here and never
the other way round.
"""

from . import enums, errors, ordering, time_utils, types

__all__ = ["enums", "errors", "ordering", "time_utils", "types"]
