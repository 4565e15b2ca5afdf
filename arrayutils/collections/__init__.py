"""
Collections that wrap the arrayutils functions behind a fluent interface.

RecordSequence never changes in place. Each operation hands back a new
instance, mirroring the plain functions in ``arrayutils.functions``.
"""

from .record_sequence import RecordSequence

__all__: list[str] = ["RecordSequence"]
