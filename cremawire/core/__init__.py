"""
Small helpers that do not belong to the coffee domain itself.
"""
from cremawire.core.timing import measure_duration

__all__ = ["measure_duration"]
