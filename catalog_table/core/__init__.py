"""
Core domain layer: records, filter state, the pure filter engine
and the table controller
"""

from .controller import TableController
from .filter_state import FilterState, PriceBucket, TextField
from .record import Record

__all__ = ["Record", "FilterState", "PriceBucket", "TextField", "TableController"]
