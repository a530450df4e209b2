"""Series, data group and catalogue operations."""

from ..params import DataGroupMode
from .validators import validate_series

__all__ = [
    "DataGroupMode",
    "validate_series",
]
