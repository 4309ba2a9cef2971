"""blkidfacts: publish blkid device metadata as flat facts and read it back."""

from .errors import BlkidFactsError, ParseError, ReassembleError
from .functions import get_blkid_info, make_get_blkid_info

__version__ = "0.1.0"

__all__ = [
    "BlkidFactsError",
    "ParseError",
    "ReassembleError",
    "get_blkid_info",
    "make_get_blkid_info",
]
