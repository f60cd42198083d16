from .code_blocks import find_code_blocks, is_valid_pairing
from .links import find_links
from .merge import merge_spans

__all__ = [
    "find_code_blocks",
    "is_valid_pairing",
    "find_links",
    "merge_spans",
]
