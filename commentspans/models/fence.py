from enum import Enum


class Fence(str, Enum):
    """Delimiters that may sit alone on a line to open or close a code block."""

    BACKTICKS = "```"
    TILDES = "~~~"
    DOXYGEN = "@code"
    DOXYGEN_END = "@endcode"


# Tokens that may open a block, and tokens that may close one.
OPENING_FENCES = (Fence.BACKTICKS, Fence.TILDES, Fence.DOXYGEN)
CLOSING_FENCES = (Fence.BACKTICKS, Fence.TILDES, Fence.DOXYGEN_END)
