"""Entity reference parsing."""

from typing import Tuple

from lab_cli.exceptions import InvalidArgumentError, InvalidBrowsingNumberError
from lab_cli.models.reference import BrowseType

# Markers are checked in this order. No marker is a prefix of another.
BROWSE_TYPE_PREFIXES: Tuple[Tuple[str, BrowseType], ...] = (
    ("#", BrowseType.ISSUE),
    ("i", BrowseType.ISSUE),
    ("I", BrowseType.ISSUE),
    ("!", BrowseType.MERGE_REQUEST),
    ("m", BrowseType.MERGE_REQUEST),
    ("M", BrowseType.MERGE_REQUEST),
)


def split_prefix_and_number(arg: str) -> Tuple[BrowseType, int]:
    """
    Split a reference such as ``#12`` or ``!34`` into its type and number.

    Args:
        arg: Reference given on the command line

    Returns:
        Tuple of (BrowseType, number)

    Raises:
        InvalidBrowsingNumberError: A marker matched but the rest is not a number
        InvalidArgumentError: No marker matched
    """
    for prefix, browse_type in BROWSE_TYPE_PREFIXES:
        if arg.startswith(prefix):
            number = arg[len(prefix):]
            if not (number.isascii() and number.isdigit()):
                raise InvalidBrowsingNumberError(arg)
            return browse_type, int(number)

    raise InvalidArgumentError(arg)
