"""
Participant identities.

Players are identified by ledger account addresses, which are opaque strings to the rest of the application.
Only their shape gets checked here: <human readable prefix>1<data part in the bech32 alphabet>
ex) cosmos1jmjfq0tplp9tmx4v9uemw72y4d2wa5nr3xn9d3
"""

import re
from typing import Callable

BECH32_ALPHABET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
MAX_ADDRESS_LENGTH = 90
MIN_DATA_LENGTH = 6

# The separator is the LAST "1" in the string, and the data part never contains a "1" itself.
_ADDRESS_PATTERN = re.compile(
    rf"^(?P<prefix>[a-z][a-z0-9]*)1(?P<data>[{BECH32_ALPHABET}]{{{MIN_DATA_LENGTH},}})$"
)

AddressRule = Callable[[str], bool]


def is_valid_address(address: str) -> bool:
    """Decide whether a string is a well-formed participant address."""
    if not address or len(address) > MAX_ADDRESS_LENGTH:
        return False
    return _ADDRESS_PATTERN.match(address) is not None
