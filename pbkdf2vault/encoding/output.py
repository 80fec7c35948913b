"""
Fixed-Width Output Encoding

Salts and derived keys are stored as printable strings with the same
length as the raw bytes they come from, so a salt and a key can be
concatenated into one record and split again by length alone.
"""

import base64
from typing import Union


def encode(raw: Union[bytes, bytearray]) -> str:
    """
    Encode binary data as a printable string of the same length.

    The data is base64 encoded. When the encoding is at least 4 characters
    longer than the input, the first 2 and last 2 characters (the padding
    end and the matching start) are dropped. The result is then cut to the
    input length.

    Args:
        raw: Bytes to encode

    Returns:
        A base64-alphabet string with len(result) == len(raw)
    """
    length = len(raw)
    encoded = base64.b64encode(bytes(raw)).decode('ascii')

    if len(encoded) - length >= 4:
        encoded = encoded[2:-2]

    return encoded[:length]
