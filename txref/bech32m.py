# Based on these specifications from Pieter Wuille:
# https://github.com/sipa/bips/blob/bip-bech32m/bip-bech32m.mediawiki
"""Bech32m checksums for txrefs, with bech32 accepted as the legacy variant."""

import re

from enum import IntEnum
from typing import List, Tuple

# txref data parts are already 5-bit groups, so no `convertbits` here
from chia_base.contrib.bech32m import bech32_decode, bech32_encode, Encoding

from .errors import InvalidChecksumError


MAX_HRP_LENGTH = 83

MAX_BECH32_LENGTH = 90

UNKNOWN_CHARS_RE = re.compile(r"[^0-9A-Za-z]")


class ChecksumEncoding(IntEnum):
    # same values as `chia_base.contrib.bech32m.Encoding`
    BECH32 = Encoding.BECH32
    BECH32M = Encoding.BECH32M


def encode_data_part(
    hrp: str, data: List[int], encoding: ChecksumEncoding = ChecksumEncoding.BECH32M
) -> str:
    return bech32_encode(hrp, data, int(encoding))


def decode_data_part(text: str) -> Tuple[str, List[int], ChecksumEncoding]:
    hrp, data, spec = bech32_decode(text, max_length=MAX_BECH32_LENGTH)
    if hrp is None or data is None or spec is None:
        raise InvalidChecksumError(text)
    return hrp, list(data), ChecksumEncoding(spec)


def strip_unknown_chars(text: str) -> str:
    return UNKNOWN_CHARS_RE.sub("", text)
