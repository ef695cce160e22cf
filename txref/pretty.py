"""
Txrefs are printed with a colon after the hrp and its separator, and a
hyphen between each group of four characters after that:

    tx1rqqqqqqqqcccccc  ->  tx1:rqqq-qqqq-qccc-ccc

where "cccccc" is the checksum.
"""

from .bech32m import MAX_HRP_LENGTH, strip_unknown_chars
from .errors import LengthError
from .limits import COLON, HYPHEN


__all__ = ["add_group_separators", "pretty_print", "strip_unknown_chars"]


def add_group_separators(raw: str, hrp_length: int, separator_offset: int = 4) -> str:
    if hrp_length > MAX_HRP_LENGTH:
        raise LengthError(
            f"HRP must be less than {MAX_HRP_LENGTH + 1} characters long",
            needed=hrp_length,
            available=MAX_HRP_LENGTH,
        )

    if separator_offset < 1:
        raise LengthError("separator_offset must be > 0")

    if len(raw) < 2:
        raise LengthError(
            "Can't add separator characters to strings with length < 2",
            needed=2,
            available=len(raw),
        )

    if len(raw) == hrp_length:
        return raw

    if len(raw) < hrp_length:
        raise LengthError(
            "HRP length can't be greater than input length",
            needed=hrp_length,
            available=len(raw),
        )

    # (len(raw) - hrp_length - 1) // separator_offset hyphens
    body = raw[hrp_length:]
    groups = [
        body[i : i + separator_offset] for i in range(0, len(body), separator_offset)
    ]
    return raw[:hrp_length] + HYPHEN.join(groups)


def pretty_print(plain: str, hrp_length: int) -> str:
    if hrp_length > MAX_HRP_LENGTH:
        raise LengthError(
            f"HRP must be less than {MAX_HRP_LENGTH + 1} characters long",
            needed=hrp_length,
            available=MAX_HRP_LENGTH,
        )

    # the hrp plus its bech32 "1" separator
    prefix_length = hrp_length + 1
    result = plain[:prefix_length] + COLON + plain[prefix_length:]

    return add_group_separators(result, prefix_length + 1)
