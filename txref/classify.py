import logging

from enum import IntEnum

from .bech32m import strip_unknown_chars
from .limits import (
    BECH32_HRP_MAIN,
    BECH32_HRP_TEST,
    BECH32_SEPARATOR,
    MAIN_SENTINELS,
    TEST_SENTINELS,
    TXREF_EXT_STRING_MIN_LENGTH,
    TXREF_EXT_STRING_MIN_LENGTH_TESTNET,
    TXREF_EXT_STRING_NO_HRP_MIN_LENGTH,
    TXREF_STRING_MIN_LENGTH,
    TXREF_STRING_MIN_LENGTH_TESTNET,
    TXREF_STRING_NO_HRP_MIN_LENGTH,
)


logger = logging.getLogger(__name__)

TXID_LENGTH = 64

ADDRESS_FIRST_CHARS = "13mn2"
ADDRESS_MIN_LENGTH = 26
ADDRESS_MAX_LENGTH = 36


class InputParam(IntEnum):
    unknown = 0
    txid = 1
    address = 2
    txref = 3
    txrefext = 4


def is_length_valid_without_hrp(length: int) -> bool:
    return length in (
        TXREF_STRING_NO_HRP_MIN_LENGTH,
        TXREF_EXT_STRING_NO_HRP_MIN_LENGTH,
    )


def classify_with_hrp(text: str) -> InputParam:
    s = strip_unknown_chars(text)
    if len(s) in (TXREF_STRING_MIN_LENGTH, TXREF_STRING_MIN_LENGTH_TESTNET):
        return InputParam.txref
    if len(s) in (TXREF_EXT_STRING_MIN_LENGTH, TXREF_EXT_STRING_MIN_LENGTH_TESTNET):
        return InputParam.txrefext
    return InputParam.unknown


def classify_missing_hrp(text: str) -> InputParam:
    s = strip_unknown_chars(text)
    if len(s) == TXREF_STRING_NO_HRP_MIN_LENGTH:
        return InputParam.txref
    if len(s) == TXREF_EXT_STRING_NO_HRP_MIN_LENGTH:
        return InputParam.txrefext
    return InputParam.unknown


def classify_input_string(text: str) -> InputParam:
    """
    Guess what kind of identifier `text` is. This never raises: anything
    that can't be recognized is `InputParam.unknown`.
    """
    if not text:
        return InputParam.unknown

    # probably a transaction id
    if len(text) == TXID_LENGTH:
        return InputParam.txid

    # probably a legacy or testnet bitcoin address
    if text[0] in ADDRESS_FIRST_CHARS:
        if ADDRESS_MIN_LENGTH <= len(text) < ADDRESS_MAX_LENGTH:
            return InputParam.address

    base_result = classify_with_hrp(text)
    missing_result = classify_missing_hrp(text)

    if missing_result == InputParam.unknown:
        return base_result
    if base_result == InputParam.unknown:
        return missing_result

    # a standard mainnet txref is as long as an extended txref without its
    # hrp, so look at how it starts
    if base_result == InputParam.txref and missing_result == InputParam.txrefext:
        if text[:3] == BECH32_HRP_MAIN + BECH32_SEPARATOR:
            result = InputParam.txref
        else:
            result = InputParam.txrefext
        logger.debug("length collision for %r resolved as %s", text, result.name)
        return result

    return InputParam.unknown


def add_hrp_if_needed(text: str) -> str:
    """
    Put back the hrp of a txref that had it stripped off. `text` must
    already have been through `strip_unknown_chars`.
    """
    if not is_length_valid_without_hrp(len(text)):
        return text
    if text[0] in MAIN_SENTINELS:
        logger.debug("adding missing hrp %r", BECH32_HRP_MAIN)
        return BECH32_HRP_MAIN + BECH32_SEPARATOR + text
    if text[0] in TEST_SENTINELS:
        logger.debug("adding missing hrp %r", BECH32_HRP_TEST)
        return BECH32_HRP_TEST + BECH32_SEPARATOR + text
    return text
