from .errors import OutOfRangeError, UnsupportedMagicCodeError
from .limits import (
    EXTENDED_MAGIC_CODES,
    MAX_BLOCK_HEIGHT,
    MAX_MAGIC_CODE,
    MAX_TRANSACTION_POSITION,
    MAX_TXO_INDEX,
)


def check_range(field: str, value: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an int, not {type(value).__name__}")
    if value < 0 or value > maximum:
        raise OutOfRangeError(field, value, maximum)


def check_block_height_range(block_height: int) -> None:
    check_range("block_height", block_height, MAX_BLOCK_HEIGHT)


def check_transaction_position_range(transaction_position: int) -> None:
    check_range("transaction_position", transaction_position, MAX_TRANSACTION_POSITION)


def check_txo_index_range(txo_index: int) -> None:
    check_range("txo_index", txo_index, MAX_TXO_INDEX)


def check_magic_code_range(magic_code: int) -> None:
    check_range("magic_code", magic_code, MAX_MAGIC_CODE)


def check_extended_magic_code(magic_code: int) -> None:
    # keeps an extended txref from being built under a standard magic code
    if magic_code not in EXTENDED_MAGIC_CODES:
        raise UnsupportedMagicCodeError(magic_code)
