"""
Fixed-capacity variants of `encode`, `encode_testnet` and `decode`, for
callers that hand over preallocated storage (ex: across an FFI boundary).

Results are written as NUL-terminated ASCII into a caller-supplied
`bytearray`, and every failure is reported as a `TxrefErrorCode` instead
of an exception. Nothing is written unless the whole result fits.
"""

import logging

from typing import Callable, Optional, Tuple

from .codec import DecodedResult, decode, encode, encode_testnet
from .errors import TxrefError, TxrefErrorCode
from .limits import TXREF_MAX_LENGTH


logger = logging.getLogger(__name__)


def max_txref_length() -> int:
    """The size of a buffer able to hold any txref, including the NUL."""
    return TXREF_MAX_LENGTH + 1


def create_txref_storage() -> bytearray:
    return bytearray(max_txref_length())


def copy_into(buffer: bytearray, text: str) -> TxrefErrorCode:
    try:
        blob = text.encode("ascii")
    except UnicodeEncodeError:
        return TxrefErrorCode.UNKNOWN_ERROR
    if len(blob) + 1 > len(buffer):
        return TxrefErrorCode.LENGTH_TOO_SHORT
    buffer[: len(blob)] = blob
    buffer[len(blob)] = 0
    return TxrefErrorCode.SUCCESS


def read_from(buffer: bytearray) -> str:
    return bytes(buffer).split(b"\0", 1)[0].decode("ascii")


def _call(f: Callable, *args) -> Tuple[TxrefErrorCode, Optional[object]]:
    try:
        return TxrefErrorCode.SUCCESS, f(*args)
    except TxrefError as ex:
        logger.debug("%s failed: %s", f.__name__, ex)
        return ex.code, None
    except (TypeError, ValueError) as ex:
        logger.debug("%s failed: %r", f.__name__, ex)
        return TxrefErrorCode.UNKNOWN_ERROR, None


def _encode_into(
    f: Callable,
    buffer: Optional[bytearray],
    block_height: int,
    transaction_position: int,
    txo_index: int,
    force_extended: bool,
    hrp: Optional[str],
) -> TxrefErrorCode:
    if buffer is None or hrp is None:
        return TxrefErrorCode.NULL_ARGUMENT
    code, txref = _call(
        f, block_height, transaction_position, txo_index, force_extended, hrp
    )
    if code != TxrefErrorCode.SUCCESS:
        return code
    return copy_into(buffer, txref)


def encode_into(
    buffer: Optional[bytearray],
    block_height: int,
    transaction_position: int,
    txo_index: int,
    force_extended: bool,
    hrp: Optional[str],
) -> TxrefErrorCode:
    return _encode_into(
        encode,
        buffer,
        block_height,
        transaction_position,
        txo_index,
        force_extended,
        hrp,
    )


def encode_testnet_into(
    buffer: Optional[bytearray],
    block_height: int,
    transaction_position: int,
    txo_index: int,
    force_extended: bool,
    hrp: Optional[str],
) -> TxrefErrorCode:
    return _encode_into(
        encode_testnet,
        buffer,
        block_height,
        transaction_position,
        txo_index,
        force_extended,
        hrp,
    )


def decode_into(
    buffer: Optional[bytearray], txref: Optional[str]
) -> Tuple[TxrefErrorCode, Optional[DecodedResult]]:
    """
    Decode `txref`, copying its canonical form into `buffer`. The decoded
    fields are returned alongside the error code.
    """
    if buffer is None or txref is None:
        return TxrefErrorCode.NULL_ARGUMENT, None
    code, result = _call(decode, txref)
    if code != TxrefErrorCode.SUCCESS:
        return code, None
    code = copy_into(buffer, result.txref)
    if code != TxrefErrorCode.SUCCESS:
        return code, None
    return code, result
