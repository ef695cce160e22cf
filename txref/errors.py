from enum import IntEnum
from typing import Optional


class TxrefErrorCode(IntEnum):
    SUCCESS = 0
    UNKNOWN_ERROR = 1
    NULL_ARGUMENT = 2
    LENGTH_TOO_SHORT = 3
    OUT_OF_RANGE = 4
    UNSUPPORTED_MAGIC_CODE = 5
    UNSUPPORTED_VERSION = 6
    INVALID_CHECKSUM = 7
    INVALID_DATA_SIZE = 8


ERROR_DESCRIPTIONS = {
    TxrefErrorCode.SUCCESS: "Success",
    TxrefErrorCode.UNKNOWN_ERROR: "Unknown error",
    TxrefErrorCode.NULL_ARGUMENT: "Function argument was null",
    TxrefErrorCode.LENGTH_TOO_SHORT: "Function argument length was too short",
    TxrefErrorCode.OUT_OF_RANGE: "Value is out of range",
    TxrefErrorCode.UNSUPPORTED_MAGIC_CODE: "Magic code is not supported",
    TxrefErrorCode.UNSUPPORTED_VERSION: "Txref version is not supported",
    TxrefErrorCode.INVALID_CHECKSUM: "Checksum is invalid",
    TxrefErrorCode.INVALID_DATA_SIZE: "Decoded data part has the wrong size",
}


class TxrefError(ValueError):
    code = TxrefErrorCode.UNKNOWN_ERROR


class OutOfRangeError(TxrefError):
    code = TxrefErrorCode.OUT_OF_RANGE

    def __init__(self, field: str, value: int, maximum: int):
        self.field = field
        self.value = value
        self.maximum = maximum
        super().__init__(f"{field} {value} is out of range (0..{maximum})")


class UnsupportedMagicCodeError(TxrefError):
    code = TxrefErrorCode.UNSUPPORTED_MAGIC_CODE

    def __init__(self, magic_code: int):
        self.magic_code = magic_code
        super().__init__(
            f"magic code {magic_code} does not support extended txrefs"
        )


class UnsupportedVersionError(TxrefError):
    code = TxrefErrorCode.UNSUPPORTED_VERSION

    def __init__(self, actual: int):
        self.actual = actual
        super().__init__(f"Unknown txref version detected: {actual}")


class InvalidChecksumError(TxrefError):
    code = TxrefErrorCode.INVALID_CHECKSUM

    def __init__(self, text: Optional[str] = None):
        self.text = text
        super().__init__("checksum is invalid")


class InvalidDataSizeError(TxrefError):
    code = TxrefErrorCode.INVALID_DATA_SIZE

    def __init__(self, actual_size: int):
        self.actual_size = actual_size
        super().__init__(f"decoded data part size {actual_size} is incorrect")


class LengthError(TxrefError):
    code = TxrefErrorCode.LENGTH_TOO_SHORT

    def __init__(self, message: str, needed: int = 0, available: int = 0):
        self.needed = needed
        self.available = available
        super().__init__(message)


def txref_strerror(code: int) -> str:
    try:
        return ERROR_DESCRIPTIONS[TxrefErrorCode(code)]
    except ValueError:
        return ERROR_DESCRIPTIONS[TxrefErrorCode.UNKNOWN_ERROR]
