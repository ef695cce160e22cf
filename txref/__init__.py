from .bech32m import ChecksumEncoding
from .buffer import (
    create_txref_storage,
    decode_into,
    encode_into,
    encode_testnet_into,
    max_txref_length,
)
from .classify import InputParam, add_hrp_if_needed, classify_input_string
from .codec import DecodedResult, decode, encode, encode_testnet
from .data_part import TxLocator
from .errors import (
    InvalidChecksumError,
    InvalidDataSizeError,
    LengthError,
    OutOfRangeError,
    TxrefError,
    TxrefErrorCode,
    UnsupportedMagicCodeError,
    UnsupportedVersionError,
    txref_strerror,
)
from .limits import (
    BECH32_HRP_MAIN,
    BECH32_HRP_TEST,
    MAGIC_BTC_MAIN,
    MAGIC_BTC_MAIN_EXTENDED,
    MAGIC_BTC_TEST,
    MAGIC_BTC_TEST_EXTENDED,
    TXREF_MAX_LENGTH,
)
from .pretty import add_group_separators, pretty_print, strip_unknown_chars
