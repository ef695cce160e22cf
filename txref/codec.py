import logging

from dataclasses import dataclass, replace
from typing import Optional

from .bech32m import (
    ChecksumEncoding,
    decode_data_part,
    encode_data_part,
    strip_unknown_chars,
)
from .classify import add_hrp_if_needed
from .data_part import TxLocator, is_data_size_valid
from .errors import InvalidDataSizeError
from .limits import (
    BECH32_HRP_MAIN,
    BECH32_HRP_TEST,
    EXTENDED_MAGIC_CODES,
    MAGIC_BTC_MAIN,
    MAGIC_BTC_MAIN_EXTENDED,
    MAGIC_BTC_TEST,
    MAGIC_BTC_TEST_EXTENDED,
)
from .pretty import pretty_print


logger = logging.getLogger(__name__)

BECH32_CHECKSUMS_URL = "https://github.com/dcdpr/libtxref#regarding-bech32-checksums"


@dataclass(frozen=True)
class DecodedResult:
    txref: str
    hrp: str
    magic_code: int
    block_height: int
    transaction_position: int
    txo_index: int
    encoding: ChecksumEncoding
    commentary: str = ""
    updated_txref: Optional[str] = None

    @property
    def locator(self) -> TxLocator:
        return TxLocator(
            self.magic_code,
            self.block_height,
            self.transaction_position,
            self.txo_index,
            self.magic_code in EXTENDED_MAGIC_CODES,
        )

    @property
    def is_legacy(self) -> bool:
        return self.encoding == ChecksumEncoding.BECH32


def txref_encode_locator(
    hrp: str,
    locator: TxLocator,
    encoding: ChecksumEncoding = ChecksumEncoding.BECH32M,
) -> str:
    dp = locator.to_data_part()
    plain = encode_data_part(hrp, dp, encoding)
    return pretty_print(plain, len(hrp))


def _encode(
    hrp: str,
    magic_code: int,
    magic_code_extended: int,
    block_height: int,
    transaction_position: int,
    txo_index: int,
    force_extended: bool,
) -> str:
    if txo_index == 0 and not force_extended:
        locator = TxLocator(magic_code, block_height, transaction_position)
    else:
        locator = TxLocator(
            magic_code_extended,
            block_height,
            transaction_position,
            txo_index,
            extended=True,
        )
    return txref_encode_locator(hrp, locator)


def encode(
    block_height: int,
    transaction_position: int,
    txo_index: int = 0,
    force_extended: bool = False,
    hrp: str = BECH32_HRP_MAIN,
) -> str:
    """
    Encode the position of a confirmed transaction on mainnet as a txref.
    An extended txref is returned when `txo_index` is not 0, or when
    `force_extended` is set.
    """
    return _encode(
        hrp,
        MAGIC_BTC_MAIN,
        MAGIC_BTC_MAIN_EXTENDED,
        block_height,
        transaction_position,
        txo_index,
        force_extended,
    )


def encode_testnet(
    block_height: int,
    transaction_position: int,
    txo_index: int = 0,
    force_extended: bool = False,
    hrp: str = BECH32_HRP_TEST,
) -> str:
    """Like `encode`, but for testnet."""
    return _encode(
        hrp,
        MAGIC_BTC_TEST,
        MAGIC_BTC_TEST_EXTENDED,
        block_height,
        transaction_position,
        txo_index,
        force_extended,
    )


def decode(txref: str) -> DecodedResult:
    """
    Decode a txref, with or without punctuation or its hrp.

    Txrefs checksummed with the original bech32 algorithm still decode,
    but the result has `encoding == ChecksumEncoding.BECH32` and carries the
    bech32m form of the same txref in `updated_txref`.
    """
    txref_clean = add_hrp_if_needed(strip_unknown_chars(txref))

    hrp, dp, spec = decode_data_part(txref_clean)

    if not is_data_size_valid(len(dp)):
        raise InvalidDataSizeError(len(dp))

    locator = TxLocator.from_data_part(dp)

    pretty = pretty_print(txref_clean, len(hrp))

    commentary = ""
    updated_txref = None
    if spec == ChecksumEncoding.BECH32:
        # the magic code, not the data part size, picks the form to re-encode
        updated = replace(
            locator, extended=locator.magic_code in EXTENDED_MAGIC_CODES
        )
        updated_txref = txref_encode_locator(hrp, updated)
        commentary = (
            f"The txref {pretty} uses an old encoding scheme and should be "
            f"updated to {updated_txref} See {BECH32_CHECKSUMS_URL} for more "
            "information."
        )
        logger.info("txref %s uses a bech32 checksum", pretty)

    return DecodedResult(
        txref=pretty,
        hrp=hrp,
        magic_code=locator.magic_code,
        block_height=locator.block_height,
        transaction_position=locator.transaction_position,
        txo_index=locator.txo_index,
        encoding=spec,
        commentary=commentary,
        updated_txref=updated_txref,
    )
