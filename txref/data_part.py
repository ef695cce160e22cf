from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidDataSizeError, UnsupportedVersionError
from .limits import (
    DATA_EXTENDED_SIZE,
    DATA_SIZE,
    MAGIC_BTC_MAIN,
    MAGIC_BTC_MAIN_EXTENDED,
    MAGIC_BTC_TEST,
    MAGIC_BTC_TEST_EXTENDED,
)
from .validation import (
    check_block_height_range,
    check_extended_magic_code,
    check_magic_code_range,
    check_transaction_position_range,
    check_txo_index_range,
)


TXREF_VERSION = 0

NETWORK_FOR_MAGIC_CODE = {
    MAGIC_BTC_MAIN: "main",
    MAGIC_BTC_MAIN_EXTENDED: "main",
    MAGIC_BTC_TEST: "test",
    MAGIC_BTC_TEST_EXTENDED: "test",
}


def is_data_size_valid(data_size: int) -> bool:
    return data_size in (DATA_SIZE, DATA_EXTENDED_SIZE)


@dataclass(frozen=True)
class TxLocator:
    """
    The fields carried in a txref data part. `txo_index` is only stored
    in extended txrefs, and is always 0 for standard ones.

    When unpacking, the data part size alone decides whether `txo_index`
    is read: a 12 group data part under a standard magic code still
    yields its txo index, and `extended` is then True.
    """

    magic_code: int
    block_height: int
    transaction_position: int
    txo_index: int = 0
    extended: bool = False

    @property
    def network(self) -> Optional[str]:
        return NETWORK_FOR_MAGIC_CODE.get(self.magic_code)

    def validate(self) -> None:
        check_block_height_range(self.block_height)
        check_transaction_position_range(self.transaction_position)
        if self.extended:
            check_txo_index_range(self.txo_index)
        check_magic_code_range(self.magic_code)
        if self.extended:
            check_extended_magic_code(self.magic_code)

    def to_data_part(self) -> List[int]:
        """
        Pack into 5-bit groups: the magic code, a version bit, 24 bits of
        block height, 15 bits of transaction position and, for extended
        txrefs, 15 bits of txo index. Each field is stored low bits first.
        """
        self.validate()

        bh = self.block_height
        tp = self.transaction_position

        dp = [0] * (DATA_EXTENDED_SIZE if self.extended else DATA_SIZE)

        dp[0] = self.magic_code

        dp[1] &= ~(1 << 0)  # version 0

        dp[1] |= (bh & 0xF) << 1
        dp[2] |= (bh & 0x1F0) >> 4
        dp[3] |= (bh & 0x3E00) >> 9
        dp[4] |= (bh & 0x7C000) >> 14
        dp[5] |= (bh & 0xF80000) >> 19

        dp[6] |= tp & 0x1F
        dp[7] |= (tp & 0x3E0) >> 5
        dp[8] |= (tp & 0x7C00) >> 10

        if self.extended:
            ti = self.txo_index
            dp[9] |= ti & 0x1F
            dp[10] |= (ti & 0x3E0) >> 5
            dp[11] |= (ti & 0x7C00) >> 10

        return dp

    @classmethod
    def from_data_part(cls, dp: List[int]) -> "TxLocator":
        if not is_data_size_valid(len(dp)):
            raise InvalidDataSizeError(len(dp))

        magic_code = dp[0]

        version = dp[1] & 0x1
        if version != TXREF_VERSION:
            raise UnsupportedVersionError(version)

        block_height = dp[1] >> 1
        block_height |= dp[2] << 4
        block_height |= dp[3] << 9
        block_height |= dp[4] << 14
        block_height |= dp[5] << 19

        transaction_position = dp[6]
        transaction_position |= dp[7] << 5
        transaction_position |= dp[8] << 10

        extended = len(dp) == DATA_EXTENDED_SIZE
        txo_index = 0
        if extended:
            txo_index = dp[9]
            txo_index |= dp[10] << 5
            txo_index |= dp[11] << 10

        return cls(magic_code, block_height, transaction_position, txo_index, extended)
