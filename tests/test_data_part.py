import pytest

from txref.data_part import TxLocator
from txref.errors import (
    InvalidDataSizeError,
    OutOfRangeError,
    UnsupportedMagicCodeError,
    UnsupportedVersionError,
)
from txref.limits import (
    MAGIC_BTC_MAIN,
    MAGIC_BTC_MAIN_EXTENDED,
    MAGIC_BTC_TEST,
    MAGIC_BTC_TEST_EXTENDED,
)


def test_pack_bip136_example():
    locator = TxLocator(MAGIC_BTC_MAIN, 466793, 2205)
    assert locator.to_data_part() == [3, 18, 22, 15, 28, 0, 29, 4, 2]


def test_pack_extended():
    locator = TxLocator(MAGIC_BTC_MAIN_EXTENDED, 466793, 2205, 3, extended=True)
    assert locator.to_data_part() == [4, 18, 22, 15, 28, 0, 29, 4, 2, 3, 0, 0]


def test_pack_maximums():
    locator = TxLocator(
        MAGIC_BTC_TEST_EXTENDED, 0xFFFFFF, 0x7FFF, 0x7FFF, extended=True
    )
    # the version bit stays clear
    assert locator.to_data_part() == [7, 30] + [31] * 10


def test_unpack():
    locator = TxLocator.from_data_part([3, 18, 22, 15, 28, 0, 29, 4, 2])
    assert locator == TxLocator(MAGIC_BTC_MAIN, 466793, 2205)
    assert locator.network == "main"


def test_unpack_extended():
    locator = TxLocator.from_data_part([7, 30] + [31] * 10)
    assert locator.extended
    assert locator.network == "test"
    assert (locator.block_height, locator.transaction_position, locator.txo_index) == (
        0xFFFFFF,
        0x7FFF,
        0x7FFF,
    )


def test_unpack_standard_has_no_txo_index():
    locator = TxLocator.from_data_part([MAGIC_BTC_TEST, 30] + [31] * 7)
    assert locator.txo_index == 0
    assert not locator.extended


@pytest.mark.parametrize("size", [0, 8, 10, 11, 13])
def test_unpack_bad_size(size):
    with pytest.raises(InvalidDataSizeError) as excinfo:
        TxLocator.from_data_part([3] + [0] * (size - 1) if size else [])
    assert excinfo.value.actual_size == size


def test_unpack_unknown_version():
    dp = [3, 18 | 1, 22, 15, 28, 0, 29, 4, 2]
    with pytest.raises(UnsupportedVersionError) as excinfo:
        TxLocator.from_data_part(dp)
    assert excinfo.value.actual == 1


def test_extended_needs_extended_magic_code():
    for magic_code in (MAGIC_BTC_MAIN, MAGIC_BTC_TEST, 0, 31):
        with pytest.raises(UnsupportedMagicCodeError):
            TxLocator(magic_code, 0, 0, 0, extended=True).to_data_part()


@pytest.mark.parametrize(
    "kwargs, field",
    [
        (dict(block_height=0x1000000), "block_height"),
        (dict(block_height=-1), "block_height"),
        (dict(transaction_position=0x8000), "transaction_position"),
        (dict(txo_index=0x8000), "txo_index"),
        (dict(magic_code=0x20), "magic_code"),
    ],
)
def test_out_of_range(kwargs, field):
    fields = dict(
        magic_code=MAGIC_BTC_MAIN_EXTENDED,
        block_height=0,
        transaction_position=0,
        txo_index=0,
        extended=True,
    )
    fields.update(kwargs)
    with pytest.raises(OutOfRangeError) as excinfo:
        TxLocator(**fields).to_data_part()
    assert excinfo.value.field == field


def test_rejects_non_int():
    with pytest.raises(TypeError):
        TxLocator(MAGIC_BTC_MAIN, "12", 0).to_data_part()
    with pytest.raises(TypeError):
        TxLocator(MAGIC_BTC_MAIN, True, 0).to_data_part()


def test_unpack_extended_size_under_standard_magic_code():
    # the size, not the magic code, decides whether a txo index is read
    dp = [MAGIC_BTC_MAIN, 0, 0, 0, 0, 0, 0, 0, 0, 5, 0, 0]
    locator = TxLocator.from_data_part(dp)
    assert locator.magic_code == MAGIC_BTC_MAIN
    assert locator.txo_index == 5
    assert locator.extended
