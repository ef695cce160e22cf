# BIP-0136 constants: network prefixes, magic codes and string lengths
# https://github.com/bitcoin/bips/blob/master/bip-0136.mediawiki

BECH32_HRP_MAIN = "tx"
BECH32_HRP_TEST = "txtest"

BECH32_SEPARATOR = "1"

MAGIC_BTC_MAIN = 0x3
MAGIC_BTC_MAIN_EXTENDED = 0x4
MAGIC_BTC_TEST = 0x6
MAGIC_BTC_TEST_EXTENDED = 0x7

EXTENDED_MAGIC_CODES = (MAGIC_BTC_MAIN_EXTENDED, MAGIC_BTC_TEST_EXTENDED)

# first character of a txref body with its hrp stripped off
MAIN_SENTINELS = ("r", "y")
TEST_SENTINELS = ("x", "8")

COLON = ":"
HYPHEN = "-"

MAX_BLOCK_HEIGHT = 0xFFFFFF
MAX_TRANSACTION_POSITION = 0x7FFF
MAX_TXO_INDEX = 0x7FFF
MAX_MAGIC_CODE = 0x1F

DATA_SIZE = 9
DATA_EXTENDED_SIZE = 12

CHECKSUM_LENGTH = 6

# lengths of unpunctuated txrefs
TXREF_STRING_NO_HRP_MIN_LENGTH = DATA_SIZE + CHECKSUM_LENGTH
TXREF_EXT_STRING_NO_HRP_MIN_LENGTH = DATA_EXTENDED_SIZE + CHECKSUM_LENGTH

TXREF_STRING_MIN_LENGTH = len(BECH32_HRP_MAIN) + 1 + TXREF_STRING_NO_HRP_MIN_LENGTH
TXREF_STRING_MIN_LENGTH_TESTNET = (
    len(BECH32_HRP_TEST) + 1 + TXREF_STRING_NO_HRP_MIN_LENGTH
)
TXREF_EXT_STRING_MIN_LENGTH = (
    len(BECH32_HRP_MAIN) + 1 + TXREF_EXT_STRING_NO_HRP_MIN_LENGTH
)
TXREF_EXT_STRING_MIN_LENGTH_TESTNET = (
    len(BECH32_HRP_TEST) + 1 + TXREF_EXT_STRING_NO_HRP_MIN_LENGTH
)

# a colon, then a hyphen between each group of 4 body characters
TXREF_PUNCTUATION_MAX = 1 + (TXREF_EXT_STRING_NO_HRP_MIN_LENGTH - 1) // 4

# longest punctuated txref, an extended testnet one: txtest1:xxxx-xxxx-xxxx-xxxx-xx
TXREF_MAX_LENGTH = TXREF_EXT_STRING_MIN_LENGTH_TESTNET + TXREF_PUNCTUATION_MAX
