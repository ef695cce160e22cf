#!/usr/bin/env python3

import argparse
import logging
import sys

from .classify import classify_input_string
from .codec import decode, encode, encode_testnet
from .errors import TxrefError
from .limits import BECH32_HRP_MAIN, BECH32_HRP_TEST


def show_decoded(result):
    print(f"txref: {result.txref}")
    print(f"hrp: {result.hrp}")
    print(f"magic code: {result.magic_code}")
    print(f"block height: {result.block_height}")
    print(f"transaction position: {result.transaction_position}")
    print(f"txo index: {result.txo_index}")
    print(f"encoding: {result.encoding.name.lower()}")
    if result.commentary:
        print()
        print(result.commentary)


def cmd_encode(args):
    if args.testnet:
        f = encode_testnet
        hrp = args.hrp or BECH32_HRP_TEST
    else:
        f = encode
        hrp = args.hrp or BECH32_HRP_MAIN
    print(
        f(
            args.block_height,
            args.transaction_position,
            args.txo_index,
            args.extended,
            hrp,
        )
    )


def cmd_decode(args):
    show_decoded(decode(args.txref))


def cmd_classify(args):
    print(classify_input_string(args.input).name)


def create_parser():
    parser = argparse.ArgumentParser(
        description="Encode and decode transaction position references (BIP-0136)."
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="encode a txref")
    encode_parser.add_argument("block_height", metavar="BLOCK_HEIGHT", type=int)
    encode_parser.add_argument(
        "transaction_position", metavar="TRANSACTION_POSITION", type=int
    )
    encode_parser.add_argument(
        "txo_index",
        metavar="TXO_INDEX",
        type=int,
        nargs="?",
        default=0,
        help="output index; a nonzero value gives an extended txref",
    )
    encode_parser.add_argument(
        "-t",
        "--testnet",
        action="store_true",
        help="encode for testnet",
    )
    encode_parser.add_argument(
        "-e",
        "--extended",
        action="store_true",
        help="encode an extended txref even if TXO_INDEX is 0",
    )
    encode_parser.add_argument("--hrp", help="override the human-readable part")
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="decode a txref")
    decode_parser.add_argument("txref", metavar="TXREF")
    decode_parser.set_defaults(func=cmd_decode)

    classify_parser = subparsers.add_parser(
        "classify", help="guess what kind of identifier a string is"
    )
    classify_parser.add_argument("input", metavar="INPUT")
    classify_parser.set_defaults(func=cmd_classify)

    return parser


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except TxrefError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
