from txref.codec import encode, encode_testnet
from txref.main import main


def test_encode(capsys):
    assert main(["encode", "466793", "2205"]) == 0
    assert capsys.readouterr().out == encode(466793, 2205) + "\n"


def test_encode_extended_testnet(capsys):
    assert main(["encode", "466793", "2205", "--testnet", "--extended"]) == 0
    out = capsys.readouterr().out
    assert out == encode_testnet(466793, 2205, 0, True) + "\n"


def test_encode_out_of_range(capsys):
    assert main(["encode", "16777216", "0"]) == 1
    assert "block_height" in capsys.readouterr().err


def test_decode(capsys):
    txref = encode(466793, 2205, 12)
    assert main(["decode", txref]) == 0
    out = capsys.readouterr().out
    assert f"txref: {txref}" in out
    assert "block height: 466793" in out
    assert "transaction position: 2205" in out
    assert "txo index: 12" in out
    assert "encoding: bech32m" in out


def test_decode_bad_checksum(capsys):
    assert main(["decode", "garbage"]) == 1
    assert "checksum is invalid" in capsys.readouterr().err


def test_classify(capsys):
    assert main(["classify", "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"]) == 0
    assert capsys.readouterr().out == "address\n"
    assert main(["classify", encode(1, 1)]) == 0
    assert capsys.readouterr().out == "txref\n"


def test_decode_legacy(capsys):
    assert main(["decode", "tx1:rjk0-uqay-zsrw-hqe"]) == 0
    out = capsys.readouterr().out
    assert "encoding: bech32\n" in out
    assert "should be updated to tx1:rjk0-uqay-z9l7-m9m" in out
