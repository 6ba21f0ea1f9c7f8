import pytest

from cipherlab.cli import main


def _run(capsys, argv):
    status = main(argv)
    return status, capsys.readouterr().out.strip()


def test_caesar_round_trip(capsys):
    status, encrypted = _run(capsys, ["caesar", "HelloWorld", "3"])
    assert status == 0
    assert encrypted != "HelloWorld"
    _, decrypted = _run(capsys, ["caesar", encrypted, "23"])
    assert decrypted == "HelloWorld"


def test_caesar_known_value(capsys):
    status, out = _run(capsys, ["caesar", "xyz", "3"])
    assert (status, out) == (0, "abc")


def test_powmod_value(capsys):
    status, out = _run(capsys, ["powmod", "2", "10", "1000"])
    assert (status, out) == (0, "24")


def test_powmod_zero_exponent(capsys):
    _, out = _run(capsys, ["powmod", "7", "0", "13"])
    assert out == "1"


def test_powmod_matches_fermat(capsys):
    _, out = _run(capsys, ["powmod", "5", "462", "463"])
    assert out == "1"


def test_powmod_bad_modulus_exits():
    with pytest.raises(SystemExit) as info:
        main(["powmod", "2", "3", "0"])
    assert info.value.code == 2


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_non_integer_shift_exits():
    with pytest.raises(SystemExit) as info:
        main(["caesar", "abc", "x"])
    assert info.value.code == 2