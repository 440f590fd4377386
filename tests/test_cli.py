import pytest

from playground.cli import main


def test_default_number_is_out_of_bounds(capsys) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out == "Out of Bounds Error\n"


def test_default_number_from_env(monkeypatch, capsys) -> None:
    monkeypatch.setenv("ROOT_CHECK_NUMBER", "9604")
    assert main([]) == 0
    assert capsys.readouterr().out == "The square root of 9604 is 98\n"


def test_one_line_per_number(capsys) -> None:
    assert main(["16", "17", "-4"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "The square root of 16 is 4",
        "No Square Root was found",
        "Out of Bounds Error",
    ]


def test_debug_log(monkeypatch, capsys) -> None:
    monkeypatch.setenv("DEBUG_LOG", "1")
    main(["4"])
    assert capsys.readouterr().out.splitlines() == ["[Root] checking 4", "The square root of 4 is 2"]


def test_rejects_non_integer_argument(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["four"])
    assert excinfo.value.code == 2
    assert "invalid int value" in capsys.readouterr().err
