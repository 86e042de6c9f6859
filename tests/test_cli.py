import pytest

from tokenqueue.cli import main


def test_main_runs_session(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Count of Persons Serviced: 3" in out
    assert out.count("We are sorry.") == 3
    assert "Token Id:  9\n" in out


def test_main_issues_tokens_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    positions = [out.index(f"Token Id:  {n}\n") for n in range(1, 10)]
    assert positions == sorted(positions)


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])