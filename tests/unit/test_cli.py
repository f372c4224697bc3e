from __future__ import annotations

import json

import pytest


def test_cli_prints_requested_number_of_names(capsys: pytest.CaptureFixture[str]) -> None:
    from usernames.cli import main

    main(["--count", "4", "--seed", "11"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert len(set(lines)) == 4
    assert all(len(line.split("-")) == 2 for line in lines)


def test_cli_seed_is_reproducible(capsys: pytest.CaptureFixture[str]) -> None:
    from usernames.cli import main

    main(["--count", "6", "--seed", "42", "--word-count", "3"])
    first = capsys.readouterr().out
    main(["--count", "6", "--seed", "42", "--word-count", "3"])
    second = capsys.readouterr().out
    assert first == second


def test_cli_json_output_with_options(capsys: pytest.CaptureFixture[str]) -> None:
    from usernames.cli import main
    from usernames.words import NOUNS

    main(["--count", "3", "--seed", "5", "--word-count", "1", "--separator", "_", "--json"])
    names = json.loads(capsys.readouterr().out)
    assert isinstance(names, list)
    assert len(names) == 3
    assert all(n in NOUNS for n in names)


def test_cli_short_batch_is_not_an_error(capsys: pytest.CaptureFixture[str]) -> None:
    from usernames.cli import main

    main(["--count", "2", "--min-length", "10000", "--max-attempts", "2", "--json"])
    assert json.loads(capsys.readouterr().out) == []


def test_cli_rejects_bad_flag() -> None:
    from usernames.cli import main

    with pytest.raises(SystemExit) as exc:
        main(["--count", "many"])
    assert exc.value.code == 2


def test_cli_honors_max_length(capsys: pytest.CaptureFixture[str]) -> None:
    from usernames.cli import main

    main(["--count", "5", "--seed", "3", "--max-length", "9"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(len(line) <= 9 for line in lines)
