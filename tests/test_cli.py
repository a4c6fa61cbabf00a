from __future__ import annotations

from pathlib import Path

import pytest

from bundlemaker.cli import NAME_QUESTION, PATH_QUESTION, build_parser, main


def _no_prompt(question: str) -> str:
    raise AssertionError(f"unexpected prompt: {question}")


def test_parser_accepts_make_bundle_options():
    args = build_parser().parse_args(["make:bundle", "--name", "Napse\\DemoBundle", "--path", "out"])
    assert args.command == "make:bundle"
    assert args.name == "Napse\\DemoBundle"
    assert args.path == "out"


def test_cli_make_bundle_creates_bundle(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(
        ["make:bundle", "--name", "Napse\\DemoBundle", "--path", str(tmp_path)],
        prompt=_no_prompt,
    )
    assert exit_code == 0
    assert (tmp_path / "napse-demo-bundle" / "composer.json").exists()
    out = capsys.readouterr().out
    assert 'The bundle "Napse\\DemoBundle" was successfully created at' in out
    assert "napse-demo-bundle" in out


def test_cli_prompts_for_missing_options(tmp_path: Path):
    asked: list[str] = []
    answers = {NAME_QUESTION: "Napse\\DemoBundle", PATH_QUESTION: str(tmp_path)}

    def prompt(question: str) -> str:
        asked.append(question)
        return answers[question]

    assert main(["make:bundle"], prompt=prompt) == 0
    assert asked == [NAME_QUESTION, PATH_QUESTION]
    assert (tmp_path / "napse-demo-bundle" / "src" / "DemoBundle.php").exists()


def test_cli_empty_path_answer_uses_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    workdir = tmp_path / "app"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    answers = iter(["Napse\\DemoBundle", ""])

    assert main(["make:bundle"], prompt=lambda question: next(answers)) == 0
    assert (tmp_path / "Bundles" / "napse-demo-bundle").is_dir()


def test_cli_rejects_existing_target(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    argv = ["make:bundle", "--name", "Napse\\DemoBundle", "--path", str(tmp_path)]
    assert main(argv, prompt=_no_prompt) == 0
    capsys.readouterr()

    assert main(argv, prompt=_no_prompt) == 1
    err = capsys.readouterr().err
    assert "already exists" in err
    assert str(tmp_path / "napse-demo-bundle") in err


def test_cli_reports_invalid_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["make:bundle", "--name", "DemoBundle", "--path", str(tmp_path)], prompt=_no_prompt)
    assert exit_code == 1
    assert "vendor namespace" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_no_interaction_requires_name(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["make:bundle", "--no-interaction", "--path", str(tmp_path)], prompt=_no_prompt) == 1
    assert "--name" in capsys.readouterr().err


def test_cli_end_of_input_is_treated_as_missing_name(capsys: pytest.CaptureFixture[str]):
    def prompt(question: str) -> str:
        raise EOFError

    assert main(["make:bundle"], prompt=prompt) == 1
    assert "--name" in capsys.readouterr().err


def test_cli_dry_run_writes_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(
        ["make:bundle", "--name", "Napse.DemoBundle", "--path", str(tmp_path), "--dry-run"],
        prompt=_no_prompt,
    )
    assert exit_code == 0
    assert list(tmp_path.iterdir()) == []
    out = capsys.readouterr().out
    assert "composer.json" in out
    assert "DemoBundle.php" in out
    assert "Dry run" in out


def test_cli_list(capsys: pytest.CaptureFixture[str]):
    assert main(["list"]) == 0
    assert "make:bundle" in capsys.readouterr().out


def test_cli_requires_command():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
