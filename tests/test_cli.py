# File: tests/test_cli.py
# Purpose: Command line behaviour, exit codes and the commit flow
import shutil
import subprocess

import pytest

from commitgen.cli import main


def test_prints_generated_message(capsys):
    code = main(["--enable", "--command", "echo 'feat: add new feature'"])

    assert code == 0
    assert capsys.readouterr().out == "feat: add new feature\n"


def test_reads_command_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("LLM_ENABLED", "true")
    monkeypatch.setenv("LLM_COMMAND", "printf 'fix: from env\\n\\n'")

    assert main([]) == 0
    assert capsys.readouterr().out == "fix: from env\n"


def test_disabled_by_default(capsys):
    code = main(["--command", "echo 'feat: x'"])

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert "Error: LLM commit generation is disabled in config" in captured.err


def test_disable_flag_overrides_environment(monkeypatch, capsys):
    monkeypatch.setenv("LLM_ENABLED", "true")
    monkeypatch.setenv("LLM_COMMAND", "echo 'feat: x'")

    assert main(["--disable"]) == 2


def test_command_not_configured(capsys):
    assert main(["--enable"]) == 2
    assert "LLM command is not configured" in capsys.readouterr().err


def test_upstream_error_text_shown(capsys):
    code = main(["--enable", "--command", "echo 'error: API rate limit exceeded'"])

    assert code == 1
    assert "Error: error: API rate limit exceeded" in capsys.readouterr().err


def test_stderr_shown_on_command_failure(capsys):
    assert main(["--enable", "--command", "echo 'quota exhausted' >&2; exit 1"]) == 1
    assert "Error: quota exhausted" in capsys.readouterr().err


def test_empty_response_localized(capsys):
    assert main(["--enable", "--lang", "zh", "--command", "echo ''"]) == 1
    assert "LLM 命令返回为空" in capsys.readouterr().err


def test_timeout_exit_code(capsys):
    code = main(["--enable", "--timeout", "1", "--command", "sleep 5"])

    assert code == 124
    assert "command timed out after 1 seconds" in capsys.readouterr().err


def test_rejects_non_positive_timeout():
    with pytest.raises(SystemExit) as exc_info:
        main(["--enable", "--timeout", "0", "--command", "echo hi"])
    assert exc_info.value.code == 2


def _git(repo, *args):
    return subprocess.run(["git", "-C", str(repo), *args], capture_output=True, text=True, check=True)


@pytest.fixture()
def staged_repo(tmp_path):
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "dev@example.com")
    _git(repo, "config", "user.name", "Dev")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "test.txt").write_text("initial content\n", encoding="utf-8")
    _git(repo, "add", "test.txt")
    return repo


def test_commit_with_generated_message(staged_repo, capsys):
    command = "printf 'feat: add test file\\n\\nCreated by the generator.\\n'"

    code = main(["--enable", "--command", command, "--commit", "--repo", str(staged_repo)])

    assert code == 0
    log = _git(staged_repo, "log", "-1", "--format=%B").stdout
    assert log.strip() == "feat: add test file\n\nCreated by the generator."


def test_no_commit_when_generation_fails(staged_repo, capsys):
    code = main([
        "--enable",
        "--command", "echo 'error: API rate limit exceeded'",
        "--commit",
        "--repo", str(staged_repo),
    ])

    assert code == 1
    result = subprocess.run(
        ["git", "-C", str(staged_repo), "rev-parse", "--verify", "HEAD"],
        capture_output=True,
        text=True,
    )
    assert result.returncode != 0


def test_commit_failure_reported(staged_repo, capsys):
    _git(staged_repo, "commit", "-q", "-m", "initial")

    code = main(["--enable", "--command", "echo 'feat: nothing staged'", "--commit", "--repo", str(staged_repo)])

    assert code == 1
    assert "Error:" in capsys.readouterr().err
