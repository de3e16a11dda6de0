# File: src/commitgen/core/command_runner.py
# Purpose: Run the configured LLM shell command with a hard deadline
import os
import signal
import subprocess
from dataclasses import dataclass
from typing import Optional

import structlog

from commitgen.config import DEFAULT_TIMEOUT_S
from commitgen.errors import ClassifiedError, ErrorKind

logger = structlog.get_logger(__name__)

# How long to wait for pipe EOF once the process group is killed
KILL_GRACE_S = 1


@dataclass(frozen=True)
class ExecutionOutcome:
    stdout: bytes
    stderr_snippet: Optional[str]
    exit_failed: bool
    timed_out: bool
    returncode: Optional[int] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return not (self.exit_failed or self.timed_out or self.error)


class CommandRunner:
    """
    Executes one shell command per call and reaps it before returning.

    The command string goes to `/bin/sh -c` so pipes and redirection work.
    It is trusted local configuration and must never be built from
    untrusted input.
    """

    def __init__(self, timeout_s: int = DEFAULT_TIMEOUT_S) -> None:
        self.timeout_s = timeout_s

    def run(self, command: str) -> bytes:
        logger.debug("llm_command_started", command=command, timeout_s=self.timeout_s)
        outcome = self.execute(command)
        if outcome.ok:
            return outcome.stdout
        raise self.classify(outcome)

    def execute(self, command: str) -> ExecutionOutcome:
        try:
            proc = subprocess.Popen(
                command,
                shell=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                # Own process group, so a timeout takes down the whole pipeline
                start_new_session=True,
            )
        except OSError as exc:
            return ExecutionOutcome(
                stdout=b"",
                stderr_snippet=None,
                exit_failed=False,
                timed_out=False,
                error=str(exc),
            )

        with proc:
            try:
                stdout, stderr = proc.communicate(timeout=self.timeout_s)
            except subprocess.TimeoutExpired:
                _kill_group(proc)
                _reap(proc)
                return ExecutionOutcome(
                    stdout=b"",
                    stderr_snippet=None,
                    exit_failed=False,
                    timed_out=True,
                    returncode=proc.returncode,
                )
            except BaseException:
                _kill_group(proc)
                proc.wait()
                raise

        snippet = stderr.decode("utf-8", errors="replace").strip() or None
        return ExecutionOutcome(
            stdout=stdout,
            stderr_snippet=snippet,
            exit_failed=proc.returncode != 0,
            timed_out=False,
            returncode=proc.returncode,
        )

    def classify(self, outcome: ExecutionOutcome) -> ClassifiedError:
        """
        Turn a failed outcome into exactly one error.

        Priority: deadline, then captured stderr, then the system error.
        """
        if outcome.timed_out:
            logger.error("llm_command_timed_out", timeout_s=self.timeout_s)
            return ClassifiedError(
                ErrorKind.TIMEOUT,
                f"command timed out after {self.timeout_s} seconds",
            )

        if outcome.exit_failed and outcome.stderr_snippet:
            logger.error(
                "llm_command_failed",
                stderr=outcome.stderr_snippet,
                exit_code=outcome.returncode,
            )
            return ClassifiedError(ErrorKind.COMMAND_FAILED, outcome.stderr_snippet)

        detail = outcome.error or _describe_exit(outcome.returncode)
        logger.error("llm_command_execution_failed", error=detail, exit_code=outcome.returncode)
        return ClassifiedError(ErrorKind.EXECUTION_FAILED, detail)


def _kill_group(proc: subprocess.Popen) -> None:
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    except PermissionError:
        proc.kill()


def _reap(proc: subprocess.Popen) -> None:
    try:
        proc.communicate(timeout=KILL_GRACE_S)
    except subprocess.TimeoutExpired:
        # A process that left the group still holds the pipes open
        logger.warning("llm_command_pipes_held_open", pid=proc.pid)
        proc.stdout.close()
        proc.stderr.close()
        proc.wait()


def _describe_exit(returncode: Optional[int]) -> str:
    if returncode is not None and returncode < 0:
        try:
            return f"signal: {signal.Signals(-returncode).name}"
        except ValueError:
            return f"signal: {-returncode}"
    return f"exit status {returncode}"
