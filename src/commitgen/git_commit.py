# File: src/commitgen/git_commit.py
# Purpose: Create a git commit from a generated message
import subprocess
from typing import Any

import structlog

logger = structlog.get_logger(__name__)


def create_commit(message: str, repository_path: str = ".", timeout_s: int = 30) -> dict[str, Any]:
    """Commit the staged changes in `repository_path` with `message` read from stdin."""
    try:
        completed = subprocess.run(
            ["git", "-C", repository_path, "commit", "-F", "-"],
            input=message,
            capture_output=True,
            text=True,
            timeout=timeout_s,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.error("git_commit_timed_out", repository_path=repository_path, timeout_s=timeout_s)
        return {"ok": False, "error": f"git commit timed out after {timeout_s} seconds", "exit_code": -1}
    except OSError as exc:
        logger.error("git_commit_spawn_failed", repository_path=repository_path, error=str(exc))
        return {"ok": False, "error": str(exc), "exit_code": -1}

    result = {
        "ok": completed.returncode == 0,
        "stdout": completed.stdout.strip(),
        "stderr": completed.stderr.strip(),
        "exit_code": completed.returncode,
    }
    if result["ok"]:
        logger.info("git_commit_created", repository_path=repository_path)
    else:
        logger.error(
            "git_commit_failed",
            repository_path=repository_path,
            exit_code=completed.returncode,
            stderr=result["stderr"],
        )
        result["error"] = result["stderr"] or result["stdout"] or f"exit status {completed.returncode}"
    return result
