"""Compiling and running learner code, remotely or with a local rustc."""

from __future__ import annotations

import subprocess
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import requests

__all__ = [
    "PLAYGROUND_URL",
    "EXECUTE_URL",
    "CLIPPY_URL",
    "DEFAULT_TIMEOUT_SECS",
    "UNAVAILABLE_MESSAGE",
    "CompilerError",
    "CompileResult",
    "ClippyResult",
    "RustAvailability",
    "compile_and_run",
    "playground_execute",
    "compile_and_run_hybrid",
    "clippy_check",
    "check_rust_available",
]

PLAYGROUND_URL = "https://play.rust-lang.org"
EXECUTE_URL = f"{PLAYGROUND_URL}/execute"
CLIPPY_URL = f"{PLAYGROUND_URL}/meta/clippy"

DEFAULT_TIMEOUT_SECS = 10
REMOTE_TIMEOUT_SECS = 30

UNAVAILABLE_MESSAGE = (
    "Could not compile your code. "
    "The online Rust Playground is unreachable and rustc is not installed locally. "
    "Please check your internet connection or install Rust from rustup.rs"
)


class CompilerError(Exception):
    """Code could not be compiled or run at all."""


@dataclass(slots=True)
class CompileResult:
    """Outcome of compiling and running a program."""

    stdout: str
    stderr: str
    success: bool
    execution_time_ms: int
    mode: str = "local"


@dataclass(slots=True)
class ClippyResult:
    """Outcome of a Clippy analysis."""

    success: bool
    output: str


@dataclass(slots=True)
class RustAvailability:
    """Whether a local rustc exists, and its version."""

    available: bool
    version: str | None = None


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


def _run_local(code: str, timeout_secs: int, start_error: str) -> CompileResult:
    if timeout_secs < 0:
        raise ValueError("timeout_secs must not be negative")
    try:
        tmp_dir = tempfile.TemporaryDirectory()
    except OSError as exc:
        raise CompilerError(f"Failed to create temp dir: {exc}") from exc

    with tmp_dir as tmp:
        source_path = Path(tmp) / "main.rs"
        binary_path = Path(tmp) / "main.exe"
        try:
            source_path.write_text(code, encoding="utf-8")
        except OSError as exc:
            raise CompilerError(f"Failed to write source file: {exc}") from exc

        try:
            compiled = subprocess.run(
                ["rustc", str(source_path), "-o", str(binary_path)],
                capture_output=True,
            )
        except OSError as exc:
            raise CompilerError(f"{start_error}: {exc}") from exc

        if compiled.returncode != 0:
            return CompileResult("", _text(compiled.stderr), False, 0, "local")

        start = time.monotonic()
        try:
            ran = subprocess.run(
                [str(binary_path)], capture_output=True, timeout=timeout_secs
            )
        except subprocess.TimeoutExpired:
            return CompileResult(
                "",
                f"Execution timed out after {timeout_secs} seconds",
                False,
                _elapsed_ms(start),
                "local",
            )
        except OSError as exc:
            raise CompilerError(f"Failed to execute binary: {exc}") from exc

        return CompileResult(
            _text(ran.stdout),
            _text(ran.stderr),
            ran.returncode == 0,
            _elapsed_ms(start),
            "local",
        )


def compile_and_run(code: str, timeout_secs: int | None = None) -> CompileResult:
    """Compile ``code`` with the local rustc and run it, killing it after the timeout.

    The timeout defaults to 10 seconds.
    """
    timeout = DEFAULT_TIMEOUT_SECS if timeout_secs is None else timeout_secs
    return _run_local(code, timeout, "Failed to start rustc")


def _parse_response(resp: requests.Response, what: str) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError as exc:
        raise CompilerError(f"Failed to parse {what} response: {exc}") from exc
    if not (
        isinstance(data, dict)
        and isinstance(data.get("success"), bool)
        and isinstance(data.get("stdout"), str)
        and isinstance(data.get("stderr"), str)
    ):
        raise CompilerError(
            f"Failed to parse {what} response: expected success, stdout and stderr"
        )
    return data


def playground_execute(code: str) -> CompileResult:
    """Compile and run ``code`` on the online Rust Playground."""
    body = {
        "channel": "stable",
        "mode": "debug",
        "edition": "2021",
        "crateType": "bin",
        "tests": False,
        "code": code,
        "backtrace": False,
    }
    start = time.monotonic()
    try:
        resp = requests.post(EXECUTE_URL, json=body, timeout=REMOTE_TIMEOUT_SECS)
    except requests.RequestException as exc:
        raise CompilerError(f"Playground request failed: {exc}") from exc
    elapsed = _elapsed_ms(start)
    data = _parse_response(resp, "playground")
    return CompileResult(data["stdout"], data["stderr"], data["success"], elapsed, "remote")


def compile_and_run_hybrid(code: str) -> CompileResult:
    """Run ``code`` on the online Playground, falling back to the local rustc."""
    try:
        return playground_execute(code)
    except CompilerError:
        pass
    try:
        return _run_local(code, DEFAULT_TIMEOUT_SECS, "rustc not available")
    except CompilerError:
        pass
    raise CompilerError(UNAVAILABLE_MESSAGE)


def clippy_check(code: str) -> ClippyResult:
    """Run Clippy on ``code`` through the online Playground."""
    body = {"channel": "stable", "edition": "2021", "crateType": "bin", "code": code}
    try:
        resp = requests.post(CLIPPY_URL, json=body, timeout=REMOTE_TIMEOUT_SECS)
    except requests.RequestException as exc:
        raise CompilerError(
            f"Clippy request failed: {exc}. Check your internet connection."
        ) from exc
    data = _parse_response(resp, "Clippy")
    output = data["stderr"] if data["stderr"] else data["stdout"]
    return ClippyResult(success=data["success"], output=output)


def check_rust_available() -> RustAvailability:
    """Report whether ``rustc`` runs locally and which version it is."""
    try:
        result = subprocess.run(["rustc", "--version"], capture_output=True)
    except OSError:
        return RustAvailability(False, None)
    if result.returncode != 0:
        return RustAvailability(False, None)
    return RustAvailability(True, _text(result.stdout).strip())