"""State and actions of the free-form code playground."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ferrolearn import compiler
from ferrolearn.compiler import ClippyResult, CompileResult, CompilerError

__all__ = ["DEFAULT_CODE", "Playground"]

DEFAULT_CODE = 'fn main() {\n    println!("Hello, Rust!");\n}\n'


def _default_runner(code: str) -> CompileResult:
    return compiler.compile_and_run_hybrid(code)


def _default_linter(code: str) -> ClippyResult:
    return compiler.clippy_check(code)


@dataclass
class Playground:
    """The playground drawer: its code, its last output and how it was produced."""

    is_open: bool = False
    code: str = DEFAULT_CODE
    output: str = ""
    is_error: bool = False
    is_loading: bool = False
    execution_time_ms: int = 0
    compiler_mode: str = "remote"
    runner: Callable[[str], CompileResult] = field(default=_default_runner, repr=False)
    linter: Callable[[str], ClippyResult] = field(default=_default_linter, repr=False)

    def _start(self) -> str:
        self.is_loading = True
        self.output = ""
        self.is_error = False
        return self.code

    def run(self) -> None:
        """Compile and run the current code, remotely first and locally as fallback."""
        code = self._start()
        try:
            result = self.runner(code)
        except CompilerError as exc:
            self.output = str(exc)
            self.is_error = True
        else:
            self.compiler_mode = result.mode
            self.execution_time_ms = result.execution_time_ms
            if result.success:
                self.output = result.stdout
                self.is_error = False
            else:
                self.output = result.stderr or result.stdout
                self.is_error = True
        finally:
            self.is_loading = False

    def run_clippy(self) -> None:
        """Analyse the current code with Clippy."""
        code = self._start()
        try:
            result = self.linter(code)
        except CompilerError as exc:
            self.output = str(exc)
            self.is_error = True
        else:
            self.output = result.output
            self.is_error = not result.success
        finally:
            self.is_loading = False

    def clear(self) -> None:
        """Forget the last output."""
        self.output = ""
        self.is_error = False
        self.execution_time_ms = 0

    def toggle(self) -> None:
        """Open the drawer if closed, close it if open."""
        self.is_open = not self.is_open

    def close(self) -> None:
        """Close the drawer."""
        self.is_open = False