"""The compiler driver: options, stages and the command-line entry point."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from enum import Enum

from .common import BOLD, LMAGENTA, RESET, VERSION, log_error, log_info, log_stage, log_unknown_flag
from .lexer import LexError, Lexer
from .report import write_compilation_log
from .source import FileReadError, read_source

DEFAULT_LOG_PATH = "output.org"


class Stage(Enum):
    """Compilation stages, valued by the label used in failure reports."""

    UNKNOWN = "UNKNOWN"
    FILE = "FILE READ"
    LEXER = "LEXER"
    PARSER = "PARSER"
    TCHECKER = "TYPE CHECKER"
    LOGGER = "LOGGER"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class CompileOptions:
    """Options for one compilation, and the stage it has reached."""

    filename: str
    debug_info: bool = False
    debug_symbols: bool = False
    timer: bool = False
    lex_only: bool = False
    show_version: bool = False
    stage: Stage = Stage.UNKNOWN
    log_path: str = DEFAULT_LOG_PATH


@dataclass(frozen=True)
class CompileStats:
    """Figures about a successful compilation."""

    file_size: int
    token_count: int


class CompileError(Exception):
    """Raised when compilation fails at some stage."""

    def __init__(self, stage: Stage, message: str) -> None:
        super().__init__(message)
        self.stage = stage


def version_text() -> str:
    """Return the version and usage banner."""
    return (
        f" Rotate Compiler \n Version: {VERSION}\n"
        " --lex   for lexical analysis\n"
        " --log   for dumping compilation info as orgmode format in output.org\n"
        "\n"
    )


def parse_options(argv: list[str]) -> CompileOptions:
    """Build options from arguments: a file name followed by flags."""
    if not argv:
        raise ValueError("missing source file name")
    options = CompileOptions(filename=argv[0])
    for arg in argv[1:]:
        if arg == "--log":
            options.debug_info = True
        elif arg in ("--version", "-v"):
            options.show_version = True
            break
        elif arg == "--timer":
            options.timer = True
        elif arg == "--lex":
            options.lex_only = True
        else:
            log_unknown_flag(arg)
    return options


def compile_file(options: CompileOptions) -> CompileStats:
    """Run the compilation stages; raise CompileError on failure."""
    options.stage = Stage.FILE
    try:
        source = read_source(options.filename)
    except FileReadError as exc:
        log_error(str(exc))
        log_error("File read error: Unable to read the file or invalid format")
        raise CompileError(Stage.FILE, str(exc)) from exc

    options.stage = Stage.LEXER
    lexer = Lexer(source)
    try:
        tokens = lexer.lex()
    except LexError as exc:
        if len(lexer.tokens) < 2:
            log_error("file is empty")
        sys.stderr.write(exc.render())
        raise CompileError(Stage.LEXER, str(exc)) from exc
    if len(tokens) < 2:
        log_error("file is empty")

    if options.debug_info:
        options.stage = Stage.LOGGER
        try:
            with open(options.log_path, "w", encoding="latin-1", newline="") as output:
                write_compilation_log(output, source, tokens)
        except OSError:
            log_error(f"Failed to log to {options.log_path}")

    return CompileStats(file_size=source.length, token_count=len(tokens))


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stdout.write(version_text())
        return 0

    options = parse_options(args)
    if options.show_version:
        sys.stdout.write(version_text())
        return 0

    start = time.process_time()
    try:
        stats = compile_file(options)
    except CompileError:
        log_stage(options.stage.label)
        sys.stderr.write(f"Compilation failed at stage: {options.stage.label}\n")
        return 1
    log_info("Compilation succeeded.")

    total = time.process_time() - start
    megabytes = stats.file_size // (1024 * 1024)
    if total > 0:
        rate = megabytes / total
    else:
        rate = float("inf") if megabytes else float("nan")
    print(f"[{LMAGENTA}{BOLD}INFO{RESET}] : {stats.token_count} Tokens")
    print(f"[{LMAGENTA}{BOLD}RATE{RESET}] : {rate:.3f} mb/sec")
    print(f"[{LMAGENTA}{BOLD}TIME{RESET}] : {total:.5f} sec")
    return 0