"""Writing the org-mode compilation log."""

from __future__ import annotations

import time
from collections.abc import Sequence
from datetime import datetime
from typing import TextIO

from .common import NEWLINE, log_info, log_warn
from .source import SourceFile
from .tokens import Token, describe_token_type

MAX_LOGGED_TOKENS = 0x100000


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def write_compilation_log(
    output: TextIO,
    source: SourceFile,
    tokens: Sequence[Token],
    now: datetime | None = None,
) -> bool:
    """Write the compilation log for ``source`` to ``output``.

    Returns False without writing anything when there are too many tokens.
    """
    if len(tokens) > MAX_LOGGED_TOKENS:
        log_warn("Too large file to show log")
        return False
    log_warn("Logging will slow down compiliation ")

    moment = now if now is not None else datetime.now()
    stamp = time.asctime(moment.timetuple()) + "\n"
    text = source.contents

    output.write("#+TITLE: COMPILATION LOG" + NEWLINE)
    output.write("#+OPTIONS: toc:nil num:nil" + NEWLINE)
    output.write("#+AUTHOR: Rotate compiler" + NEWLINE)
    output.write(f"#+DATE: {stamp}{NEWLINE}")
    output.write("** Meta\n")
    output.write(f"- filename: ={source.name}={NEWLINE}")
    output.write(f"- file length(chars): {source.length} chars{NEWLINE}")
    output.write(f"- time: {stamp}")
    output.write(f"- number of tokens: {len(tokens)}{NEWLINE}{NEWLINE}")
    output.write("** FILE" + NEWLINE)
    output.write(
        f"#+begin_src cpp {NEWLINE}{_until_nul(text)}{NEWLINE}#+end_src{NEWLINE}{NEWLINE}"
    )

    output.write("** TOKENS" + NEWLINE)
    output.write("#+begin_src" + NEWLINE)
    for number, token in enumerate(tokens):
        value = _until_nul(token.value(text))
        output.write(
            f"[TOKEN]: n: {number}, idx: {token.index}, line: {token.line}, "
            f"len: {token.length}, type: {describe_token_type(token.kind)}, "
            f"val: `{value}`{NEWLINE}"
        )
    output.write("#+end_src" + NEWLINE)

    output.write(NEWLINE + "** TODO PARSER" + NEWLINE)
    output.write(NEWLINE + "** TODO TYPECHECKER" + NEWLINE)
    log_info("Logging complete")
    return True