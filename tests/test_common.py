import re

import pytest

from rotate import common
from rotate.common import (
    bit_clear,
    bit_is_set,
    bit_set,
    digits_from_number,
    log_debug,
    log_error,
    log_info,
    log_stage,
    log_unknown_flag,
    log_warn,
)

BYTES = range(256)
POSITIONS = range(8)

_LOG_LINE = re.compile(
    r"^\[(?P<colour>(?:\x1b\[[0-9;]*m)+)(?P<level>[A-Z]+)(?P<reset>\x1b\[0m)\] "
    r"\[(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\]: (?P<message>.*)\n$"
)


def test_bit_set_then_is_set():
    for field in BYTES:
        for n in POSITIONS:
            assert bit_is_set(bit_set(field, n), n) == 1


def test_bit_clear_then_not_set():
    for field in BYTES:
        for n in POSITIONS:
            assert bit_is_set(bit_clear(field, n), n) == 0


def test_set_and_clear_leave_other_bits():
    for field in BYTES:
        for n in POSITIONS:
            for other in POSITIONS:
                if other == n:
                    continue
                assert bit_is_set(bit_set(field, n), other) == bit_is_set(field, other)
                assert bit_is_set(bit_clear(field, n), other) == bit_is_set(field, other)


def test_clear_after_set_equals_clear():
    for field in BYTES:
        for n in POSITIONS:
            assert bit_clear(bit_set(field, n), n) == bit_clear(field, n)


@pytest.mark.parametrize("n", [8, 9, 15])
def test_positions_past_byte_are_ignored(n):
    for field in BYTES:
        assert bit_set(field, n) == field
        assert bit_clear(field, n) == field


def test_bit_set_pinned():
    assert bit_set(0, 0) == 1
    assert bit_set(0, 7) == 0x80


@pytest.mark.parametrize("k", range(1, 12))
def test_digits_at_powers_of_ten(k):
    assert digits_from_number(10**k) == k + 1
    assert digits_from_number(10**k - 1) == k


def test_digits_rejects_negative():
    with pytest.raises(ValueError):
        digits_from_number(-5)


@pytest.mark.parametrize(
    "func, level",
    [(log_error, "ERROR"), (log_warn, "WARN"), (log_info, "INFO"), (log_stage, "STAGE")],
)
def test_log_format(capsys, func, level):
    func("something happened")
    err = capsys.readouterr().err
    match = _LOG_LINE.match(err)
    assert match is not None, err
    assert match.group("level") == level
    assert match.group("reset") == common.RESET
    assert match.group("message") == "something happened"


def test_log_debug_silent_by_default(capsys):
    assert common.DEBUG is False
    log_debug("hidden")
    assert capsys.readouterr().err == ""


def test_log_unknown_flag(capsys):
    log_unknown_flag("--foo")
    err = capsys.readouterr().err
    assert err == f"[{common.LYELLOW}WARN{common.RESET}] : Ignored flag: `--foo`\n"