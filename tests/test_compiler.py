import pytest

from rotate.common import VERSION
from rotate.compiler import (
    CompileError,
    CompileOptions,
    Stage,
    compile_file,
    main,
    parse_options,
    version_text,
)
from rotate.lexer import lex
from rotate.source import read_source


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_parse_options_flags():
    options = parse_options(["prog.vr", "--log", "--timer", "--lex"])
    assert options.filename == "prog.vr"
    assert options.debug_info is True
    assert options.timer is True
    assert options.lex_only is True
    assert options.show_version is False
    assert options.stage is Stage.UNKNOWN


def test_parse_options_defaults():
    options = parse_options(["prog.vr"])
    assert (options.debug_info, options.timer, options.lex_only) == (False, False, False)


def test_parse_options_unknown_flag_warns(capsys):
    options = parse_options(["prog.vr", "--bogus"])
    assert options.debug_info is False
    assert "Ignored flag: `--bogus`" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_parse_options_version_stops_parsing(flag, capsys):
    options = parse_options(["prog.vr", flag, "--bogus"])
    assert options.show_version is True
    assert "--bogus" not in capsys.readouterr().err


def test_parse_options_empty():
    with pytest.raises(ValueError):
        parse_options([])


def test_version_text_mentions_version():
    text = version_text()
    assert f"Version: {VERSION}" in text
    assert "--lex" in text and "--log" in text


def test_stage_labels(tmp_path):
    path = _write(tmp_path, "prog.txt", "let x = 1\n")
    with pytest.raises(CompileError) as info:
        compile_file(CompileOptions(filename=path))
    assert info.value.stage.label == "FILE READ"


def test_compile_file_success(tmp_path):
    path = _write(tmp_path, "prog.vr", "let x = 1\n")
    options = CompileOptions(filename=path)
    stats = compile_file(options)
    source = read_source(path)
    assert stats.file_size == source.length
    assert stats.token_count == len(lex(source))
    assert options.stage is Stage.LEXER


def test_compile_file_bad_extension(tmp_path):
    path = _write(tmp_path, "prog.txt", "let x = 1\n")
    options = CompileOptions(filename=path)
    with pytest.raises(CompileError) as info:
        compile_file(options)
    assert info.value.stage is Stage.FILE
    assert options.stage is Stage.FILE


def test_compile_file_lex_error(tmp_path, capsys):
    path = _write(tmp_path, "prog.vr", "let x = $\n")
    options = CompileOptions(filename=path)
    with pytest.raises(CompileError) as info:
        compile_file(options)
    assert info.value.stage is Stage.LEXER
    assert "Invalid character" in capsys.readouterr().err


def test_compile_file_writes_log(tmp_path):
    path = _write(tmp_path, "prog.vr", "let x = 1\n")
    log_path = tmp_path / "out.org"
    options = CompileOptions(filename=path, debug_info=True, log_path=str(log_path))
    compile_file(options)
    assert options.stage is Stage.LOGGER
    assert log_path.read_text().startswith("#+TITLE: COMPILATION LOG")


def test_main_success(tmp_path, capsys):
    path = _write(tmp_path, "prog.vr", "let x = 1\n")
    assert main([path]) == 0
    count = len(lex(read_source(path)))
    assert f"{count} Tokens" in capsys.readouterr().out


def test_main_failure(tmp_path, capsys):
    path = _write(tmp_path, "prog.vr", "'ab'\n")
    assert main([path]) == 1
    assert "Compilation failed at stage: LEXER" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.vr")]) == 1
    assert "Compilation failed at stage: FILE READ" in capsys.readouterr().err


def test_main_without_arguments_prints_version(capsys):
    assert main([]) == 0
    assert f"Version: {VERSION}" in capsys.readouterr().out


def test_main_version_flag(capsys):
    assert main(["prog.vr", "--version"]) == 0
    assert "Rotate Compiler" in capsys.readouterr().out