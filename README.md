# rotate

This package is the front end of the Rotate language compiler. It reads a
`.vr` source file and splits it into tokens. When it finds a lexical error,
it reports the offending line with a caret marker underneath. It can also
write a compilation log in Org mode format.

## Installation

```
pip install .
```

## Command line

```
rotate program.vr [--log] [--timer] [--lex] [--version | -v]
```

- `--log` writes the compilation log to `output.org` in the current directory.
- `--lex` asks for lexical analysis only. Compilation always ends after
  lexing, so this flag is recorded in the options and changes nothing else.
- `--timer` is recorded in the options. Timing is reported whether or not it
  is given.
- `--version` or `-v` prints the version and a summary of the flags, then
  exits.

Flags that are not recognised produce a warning and are otherwise ignored.
Running `rotate` with no arguments prints the version text.

When compilation succeeds, `rotate` prints three things: the number of
tokens, the throughput in MB/s and the elapsed processor time. When it
fails, it writes the diagnostic to standard error, names the stage that
failed (`FILE READ` or `LEXER`) and exits with status 1.

## Library use

```python
from rotate.source import read_source
from rotate.lexer import lex, LexError
from rotate.tokens import describe_token_type

source = read_source("program.vr")
try:
    tokens = lex(source)
except LexError as err:
    print(err.render())
else:
    for token in tokens:
        print(describe_token_type(token.kind), token.value(source.contents))
```

### `rotate.source`

`read_source(name)` returns a `SourceFile`, which has a `name`, its
`contents` and a `length`. It raises `FileReadError` in these cases:

- the name is too short or does not end in `.vr`
- the file cannot be opened
- the file is empty or too large
- the file's first byte is not printable ASCII or whitespace

### `rotate.lexer`

`lex(source)` and `Lexer(source).lex()` return a list of `Token` objects.
Each token has `index`, `length`, `line` and `kind`, and the list ends with
three `EOT` tokens. On a malformed input the lexer raises `LexError`. The
error has these fields:

- `kind`, a `LexErrorKind`
- `index`
- `line`
- `length`

Its `render()` method returns the coloured diagnostic text.

### `rotate.tokens` and `rotate.types`

- `rotate.tokens` defines `TokenType`, `Token` and `LexErrorKind`, together
  with `describe_token_type`, `error_message`, `error_advice` and
  `format_token`.
- `rotate.types` defines `BaseType` and `base_type_name`.

### `rotate.report`

`write_compilation_log(output, source, tokens, now=None)` writes the Org
mode log to any text stream. When there are more than `0x100000` tokens it
returns `False` and writes nothing.

### `rotate.compiler`

- `parse_options(argv)` builds a `CompileOptions` from a file name and flags.
- `compile_file(options)` runs the stages and returns a `CompileStats`. On
  failure it raises `CompileError`, and the error's `stage` names the stage
  that failed.
- `main(argv=None)` is the command-line entry point.

### `rotate.common`

This module holds the logging helpers that write to standard error, the
version string and the small bit utilities `bit_set`, `bit_clear` and
`bit_is_set`.

## What it does not do

The package stops after lexical analysis. It does not parse the token
stream or type-check it, and it does not generate code. The compilation log
contains placeholder headings for the parser and the type checker, and
nothing appears under them.