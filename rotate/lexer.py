"""Lexical analysis of source files into a flat list of tokens."""

from __future__ import annotations

import string

from .common import (
    BOLD,
    EXTRA_NULL_TERMINATORS,
    LBLUE,
    LRED,
    LYELLOW,
    RESET,
    UINT_MAX,
    WHITE,
    digits_from_number,
    log_error,
)
from .source import SourceFile
from .tokens import LexErrorKind, Token, TokenType, error_advice, error_message

MAX_IDENTIFIER_LENGTH = 100
MAX_NUMBER_LENGTH = 100
MAX_HEX_LENGTH = 0x20
MAX_BINARY_LENGTH = 0x80
MAX_STRING_LENGTH = UINT_MAX // 2
MAX_ARROW_LENGTH = 101

_NUL = "\0"
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_ALPHA = frozenset(string.ascii_letters)
_IDENT_CHARS = _ALPHA | _DIGITS | {"_"}
_ESCAPES = frozenset("ntr\\'")

_KEYWORDS: dict[str, TokenType] = {
    "as": TokenType.AS_KEYWORD,
    "fn": TokenType.FN_KEYWORD,
    "if": TokenType.IF_KEYWORD,
    "or": TokenType.OR_KEYWORD,
    "let": TokenType.LET_KEYWORD,
    "for": TokenType.FOR_KEYWORD,
    "pub": TokenType.PUB_KEYWORD,
    "int": TokenType.INT_KEYWORD,
    "ref": TokenType.REF_KEYWORD,
    "ret": TokenType.RET_KEYWORD,
    "and": TokenType.AND_KEYWORD,
    "nil": TokenType.NIL_LITERAL,
    "else": TokenType.ELSE_KEYWORD,
    "enum": TokenType.ENUM_KEYWORD,
    "true": TokenType.TRUE_LITERAL,
    "char": TokenType.CHAR_KEYWORD,
    "bool": TokenType.BOOL_KEYWORD,
    "uint": TokenType.UINT_KEYWORD,
    "fall": TokenType.FALL_KEYWORD,
    "while": TokenType.WHILE_KEYWORD,
    "false": TokenType.FALSE_LITERAL,
    "float": TokenType.FLT_KEYWORD,
    "break": TokenType.BREAK_KEYWORD,
    "import": TokenType.IMPORT_KEYWORD,
    "delete": TokenType.DELETE_KEYWORD,
    "struct": TokenType.STRUCT_KEYWORD,
    "switch": TokenType.SWITCH_KEYWORD,
}

_SINGLE_SYMBOLS: dict[str, TokenType] = {
    "{": TokenType.OPEN_CURLY,
    "}": TokenType.CLOSE_CURLY,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "[": TokenType.OPEN_SQR_BRACKETS,
    "]": TokenType.CLOSE_SQR_BRACKETS,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "%": TokenType.MOD,
    ":": TokenType.COLON,
}

# First character -> ((second character, two-character kind), ...), single kind
_COMPOUND_SYMBOLS: dict[str, tuple[tuple[tuple[str, TokenType], ...], TokenType]] = {
    ">": (((("=", TokenType.GREATER_EQL)), (">", TokenType.RIGHT_SHIFT)), TokenType.GREATER),
    "<": ((("=", TokenType.LESS_EQL), ("<", TokenType.LEFT_SHIFT)), TokenType.LESS),
    "=": ((("=", TokenType.EQUAL_EQUAL),), TokenType.EQUAL),
    "+": ((("=", TokenType.ADD_EQUAL),), TokenType.PLUS_OPERATOR),
    "-": ((("=", TokenType.SUB_EQUAL),), TokenType.MINUS_OPERATOR),
    "*": ((("=", TokenType.MULT_EQUAL),), TokenType.MULT_OPERATOR),
    "!": ((("=", TokenType.NOT_EQUAL),), TokenType.NOT),
}


class LexError(Exception):
    """A lexical error, located in the source where it was found."""

    def __init__(
        self, kind: LexErrorKind, source: SourceFile, index: int, line: int, length: int
    ) -> None:
        self.kind = kind
        self.source = source
        self.index = index
        self.line = line
        self.length = length
        super().__init__(f"{source.name}:{line}: {error_message(kind)}")

    def _char(self, position: int) -> str:
        text = self.source.contents
        return text[position] if 0 <= position < len(text) else _NUL

    def render(self) -> str:
        """Return the coloured diagnostic showing the offending line."""
        text = self.source.contents
        low = self.index
        column = 0
        while self._char(low) != "\n" and low > 0:
            low -= 1
            column += 1
        low = low + 1 if low > 1 else 0

        end = self.index
        while self._char(end) != "\n" and end + 1 < len(text):
            end += 1
        width = end - low
        segment = text[low : low + width] if width >= 0 else text[low:]
        segment = segment.split(_NUL, 1)[0]

        digits = max(1, digits_from_number(self.line))
        spaces = max(1, self.index - low + 1)
        gutter = " " * digits
        padding = " " * spaces
        if self.length < MAX_ARROW_LENGTH:
            arrows = "^" * self.length
        else:
            arrows = "^^^---..."

        return (
            f" > {BOLD}{WHITE}{self.source.name}:{self.line}:{column}: {LRED}error: "
            f"{LBLUE}{error_message(self.kind)}{RESET}\n"
            f"  {LYELLOW}{self.line}{RESET} | {segment}\n"
            f"  {gutter} |{padding}{LRED}{BOLD}{arrows}\n"
            f" > Advice: {RESET}{error_advice(self.kind)}\n"
        )


class Lexer:
    """Turns the text of a source file into tokens."""

    def __init__(self, source: SourceFile) -> None:
        self.source = source
        self._text = source.contents
        self._reset()

    def _reset(self) -> None:
        self.tokens: list[Token] = []
        self._index = 0
        self._len = 0
        self._line = 1
        self._begin_line = 1
        self._save_index = 0
        self._save_line = 1
        self._prev = TokenType.EOT

    def lex(self) -> list[Token]:
        """Lex the whole source and return its tokens, ending with EOT tokens."""
        self._reset()
        while not self._step():
            pass
        self._len = 0
        for _ in range(EXTRA_NULL_TERMINATORS):
            self._add_token(TokenType.EOT)
        return list(self.tokens)

    # character access

    def _at(self, position: int) -> str:
        return self._text[position] if 0 <= position < len(self._text) else _NUL

    def _current(self) -> str:
        return self._at(self._index)

    def _peek(self) -> str:
        return self._at(self._index + 1)

    def _past(self) -> str:
        return self._at(self._index - 1)

    def _not_eof(self) -> bool:
        return self._index < len(self._text)

    def _advance(self) -> None:
        if self._current() == "\n":
            self._line += 1
        self._index += 1

    def _advance_len(self) -> None:
        self._advance()
        self._len += 1

    # state handling

    def _save_state(self) -> None:
        self._save_index = self._index
        self._save_line = self._line

    def _restore_state(self) -> None:
        self._index = self._save_index
        self._line = self._save_line

    def _fail(self, kind: LexErrorKind, *, restore: bool = True) -> LexError:
        if restore:
            self._restore_state()
        return LexError(kind, self.source, self._index, self._line, self._len)

    def _add_token(self, kind: TokenType) -> None:
        self.tokens.append(Token(self._index, self._len, self._begin_line, kind))
        self._prev = TokenType.TERMINATOR
        self._index += self._len

    def _add_terminator(self) -> None:
        if self._prev != TokenType.TERMINATOR:
            self._add_token(TokenType.TERMINATOR)
        else:
            self._advance()

    # scanning

    def _skip_whitespace(self) -> None:
        while True:
            c = self._current()
            if c in " \t\r":
                self._index += 1
            elif c == "\n":
                self._add_terminator()
                self._line += 1
            else:
                break

    def _step(self) -> bool:
        """Scan one item; return True once the end of input is reached."""
        self._len = 0
        self._begin_line = self._line
        self._skip_whitespace()
        self._save_state()
        c = self._current()
        if c in _DIGITS:
            self._lex_number()
        elif c == '"':
            self._lex_string()
        elif c == "'":
            self._lex_char()
        elif c == "_" or c in _ALPHA:
            self._lex_identifier()
        elif c == "@":
            self._lex_builtin()
        else:
            return self._lex_symbol()
        return False

    def _lex_identifier(self) -> None:
        self._advance_len()
        while self._current() in _IDENT_CHARS:
            self._advance_len()
        self._index -= self._len
        word = self._text[self._index : self._index + self._len]
        kind = _KEYWORDS.get(word, TokenType.IDENTIFIER)
        if self._len > MAX_IDENTIFIER_LENGTH:
            raise self._fail(LexErrorKind.TOO_LONG_IDENTIFIER)
        self._add_token(kind)

    def _lex_number(self) -> None:
        if self._current() == "0":
            if self._peek() == "x":
                self._lex_radix(_HEX_DIGITS, MAX_HEX_LENGTH, "hex number digits length is above 32")
                return
            if self._peek() == "b":
                self._lex_radix(
                    frozenset("01"), MAX_BINARY_LENGTH, "binary number digits length is above 128"
                )
                return

        reached_dot = False
        while self._current() in _DIGITS or self._current() == ".":
            self._advance_len()
            if self._current() == ".":
                if reached_dot:
                    break
                reached_dot = True

        if self._len > MAX_NUMBER_LENGTH:
            log_error("number digits length is above 100")
            raise self._fail(LexErrorKind.TOO_LONG_NUMBER)
        self._index -= self._len
        self._add_token(TokenType.FLOAT_LITERAL if reached_dot else TokenType.INTEGER_LITERAL)

    def _lex_radix(self, digits: frozenset[str], limit: int, message: str) -> None:
        self._advance_len()
        self._advance_len()
        while self._current() in digits:
            self._advance_len()
        if self._len > limit:
            log_error(message)
            raise self._fail(LexErrorKind.TOO_LONG_NUMBER)
        self._index -= self._len
        self._add_token(TokenType.INTEGER_LITERAL)

    def _lex_string(self) -> None:
        self._advance_len()
        while True:
            c = self._current()
            if c == _NUL:
                raise self._fail(LexErrorKind.NOT_CLOSED_STRING)
            if c == '"':
                if self._past() != "\\":
                    break
            self._advance_len()
        self._advance_len()

        if self._len > MAX_STRING_LENGTH:
            log_error("A cstr is not allowed to be longer than MAX_STRING_LENGTH")
            raise self._fail(LexErrorKind.TOO_LONG_STRING)
        self._index -= self._len
        self._add_token(TokenType.STRING_LITERAL)

    def _lex_char(self) -> None:
        self._advance_len()
        if self._current() != "\\" and self._peek() == "'":
            self._advance_len()
            self._advance_len()
            self._index -= self._len
            self._add_token(TokenType.CHAR_LITERAL)
            return
        if self._current() != "\\":
            raise self._fail(LexErrorKind.NOT_CLOSED_CHAR, restore=False)

        self._advance_len()
        if self._current() not in _ESCAPES:
            raise self._fail(LexErrorKind.NOT_VALID_ESCAPE_CHAR)
        self._advance_len()
        if self._current() != "'":
            raise self._fail(LexErrorKind.INVALID_CHAR)
        self._advance_len()
        self._index -= self._len
        self._add_token(TokenType.CHAR_LITERAL)

    def _lex_builtin(self) -> None:
        self._advance()
        while self._current() in _ALPHA:
            self._advance_len()
        self._index -= self._len
        self._add_token(TokenType.BUILTIN_ID)

    def _lex_symbol(self) -> bool:
        c = self._current()
        p = self._peek()
        self._len = 1

        if c in _SINGLE_SYMBOLS:
            self._add_token(_SINGLE_SYMBOLS[c])
            return False
        if c in _COMPOUND_SYMBOLS:
            pairs, single = _COMPOUND_SYMBOLS[c]
            for second, kind in pairs:
                if p == second:
                    self._len += 1
                    self._add_token(kind)
                    return False
            self._add_token(single)
            return False
        if c == ";":
            self._add_terminator()
            return False
        if c == "/":
            if p == "=":
                self._len += 1
                self._add_token(TokenType.DIV_EQUAL)
            elif p == "/":
                while self._not_eof() and self._current() != "\n":
                    self._advance()
            elif p == "*":
                self._lex_nested_comment()
            else:
                self._add_token(TokenType.DIV_OPERATOR)
            return False
        if c == "#":
            while self._current() != "\n" and self._not_eof():
                self._advance()
            self._advance()
            return False
        if c == _NUL:
            return True
        raise self._fail(LexErrorKind.INVALID_CHAR, restore=False)

    def _lex_nested_comment(self) -> None:
        self._advance()
        self._advance()
        depth = 1
        while self._not_eof() and depth > 0:
            if self._current() == "*" and self._peek() == "/":
                self._advance()
                depth -= 1
            elif self._current() == "/" and self._peek() == "*":
                self._advance()
                depth += 1
            self._advance()
        if depth > 0:
            raise self._fail(LexErrorKind.NOT_CLOSED_COMMENT)


def lex(source: SourceFile) -> list[Token]:
    """Lex a source file and return its tokens."""
    return Lexer(source).lex()