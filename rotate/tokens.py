"""Token kinds, tokens and lexical error descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the lexer can produce, in declaration order."""

    IDENTIFIER = auto()
    BUILTIN_ID = auto()
    AS_KEYWORD = auto()
    LET_KEYWORD = auto()
    DELETE_KEYWORD = auto()
    NEW_KEYWORD = auto()
    EQUAL = auto()
    INTEGER_LITERAL = auto()
    INT_KEYWORD = auto()
    UINT_KEYWORD = auto()
    FLOAT_LITERAL = auto()
    FLT_KEYWORD = auto()
    STRING_LITERAL = auto()
    CHAR_LITERAL = auto()
    CHAR_KEYWORD = auto()
    TRUE_LITERAL = auto()
    FALSE_LITERAL = auto()
    BOOL_KEYWORD = auto()
    TERMINATOR = auto()
    COLON = auto()
    FN_KEYWORD = auto()
    PLUS_OPERATOR = auto()
    MINUS_OPERATOR = auto()
    MULT_OPERATOR = auto()
    DIV_OPERATOR = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    OPEN_CURLY = auto()
    CLOSE_CURLY = auto()
    OPEN_SQR_BRACKETS = auto()
    CLOSE_SQR_BRACKETS = auto()
    RET_KEYWORD = auto()
    IMPORT_KEYWORD = auto()
    IF_KEYWORD = auto()
    ELSE_KEYWORD = auto()
    FOR_KEYWORD = auto()
    WHILE_KEYWORD = auto()
    GREATER = auto()
    GREATER_EQL = auto()
    LESS = auto()
    LESS_EQL = auto()
    DOT = auto()
    MOD = auto()
    NOT = auto()
    NOT_EQUAL = auto()
    AND_KEYWORD = auto()
    BITWISE_AND = auto()
    BITWISE_OR = auto()
    BITWISE_XOR = auto()
    LEFT_SHIFT = auto()
    RIGHT_SHIFT = auto()
    OR_KEYWORD = auto()
    COMMA = auto()
    PUB_KEYWORD = auto()
    SWITCH_KEYWORD = auto()
    ENUM_KEYWORD = auto()
    EQUAL_EQUAL = auto()
    BREAK_KEYWORD = auto()
    FALL_KEYWORD = auto()
    ADD_EQUAL = auto()
    SUB_EQUAL = auto()
    MULT_EQUAL = auto()
    DIV_EQUAL = auto()
    STRUCT_KEYWORD = auto()
    DEFER_KEYWORD = auto()
    VARIANT_KEYWORD = auto()
    REF_KEYWORD = auto()
    NIL_LITERAL = auto()
    EOT = auto()


class LexErrorKind(Enum):
    """The kinds of error the lexer can report."""

    UNKNOWN = auto()
    OUT_OF_MEMORY = auto()
    INVALID_CHAR = auto()
    TOO_LONG_IDENTIFIER = auto()
    TOO_LONG_NUMBER = auto()
    TOO_LONG_STRING = auto()
    TABS = auto()
    NOT_CLOSED_CHAR = auto()
    NOT_VALID_ESCAPE_CHAR = auto()
    NOT_CLOSED_STRING = auto()
    FILE_EMPTY = auto()
    END_OF_FILE = auto()
    BAD_TOKEN_AT_GLOBAL = auto()
    NOT_CLOSED_COMMENT = auto()
    UNSUPPORTED = auto()


@dataclass(frozen=True)
class Token:
    """A token located in the source text by index and length."""

    index: int
    length: int
    line: int
    kind: TokenType

    def value(self, text: str) -> str:
        """Return the slice of ``text`` this token covers."""
        return text[self.index : self.index + self.length]


_DESCRIPTIONS: dict[TokenType, str] = {
    TokenType.LET_KEYWORD: "let",
    TokenType.DEFER_KEYWORD: "defer",
    TokenType.VARIANT_KEYWORD: "variant",
    TokenType.FALL_KEYWORD: "fall",
    TokenType.RIGHT_SHIFT: ">>",
    TokenType.LEFT_SHIFT: "<<",
    TokenType.BITWISE_XOR: "^",
    TokenType.BITWISE_OR: "|",
    TokenType.BITWISE_AND: "&",
    TokenType.NEW_KEYWORD: "new",
    TokenType.AS_KEYWORD: "as",
    TokenType.DELETE_KEYWORD: "delete",
    TokenType.CHAR_KEYWORD: "char",
    TokenType.IDENTIFIER: "identifier",
    TokenType.BUILTIN_ID: "builtin_id",
    TokenType.EQUAL: "assign'='",
    TokenType.INTEGER_LITERAL: "integer",
    TokenType.COLON: "colon':'",
    TokenType.STRING_LITERAL: "string",
    TokenType.FN_KEYWORD: "function'fn'",
    TokenType.PLUS_OPERATOR: "plus'+'",
    TokenType.MINUS_OPERATOR: "minus'-'",
    TokenType.MULT_OPERATOR: "star'*'",
    TokenType.DIV_OPERATOR: "divide'/'",
    TokenType.OPEN_PAREN: "openparen'('",
    TokenType.CLOSE_PAREN: "closeparen')'",
    TokenType.OPEN_CURLY: "opencurlybrkt'{'",
    TokenType.CLOSE_CURLY: "closecurlybrkt'}'",
    TokenType.OPEN_SQR_BRACKETS: "opensqrbrkt']'",
    TokenType.CLOSE_SQR_BRACKETS: "closesqrbrkt'['",
    TokenType.CHAR_LITERAL: "char",
    TokenType.RET_KEYWORD: "return",
    TokenType.IMPORT_KEYWORD: "import",
    TokenType.IF_KEYWORD: "if",
    TokenType.ELSE_KEYWORD: "else",
    TokenType.FOR_KEYWORD: "for",
    TokenType.WHILE_KEYWORD: "while",
    TokenType.GREATER: "greater'>'",
    TokenType.LESS: "less'<'",
    TokenType.TRUE_LITERAL: "bool:true",
    TokenType.FALSE_LITERAL: "bool:false",
    TokenType.DOT: "dot'.'",
    TokenType.MOD: "%",
    TokenType.NOT: "not'!'",
    TokenType.AND_KEYWORD: "and",
    TokenType.OR_KEYWORD: "or",
    TokenType.FLOAT_LITERAL: "float",
    TokenType.COMMA: "comma','",
    TokenType.PUB_KEYWORD: "public",
    TokenType.NOT_EQUAL: "`!=` not eql",
    TokenType.FLT_KEYWORD: "float_word",
    TokenType.INT_KEYWORD: "int_word",
    TokenType.SWITCH_KEYWORD: "switch",
    TokenType.BOOL_KEYWORD: "bool_word",
    TokenType.EQUAL_EQUAL: "equality",
    TokenType.BREAK_KEYWORD: "break",
    TokenType.ADD_EQUAL: "add_equal",
    TokenType.DIV_EQUAL: "divide_equal",
    TokenType.MULT_EQUAL: "multiply_equal",
    TokenType.SUB_EQUAL: "subtract_equal",
    TokenType.STRUCT_KEYWORD: "struct",
    TokenType.REF_KEYWORD: "ref",
    TokenType.ENUM_KEYWORD: "enum",
    TokenType.NIL_LITERAL: "nil (null)",
    TokenType.UINT_KEYWORD: "uint",
    TokenType.GREATER_EQL: ">=",
    TokenType.LESS_EQL: "<=",
    TokenType.TERMINATOR: "terminator",
    TokenType.EOT: "End OF Tokens",
}

_MESSAGES: dict[LexErrorKind, str] = {
    LexErrorKind.OUT_OF_MEMORY: "Out of memory",
    LexErrorKind.INVALID_CHAR: "Invalid character",
    LexErrorKind.TOO_LONG_IDENTIFIER: "Identifier is too long",
    LexErrorKind.TOO_LONG_NUMBER: "Number is too long",
    LexErrorKind.TOO_LONG_STRING: "String is too long",
    LexErrorKind.NOT_CLOSED_CHAR: "The char is not closed.",
    LexErrorKind.NOT_CLOSED_STRING: "The cstr is not closed.",
    LexErrorKind.END_OF_FILE: "reached end of file.",
    LexErrorKind.FILE_EMPTY: "The file is empty.",
    LexErrorKind.BAD_TOKEN_AT_GLOBAL: "Found global token at its forbidden scope",
    LexErrorKind.TABS: "Tabs '\\t' are unsupported",
    LexErrorKind.NOT_VALID_ESCAPE_CHAR: "Invalid escaped char",
    LexErrorKind.NOT_CLOSED_COMMENT: "Comment not closed",
}

_ADVICE: dict[LexErrorKind, str] = {
    LexErrorKind.NOT_VALID_ESCAPE_CHAR: "Change the letter after \\",
    LexErrorKind.NOT_CLOSED_COMMENT: "Close the comment with delimiter",
    LexErrorKind.INVALID_CHAR: "remove this character",
    LexErrorKind.OUT_OF_MEMORY: "The compiler needs more memory",
    LexErrorKind.TOO_LONG_IDENTIFIER: "Identifier must not exceed 100 characters",
    LexErrorKind.TOO_LONG_NUMBER: "Number must not exceed 100 digits",
    LexErrorKind.TOO_LONG_STRING: "String must not exceed (uint_MAX / 2) characters",
    LexErrorKind.NOT_CLOSED_CHAR: "Close the char with a quote",
    LexErrorKind.NOT_CLOSED_STRING: "Close the cstr with a double quote",
    LexErrorKind.END_OF_FILE: "Needs more code for compiling",
    LexErrorKind.FILE_EMPTY: "Do not compile empty files",
    LexErrorKind.BAD_TOKEN_AT_GLOBAL: "Do not put this token in global scope",
    LexErrorKind.TABS: "Convert the tabs to spaces",
}


def describe_token_type(kind: TokenType) -> str:
    """Return the human-readable description of a token kind."""
    return _DESCRIPTIONS.get(kind, "UNKNOWN")


def error_message(kind: LexErrorKind) -> str:
    """Return the message shown for a lexical error kind."""
    try:
        return _MESSAGES[kind]
    except KeyError:
        raise ValueError(f"no error message for {kind.name}") from None


def error_advice(kind: LexErrorKind) -> str:
    """Return the advice shown for a lexical error kind."""
    try:
        return _ADVICE[kind]
    except KeyError:
        raise ValueError(f"no error advice for {kind.name}") from None


def format_token(token: Token, text: str) -> str:
    """Format a token as one log line, without the trailing newline."""
    return (
        f"[TOKEN]: idx: {token.index}, len: {token.length}, "
        f"type: {describe_token_type(token.kind)}, val: `{token.value(text)}`"
    )