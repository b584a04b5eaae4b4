"""Token kinds and pattern table for the expression language.

Patterns are listed in priority order: keywords precede IDENT so that an
equal-length match resolves to the keyword, while longest match still
lexes "letter" as an identifier. Two-character operators need no special
ordering because "==" is longer than "=".
"""

from enum import StrEnum

from purelex.syntax.token import TokenPattern
from purelex.syntax.tokenizer import Lexicon

__all__ = ["LEXICON", "TokenKind"]


class TokenKind(StrEnum):
    """Token kinds of the expression language.

    StrEnum members compare equal to plain strings, so Token.kind (a str)
    can be tested against them directly.
    """

    # Keywords
    LET = "LET"
    RETURN = "RETURN"
    IF = "IF"
    ELSE = "ELSE"
    FN = "FN"
    TRUE = "TRUE"
    FALSE = "FALSE"

    # Literals and names
    IDENT = "IDENT"
    NUM = "NUM"

    # Operators
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    BANG = "BANG"
    LT = "LT"
    GT = "GT"
    EQ = "EQ"
    NOT_EQ = "NOT_EQ"

    # Delimiters
    COMMA = "COMMA"
    SEMICOLON = "SEMICOLON"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"

    # Trivia
    WHITESPACE = "WHITESPACE"
    COMMENT = "COMMENT"

    # Sentinel
    EOF = "EOF"


LEXICON = Lexicon(
    (
        TokenPattern(TokenKind.LET, "let", literal=True),
        TokenPattern(TokenKind.RETURN, "return", literal=True),
        TokenPattern(TokenKind.IF, "if", literal=True),
        TokenPattern(TokenKind.ELSE, "else", literal=True),
        TokenPattern(TokenKind.FN, "fn", literal=True),
        TokenPattern(TokenKind.TRUE, "true", literal=True),
        TokenPattern(TokenKind.FALSE, "false", literal=True),
        TokenPattern(TokenKind.IDENT, r"[A-Za-z_][A-Za-z0-9_]*"),
        TokenPattern(TokenKind.NUM, r"[0-9]+"),
        TokenPattern(TokenKind.EQ, "==", literal=True),
        TokenPattern(TokenKind.NOT_EQ, "!=", literal=True),
        TokenPattern(TokenKind.ASSIGN, "=", literal=True),
        TokenPattern(TokenKind.PLUS, "+", literal=True),
        TokenPattern(TokenKind.MINUS, "-", literal=True),
        TokenPattern(TokenKind.STAR, "*", literal=True),
        TokenPattern(TokenKind.SLASH, "/", literal=True),
        TokenPattern(TokenKind.BANG, "!", literal=True),
        TokenPattern(TokenKind.LT, "<", literal=True),
        TokenPattern(TokenKind.GT, ">", literal=True),
        TokenPattern(TokenKind.COMMA, ",", literal=True),
        TokenPattern(TokenKind.SEMICOLON, ";", literal=True),
        TokenPattern(TokenKind.LPAREN, "(", literal=True),
        TokenPattern(TokenKind.RPAREN, ")", literal=True),
        TokenPattern(TokenKind.LBRACE, "{", literal=True),
        TokenPattern(TokenKind.RBRACE, "}", literal=True),
        TokenPattern(TokenKind.WHITESPACE, r"[ \t\r\n]+", trivia=True),
        TokenPattern(TokenKind.COMMENT, r"//[^\n]*", trivia=True),
    )
)
