import functools
import logging
import re

from propcalc.logic.errors import UnknownToken
from propcalc.logic.tokens import Token, TokenType

logger = logging.getLogger(__name__)

# Characters that always form a word of their own. Opening parentheses are only
# separated on the right so that a highlight marker stays attached to them.
_SEPARATORS = {"(": "( ", ")": " )", "!": " ! ", "¬": " ¬ "}


@functools.cache
def compile_patterns(highlight_char: str | None) -> dict[TokenType, re.Pattern[str]]:
    """Compile the token patterns for a given highlight character, in priority order."""
    patterns = {}
    for token_type in TokenType:
        if token_type is TokenType.OPEN_PAREN:
            marker = "" if highlight_char is None else re.escape(highlight_char) + "?"
            patterns[token_type] = re.compile(marker + r"\(")
        else:
            assert token_type.pattern is not None
            patterns[token_type] = re.compile(token_type.pattern)
    return patterns


class Lexer:
    """Splits an expression into words and resolves each word into tokens.

    A word that matches a token pattern as a whole becomes a single token. Otherwise
    the first token type (in declaration order) matching a prefix of the word is
    emitted and the rest of the word is lexed again, so that e.g. ``p&&q`` does not
    need spaces.
    """

    def __init__(self, expression: str, highlight_char: str | None = "*"):
        self.expression = expression
        self.patterns = compile_patterns(highlight_char)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        for word in self.words():
            tokens.extend(self.lex_word(word))
        logger.debug(f"Lexed {self.expression!r} into {tokens}")
        return tokens

    def words(self) -> list[str]:
        text = self.expression
        for char, replacement in _SEPARATORS.items():
            text = text.replace(char, replacement)
        return text.split()

    def lex_word(self, word: str) -> list[Token]:
        tokens = []
        while word:
            full_match = self._full_match(word)
            if full_match is not None:
                tokens.append(Token(full_match, word))
                break
            token = self._prefix_match(word)
            if token is None:
                raise UnknownToken(word)
            tokens.append(token)
            word = word[len(token.value) :]
        return tokens

    def _full_match(self, word: str) -> TokenType | None:
        for token_type, pattern in self.patterns.items():
            if pattern.fullmatch(word):
                return token_type
        return None

    def _prefix_match(self, word: str) -> Token | None:
        for token_type, pattern in self.patterns.items():
            match = pattern.match(word)
            if match and match.end() > 0:
                return Token(token_type, match.group())
        return None
