"""Finite-state scanner for textual constructor declarations.

The scanner walks a declaration such as

    function Logger($config, level) { ... }

and emits one token per transition of its state machine. Identifiers are runs
of word characters plus the dependency sigil, so `$config` is one identifier.

The scanner never raises: malformed input moves it to the ILLEGAL state, where
it stays. extract_parameter_names() drives a scanner to completion and collects
the identifiers found inside the parameter list, returning whatever it gathered
before the scan stopped.
"""

import enum
import re
from typing import Callable, Dict, Iterator, List

from attr import define

from .config import DEFAULT_KEYWORD, DEFAULT_SIGIL

_WORD_CHAR = re.compile(r"\w")


class State(enum.Enum):
    """Lexical states of the constructor scanner."""

    ILLEGAL = -1
    NO = 0
    IDENTIFIER = 1
    FUNCTION = 2
    PARENTHESES_OPEN = 3
    PARENTHESES_CLOSE = 4
    COMMA = 5
    END = 6


TERMINAL_STATES = frozenset((State.END, State.ILLEGAL))


@define(frozen=True)
class Token:
    """Lexeme consumed while the scanner transitioned into `state`.

    `start` and `end` are a half-open offset range into the scanned source.
    """

    state: State
    start: int
    end: int


class ConstructorScanner:
    """Tokenizes a constructor declaration one transition at a time."""

    def __init__(
        self, source: object, keyword: str = DEFAULT_KEYWORD, sigil: str = DEFAULT_SIGIL
    ) -> None:
        self._source = str(source or "")
        self._keyword = keyword
        self._sigil = sigil

        self._index = 0
        self._end = 0
        self._state = State.NO

        self._transitions: Dict[State, Callable[[], None]] = {
            State.FUNCTION: self._function_state,
            State.IDENTIFIER: self._identifier_state,
            State.PARENTHESES_OPEN: self._parentheses_open_state,
            State.PARENTHESES_CLOSE: self._parentheses_close_state,
            State.COMMA: self._comma_state,
        }

    @property
    def source(self) -> str:
        return self._source

    @property
    def state(self) -> State:
        """The state the next call to next() will leave."""
        return self._state

    def next(self) -> Token:
        """Perform one transition and return the token consumed during it."""
        if self._state in TERMINAL_STATES:
            return Token(self._state, self._index, self._index + 1)

        start = self._index
        state = self._state

        if state is State.NO:
            self._skip_whitespace()
            if self._source.startswith(self._keyword, self._index):
                self._state = State.FUNCTION
                return self.next()
            self._state = State.ILLEGAL
            return Token(State.ILLEGAL, start, self._end)

        self._transitions[state]()
        return Token(state, start, self._end)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first terminal one."""
        while True:
            token = self.next()
            yield token
            if token.state in TERMINAL_STATES:
                return

    def _peek(self) -> str:
        if self._index < len(self._source):
            return self._source[self._index]
        return ""

    def _is_identifier_char(self, char: str) -> bool:
        if not char:
            return False
        return char == self._sigil or _WORD_CHAR.match(char) is not None

    def _skip_whitespace(self) -> None:
        while self._index < len(self._source) and self._source[self._index].isspace():
            self._index += 1

    def _consume(self, length: int) -> None:
        self._index += length
        self._end = self._index
        self._skip_whitespace()

    def _function_state(self) -> None:
        self._consume(len(self._keyword))

        char = self._peek()
        if char == "(":
            self._state = State.PARENTHESES_OPEN
        elif self._is_identifier_char(char):
            self._state = State.IDENTIFIER
        else:
            self._state = State.ILLEGAL

    def _parentheses_open_state(self) -> None:
        self._consume(1)

        char = self._peek()
        if self._is_identifier_char(char):
            self._state = State.IDENTIFIER
        elif char == ")":
            self._state = State.PARENTHESES_CLOSE
        else:
            self._state = State.ILLEGAL

    def _identifier_state(self) -> None:
        while self._is_identifier_char(self._peek()):
            self._index += 1
        self._consume(0)

        char = self._peek()
        if char == "(":
            self._state = State.PARENTHESES_OPEN
        elif char == ")":
            self._state = State.PARENTHESES_CLOSE
        elif char == ",":
            self._state = State.COMMA
        else:
            self._state = State.ILLEGAL

    def _comma_state(self) -> None:
        self._consume(1)

        if self._is_identifier_char(self._peek()):
            self._state = State.IDENTIFIER
        else:
            self._state = State.ILLEGAL

    def _parentheses_close_state(self) -> None:
        self._index += 1
        self._end = self._index
        self._state = State.END


def extract_parameter_names(
    source: object, keyword: str = DEFAULT_KEYWORD, sigil: str = DEFAULT_SIGIL
) -> List[str]:
    """Return the parameter names declared in a textual constructor declaration.

    Identifiers seen before the parameter list opens (a declaration name) are
    skipped. If the scan ends in ILLEGAL the names found so far are returned,
    so malformed source yields fewer (or no) names rather than an error.
    """
    scanner = ConstructorScanner(source, keyword, sigil)
    names: List[str] = []
    in_parameters = False
    for token in scanner:
        if token.state is State.PARENTHESES_OPEN:
            in_parameters = True
        elif token.state is State.IDENTIFIER and in_parameters:
            names.append(scanner.source[token.start : token.end])
    return names
