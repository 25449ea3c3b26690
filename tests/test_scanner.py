import unittest
from typing import List, Tuple

import pytest

from svclocator.scanner import ConstructorScanner, State, Token, extract_parameter_names


def _scan(source: str) -> List[Tuple[State, int, int]]:
    return [(token.state, token.start, token.end) for token in ConstructorScanner(source)]


class ConstructorScannerTestCase(unittest.TestCase):
    def test_empty_source(self) -> None:
        scanner = ConstructorScanner("")

        self.assertEqual(Token(State.ILLEGAL, 0, 0), scanner.next())

    def test_none_source(self) -> None:
        self.assertEqual([(State.ILLEGAL, 0, 0)], _scan(None))

    def test_missing_keyword(self) -> None:
        self.assertEqual([(State.ILLEGAL, 0, 0)], _scan("   class Some:"))

    def test_illegal_after_keyword(self) -> None:
        self.assertEqual(
            [
                (State.FUNCTION, 3, 11),
                (State.ILLEGAL, 14, 15),
            ],
            _scan("   function   {"),
        )

    def test_illegal_after_open_parentheses(self) -> None:
        self.assertEqual(
            [
                (State.FUNCTION, 3, 11),
                (State.PARENTHESES_OPEN, 14, 15),
                (State.ILLEGAL, 16, 17),
            ],
            _scan("   function   ( {"),
        )

    def test_illegal_after_identifier(self) -> None:
        self.assertEqual(
            [
                (State.FUNCTION, 3, 11),
                (State.IDENTIFIER, 14, 18),
                (State.ILLEGAL, 19, 20),
            ],
            _scan("   function   Some {"),
        )

    def test_illegal_after_comma(self) -> None:
        self.assertEqual(
            [
                (State.FUNCTION, 0, 8),
                (State.PARENTHESES_OPEN, 9, 10),
                (State.IDENTIFIER, 10, 11),
                (State.COMMA, 11, 12),
                (State.ILLEGAL, 13, 14),
            ],
            _scan("function (a, )"),
        )

    def test_named_constructor(self) -> None:
        source = (
            "   function   SomeModuleName    \n"
            "    (     $first   ,  \n   second,third \n, $fourth \n"
            "){   }"
        )

        self.assertEqual(
            [
                (State.FUNCTION, 3, 11),
                (State.IDENTIFIER, 14, 28),
                (State.PARENTHESES_OPEN, 37, 38),
                (State.IDENTIFIER, 43, 49),
                (State.COMMA, 52, 53),
                (State.IDENTIFIER, 59, 65),
                (State.COMMA, 65, 66),
                (State.IDENTIFIER, 66, 71),
                (State.COMMA, 73, 74),
                (State.IDENTIFIER, 75, 82),
                (State.PARENTHESES_CLOSE, 84, 85),
                (State.END, 85, 86),
            ],
            _scan(source),
        )

    def test_anonymous_constructor(self) -> None:
        source = "   function       \n    (     $first   ,  \n   second\n){   }"

        self.assertEqual(
            [
                (State.FUNCTION, 3, 11),
                (State.PARENTHESES_OPEN, 23, 24),
                (State.IDENTIFIER, 29, 35),
                (State.COMMA, 38, 39),
                (State.IDENTIFIER, 45, 51),
                (State.PARENTHESES_CLOSE, 52, 53),
                (State.END, 53, 54),
            ],
            _scan(source),
        )

    def test_constructor_without_arguments(self) -> None:
        source = "   function       \n    (     \n){   }"

        self.assertEqual(
            [
                (State.FUNCTION, 3, 11),
                (State.PARENTHESES_OPEN, 23, 24),
                (State.PARENTHESES_CLOSE, 30, 31),
                (State.END, 31, 32),
            ],
            _scan(source),
        )

    def test_terminal_state_is_idempotent(self) -> None:
        scanner = ConstructorScanner("function () {}")
        tokens = list(scanner)

        self.assertEqual(State.END, tokens[-1].state)
        self.assertEqual(State.END, scanner.state)
        for _ in range(3):
            self.assertEqual(Token(State.END, 11, 12), scanner.next())

        scanner = ConstructorScanner("function {")
        list(scanner)
        for _ in range(3):
            self.assertEqual(Token(State.ILLEGAL, 9, 10), scanner.next())

    def test_custom_keyword_and_sigil(self) -> None:
        scanner = ConstructorScanner("def __init__(self, §logger):", keyword="def", sigil="§")

        self.assertEqual(
            [
                State.FUNCTION,
                State.IDENTIFIER,
                State.PARENTHESES_OPEN,
                State.IDENTIFIER,
                State.COMMA,
                State.IDENTIFIER,
                State.PARENTHESES_CLOSE,
                State.END,
            ],
            [token.state for token in scanner],
        )


@pytest.mark.parametrize(
    "source, expected",
    [
        ("function (a, b) {}", ["a", "b"]),
        ("function named($dep, literal) {}", ["$dep", "literal"]),
        ("function () {}", []),
        ("function Named() {}", []),
        ("\n  function\tSpaced ( $a ,\n b\n ) {}", ["$a", "b"]),
        ("function (a, b", ["a", "b"]),
        ("function (a, b = 1) {}", ["a", "b"]),
        ("function {", []),
        ("", []),
        ("class Foo {}", []),
        ("function (a b) {}", ["a"]),
    ],
)
def test_extract_parameter_names(source, expected) -> None:
    assert extract_parameter_names(source) == expected


def test_extract_parameter_names_custom_sigil() -> None:
    assert extract_parameter_names("function named(§dep, literal) {}", sigil="§") == [
        "§dep",
        "literal",
    ]
    # a sigil other than the configured one is not an identifier character
    assert extract_parameter_names("function named(§dep, literal) {}") == []


def test_extract_parameter_names_custom_keyword() -> None:
    source = "def __init__(self, $logger, level):"

    assert extract_parameter_names(source, keyword="def") == ["self", "$logger", "level"]
    assert extract_parameter_names(source) == []
