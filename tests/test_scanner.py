import unittest

from truthtable.core import (
    LexError, MalformedMultiCharOperator, Precedence, Scanner, TokenKind, describe_tokens, scan
)


def kinds(tokens):
    return [t.kind for t in tokens]


class TestScanner(unittest.TestCase):
    def test_variables_and_operator(self):
        tokens, variables = scan("p ^ q")
        self.assertEqual(kinds(tokens), [TokenKind.VARIABLE, TokenKind.AND, TokenKind.VARIABLE])
        self.assertEqual([t.lexeme for t in tokens], ["p", "^", "q"])
        self.assertEqual(list(variables), ["p", "q"])

    def test_literals(self):
        tokens, variables = scan("0 F 1 T")
        self.assertEqual(kinds(tokens), [TokenKind.LITERAL] * 4)
        self.assertEqual([t.value for t in tokens], [False, False, True, True])
        self.assertEqual(variables, {})

    def test_single_char_operators(self):
        tokens, _ = scan("!~^*v+()")
        self.assertEqual(kinds(tokens), [
            TokenKind.NOT, TokenKind.NOT,
            TokenKind.AND, TokenKind.AND,
            TokenKind.OR, TokenKind.OR,
            TokenKind.LPAREN, TokenKind.RPAREN,
        ])

    def test_multi_char_operators(self):
        tokens, _ = scan("p -> q <-> r")
        self.assertEqual(kinds(tokens), [
            TokenKind.VARIABLE, TokenKind.IMPLIES, TokenKind.VARIABLE, TokenKind.IFF, TokenKind.VARIABLE
        ])
        self.assertEqual(tokens[1].lexeme, "->")
        self.assertEqual(tokens[3].lexeme, "<->")

    def test_precedence_ranks(self):
        tokens, _ = scan("~ ^ v -> <-> p (")
        self.assertEqual([t.precedence for t in tokens], [
            Precedence.L1, Precedence.L2, Precedence.L3, Precedence.L4, Precedence.L5,
            Precedence.NA, Precedence.NA,
        ])
        self.assertTrue(all(t.is_operator() for t in tokens[:5]))
        self.assertFalse(any(t.is_operator() for t in tokens[5:]))

    def test_first_occurrence_order(self):
        _, variables = scan("q ^ p v q ^ r")
        self.assertEqual(list(variables), ["q", "p", "r"])

    def test_every_character_is_its_own_variable(self):
        tokens, variables = scan("ab")
        self.assertEqual(kinds(tokens), [TokenKind.VARIABLE, TokenKind.VARIABLE])
        self.assertEqual(list(variables), ["a", "b"])

    def test_whitespace_is_skipped(self):
        tokens, _ = scan(" p\t^\nq ")
        self.assertEqual([t.lexeme for t in tokens], ["p", "^", "q"])

    def test_strict_rejects_incomplete_implication(self):
        with self.assertRaises(MalformedMultiCharOperator) as ctx:
            scan("p - q")
        self.assertEqual(ctx.exception.position, 2)
        self.assertIsInstance(ctx.exception, LexError)

    def test_strict_rejects_incomplete_biconditional(self):
        for source in ("p <- q", "p < q", "p <-"):
            with self.assertRaises(MalformedMultiCharOperator):
                scan(source)

    def test_legacy_drops_incomplete_operator(self):
        tokens, variables = scan("p - q", strict=False)
        self.assertEqual([t.lexeme for t in tokens], ["p", "q"])
        self.assertEqual(list(variables), ["p", "q"])

        tokens, _ = scan("p <-x", strict=False)
        self.assertEqual([t.lexeme for t in tokens], ["p", "x"])

    def test_legacy_resumes_at_mismatching_character(self):
        tokens, _ = scan("p --> q", strict=False)
        self.assertEqual(kinds(tokens), [TokenKind.VARIABLE, TokenKind.IMPLIES, TokenKind.VARIABLE])

        tokens, _ = scan("p <<-> q", strict=False)
        self.assertEqual(kinds(tokens), [TokenKind.VARIABLE, TokenKind.IFF, TokenKind.VARIABLE])

    def test_registry_token_is_unbound(self):
        _, variables = scan("p")
        self.assertIsNone(variables["p"].value)
        self.assertTrue(variables["p"].bind(1).value)
        self.assertIsNone(variables["p"].value)

    def test_scanner_object(self):
        scanner = Scanner("p v 1")
        result = scanner.scan()
        self.assertTrue(scanner.end())
        self.assertEqual(len(result.tokens), 3)

    def test_describe_tokens(self):
        tokens, _ = scan("p ^ q")
        self.assertEqual(
            describe_tokens(tokens),
            "1. Type: VARIABLE, Lexeme: p\n"
            "2. Type: AND, Lexeme: ^\n"
            "3. Type: VARIABLE, Lexeme: q",
        )


if __name__ == "__main__":
    unittest.main()
