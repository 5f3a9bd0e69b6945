import unittest

from truthtable.config import parse_flag


class TestParseFlag(unittest.TestCase):
    def test_booleans(self):
        self.assertIs(parse_flag(True), True)
        self.assertIs(parse_flag(False), False)

    def test_strings(self):
        for value in ("1", "true", "TRUE", " yes ", "on"):
            with self.subTest(value=value):
                self.assertIs(parse_flag(value), True)
        for value in ("0", "false", "False", "no", "off", ""):
            with self.subTest(value=value):
                self.assertIs(parse_flag(value), False)

    def test_rejects_everything_else(self):
        for value in ("maybe", None, 1, 0, [], {}):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_flag(value)


if __name__ == "__main__":
    unittest.main()
