import unittest

from ffbp.core.exception import InputSizeMismatch


class TestInputSizeMismatch(unittest.TestCase):

    def test_message_and_attributes(self):
        error = InputSizeMismatch('input', 2, 3)

        self.assertIsInstance(error, ValueError)
        self.assertEqual(error.kind, 'input')
        self.assertEqual(error.expected, 2)
        self.assertEqual(error.actual, 3)
        self.assertEqual(
            str(error), "Wrong number of input values: expected 2, got 3")
