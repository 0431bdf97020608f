import logging
import os
import tempfile
import unittest

from ffbp.core.logger import (
    PACKAGE_LOGGER_NAME, progress_message, setup_logging)


class TestSetupLogging(unittest.TestCase):

    def tearDown(self):
        setup_logging(stdout=False, level=logging.NOTSET)

    def test_file_and_stream_handlers(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, 'log.txt')

            logger = setup_logging(filename=filename, stdout=True)

            self.assertEqual(logger.name, PACKAGE_LOGGER_NAME)
            types = sorted(type(h).__name__ for h in logger.handlers)
            self.assertEqual(types, ['FileHandler', 'StreamHandler'])

            logging.getLogger('ffbp.core.network').info('hello there')

            # Replaces rather than appends the handlers
            setup_logging(stdout=False)
            self.assertEqual(len(logger.handlers), 0)

            with open(filename) as f:
                contents = f.read()

        self.assertIn('hello there', contents)
        self.assertIn('[ffbp.core.network:', contents)
        self.assertIn('INFO', contents)


class TestProgressMessage(unittest.TestCase):

    def test_zero_padding(self):
        self.assertEqual(progress_message('msg', 7, 100), '(007 / 100) msg')
        self.assertEqual(progress_message('50%', 3, 9), '(3 / 9) 50%')
