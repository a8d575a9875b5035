import doctest
from unittest import TestCase

from rrdreader import binary, exceptions, format, util


class DocTestCase(TestCase):

    def test_modules(self):
        for module in (binary, exceptions, format, util):
            failed, attempted = doctest.testmod(module)
            self.assertEqual(failed, 0, module.__name__)
            self.assertTrue(attempted > 0, module.__name__)
