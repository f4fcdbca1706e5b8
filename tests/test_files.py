import os
import tempfile
import unittest

from pysugar.core.exceptions import FileError
from pysugar.utils.files import append_file, create_file, read_file, write_file


class TestFiles(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp_dir.cleanup)
        self.path = os.path.join(self.tmp_dir.name, "notes.txt")

    def test_write_then_read(self):
        write_file(self.path, "first")
        write_file(self.path, "Hello, World!")
        self.assertEqual(read_file(self.path), "Hello, World!")

    def test_create_file_keeps_existing(self):
        self.assertTrue(create_file(self.path, "original"))
        self.assertFalse(create_file(self.path, "replacement"))
        self.assertEqual(read_file(self.path), "original")

    def test_append_file(self):
        append_file(self.path, "a")
        append_file(self.path, "b")
        self.assertEqual(read_file(self.path), "ab")

    def test_read_missing(self):
        missing = os.path.join(self.tmp_dir.name, "missing.txt")
        with self.assertRaises(FileError) as cm:
            read_file(missing)
        self.assertIn(f"cannot read file {missing}", str(cm.exception))
        self.assertIsInstance(cm.exception.__cause__, FileNotFoundError)

    def test_write_into_missing_directory(self):
        path = os.path.join(self.tmp_dir.name, "no", "such", "dir.txt")
        with self.assertRaises(OSError):
            write_file(path, "x")
        with self.assertRaises(FileError):
            create_file(path, "x")
        with self.assertRaises(FileError):
            append_file(path, "x")


if __name__ == '__main__':
    unittest.main()
