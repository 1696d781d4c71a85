import unittest
from omgaudio.omalib.cursor import ByteCursor
from omgaudio.omalib.errors import BackwardSeek, BufferUnderrun, MagicMismatch

class ByteCursorTestCase(unittest.TestCase):
    def test_take_advances(self):
        cursor = ByteCursor(b"TREE\x01\x02")
        self.assertEqual(cursor.take(4), b"TREE")
        self.assertEqual(cursor.offset, 4)
        self.assertEqual(cursor.remaining, 2)
        self.assertEqual(cursor.take(0), b"")
        self.assertEqual(cursor.take(2), b"\x01\x02")
        self.assertEqual(cursor.remaining, 0)

    def test_take_underrun(self):
        cursor = ByteCursor(b"\x00\x01\x02")
        cursor.take(1)
        with self.assertRaises(BufferUnderrun) as cm:
            cursor.take(3)
        self.assertEqual(cm.exception.requested, 3)
        self.assertEqual(cm.exception.remaining, 2)
        self.assertEqual(cm.exception.offset, 1)
        # a failed take does not move the cursor
        self.assertEqual(cursor.offset, 1)

    def test_most_significant_byte_first(self):
        cursor = ByteCursor(bytes([0x7f, 0x01, 0x02, 0x03, 0x04]))
        self.assertEqual(cursor.read_u8(), 0x7f)
        self.assertEqual(cursor.read_u32(), 0x01020304)

    def test_u16_from_u32_field(self):
        cursor = ByteCursor(bytes([0xab, 0xcd, 0x12, 0x34, 0x00, 0x00, 0x00, 0x08]))
        self.assertEqual(cursor.read_u16_from_u32_field(), 0x1234)
        self.assertEqual(cursor.offset, 4)
        self.assertEqual(cursor.read_u16_from_u32_field(), 8)
        self.assertEqual(cursor.offset, 8)

    def test_expect_u32(self):
        cursor = ByteCursor(bytes([0x01, 0x01, 0x00, 0x00, 0x01, 0x01, 0x00, 0x01]))
        cursor.expect_u32(0x01010000)
        with self.assertRaises(MagicMismatch) as cm:
            cursor.expect_u32(0x01010000)
        self.assertEqual(cm.exception.expected, 0x01010000)
        self.assertEqual(cm.exception.actual, 0x01010001)
        self.assertIn("0x01010000", str(cm.exception))
        self.assertIn("0x01010001", str(cm.exception))

    def test_skip_to(self):
        cursor = ByteCursor(bytes(32))
        cursor.take(4)
        cursor.skip_to(16)
        self.assertEqual(cursor.offset, 16)
        cursor.skip_to(16)
        self.assertEqual(cursor.offset, 16)
        with self.assertRaises(BackwardSeek) as cm:
            cursor.skip_to(8)
        self.assertEqual(cm.exception.target, 8)
        self.assertEqual(cm.exception.offset, 16)
        with self.assertRaises(BufferUnderrun):
            cursor.skip_to(33)

    def test_accepts_bytearray(self):
        cursor = ByteCursor(bytearray(b"\x00\x00\x00\x2a"))
        self.assertEqual(cursor.read_u32(), 42)
