from construct import Int8ub, Int32ub

from .errors import BackwardSeek, BufferUnderrun, MagicMismatch
from .fields import Int16InSlot

class ByteCursor:
  """Forward-only reader over an immutable buffer.

  take() is the only method advancing the offset, all reads are built on it.
  """
  def __init__(self, data):
    self.data = bytes(data)
    self.offset = 0

  @property
  def remaining(self):
    return len(self.data) - self.offset

  def take(self, length):
    if length < 0:
      raise ValueError("negative length {}".format(length))
    if length > self.remaining:
      raise BufferUnderrun(length, self.remaining, self.offset)
    start = self.offset
    self.offset += length
    return self.data[start:self.offset]

  def read_u8(self):
    return Int8ub.parse(self.take(1))

  def read_u32(self):
    return Int32ub.parse(self.take(4))

  def read_u16_from_u32_field(self):
    return Int16InSlot.parse(self.take(4))

  def expect_u32(self, value):
    actual = self.read_u32()
    if actual != value:
      raise MagicMismatch(value, actual)

  def skip_to(self, offset):
    if offset < self.offset:
      raise BackwardSeek(offset, self.offset)
    self.take(offset - self.offset)

  def __repr__(self):
    return "ByteCursor(offset=0x{:x}, size=0x{:x})".format(self.offset, len(self.data))
