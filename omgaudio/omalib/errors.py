from .fields import tag_str

# structural errors abort a table decode, IndexInconsistency is a validation finding

class DecodeError(RuntimeError):
  pass

class BufferUnderrun(DecodeError):
  def __init__(self, requested, remaining, offset=None):
    self.requested = requested
    self.remaining = remaining
    self.offset = offset
    super().__init__("trying to take {} bytes at offset {} with only {} bytes remaining".format(requested, offset, remaining))

class BackwardSeek(DecodeError):
  def __init__(self, target, offset):
    self.target = target
    self.offset = offset
    super().__init__("cannot seek back to offset 0x{:x} from offset 0x{:x}".format(target, offset))

class MagicMismatch(DecodeError):
  def __init__(self, expected, actual):
    self.expected = expected
    self.actual = actual
    super().__init__("expected number 0x{:08x}, actual number 0x{:08x}".format(expected, actual))

class EnvelopeMismatch(MagicMismatch):
  def __init__(self, name, expected, actual):
    super().__init__(expected, actual)
    self.name = name
    self.args = ("table {!r} is not an OMGAUDIO table: {}".format(name, self.args[0]),)

class UnknownClassKind(DecodeError):
  def __init__(self, tag):
    self.tag = tag
    super().__init__("unknown class kind {}".format(tag_str(tag)))

class ClassNameMismatch(DecodeError):
  def __init__(self, expected, actual, address):
    self.expected = expected
    self.actual = actual
    self.address = address
    super().__init__("class at 0x{:x} is described as {!r} but named {!r}".format(address, expected, actual))

class IndexInconsistency(ValueError):
  def __init__(self, axis, detail):
    self.axis = axis
    self.detail = detail
    super().__init__("{}: {}".format(axis_label(axis), detail))

def axis_label(axis):
  if axis is None:
    return "unknown axis"
  return getattr(axis, "label", str(axis))
