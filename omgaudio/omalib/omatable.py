import logging

from .classdescription import decode_class_description, encode_class_description
from .classkind import class_length
from .cursor import ByteCursor
from .errors import EnvelopeMismatch, MagicMismatch
from .fields import CLASS_DESCRIPTION_SIZE, TABLE_HEADER_SIZE, TABLE_MAGIC, TableHeader, align, tag_str
from .model import ClassDescription, OmaClass, Table
from .omaclass import decode_class, encode_class

# A table is a 16 byte header (name, magic, class count), one 16 byte
# description per class and the class bodies at their described addresses.

def decode_table(cursor, strict=False):
  name = cursor.take(4)
  try:
    cursor.expect_u32(TABLE_MAGIC)
  except MagicMismatch as e:
    raise EnvelopeMismatch(name, e.expected, e.actual) from None
  class_count = cursor.read_u8()
  cursor.skip_to(TABLE_HEADER_SIZE)
  descriptions = [decode_class_description(cursor) for _ in range(class_count)]
  classes = []
  for description in descriptions:
    cursor.skip_to(description.address) # gap bytes are never interpreted
    classes.append(decode_class(cursor, description, strict))
  return Table(name, class_count, tuple(descriptions), tuple(classes))

def parse_table(data, strict=False):
  cursor = ByteCursor(data)
  table = decode_table(cursor, strict)
  if cursor.remaining > 0:
    logging.debug("%d bytes left after the last class of %s", cursor.remaining, tag_str(table.name))
  return table

def build_table(table):
  if not table.class_count == len(table.class_descriptions) == len(table.classes):
    raise ValueError("table {} declares {} classes but holds {} descriptions and {} classes".format(
      tag_str(table.name), table.class_count, len(table.class_descriptions), len(table.classes)))
  data = bytearray(TableHeader.build(dict(name=table.name, class_count=table.class_count)))
  for description in table.class_descriptions:
    data += encode_class_description(description)
  for description, klass in zip(table.class_descriptions, table.classes):
    if description.address < len(data):
      raise ValueError("class {} at 0x{:x} overlaps the preceding data ending at 0x{:x}".format(
        tag_str(description.name), description.address, len(data)))
    data += bytes(description.address - len(data))
    body = encode_class(klass)
    if len(body) > description.len:
      raise ValueError("class {} needs 0x{:x} bytes but only 0x{:x} are declared".format(
        tag_str(klass.name), len(body), description.len))
    data += body + bytes(description.len - len(body))
  return bytes(data)

# places the given class payloads (Gplb, Tplb...) behind each other
def layout_table(name, kinds):
  descriptions = []
  classes = []
  address = align(TABLE_HEADER_SIZE + CLASS_DESCRIPTION_SIZE*len(kinds))
  for kind in kinds:
    length = class_length(kind)
    descriptions.append(ClassDescription(kind.tag, address, length))
    classes.append(OmaClass(kind.tag, len(kind.elements), kind.element_size, kind))
    address = align(address + length)
  return Table(name, len(kinds), tuple(descriptions), tuple(classes))
