import logging

from .classkind import decode_kind, encode_kind
from .errors import ClassNameMismatch
from .fields import CLASS_HEADER_SIZE, ClassHeader, tag_str
from .model import OmaClass

# expects the cursor at description.address
def decode_class(cursor, description, strict=False):
  header = ClassHeader.parse(cursor.take(CLASS_HEADER_SIZE))
  name = header.name
  if name != description.name:
    if strict:
      raise ClassNameMismatch(description.name, name, description.address)
    logging.warning("class at 0x%x is described as %s but named %s", description.address, tag_str(description.name), tag_str(name))
  kind = decode_kind(name, cursor, header.element_count)
  end = description.address + description.len
  if cursor.offset > end:
    logging.warning("class %s at 0x%x overruns its declared end 0x%x by %d bytes", tag_str(name), description.address, end, cursor.offset - end)
  logging.debug("decoded class %s at 0x%x with %d elements", tag_str(name), description.address, header.element_count)
  return OmaClass(name, header.element_count, header.element_length, kind)

def encode_class(klass):
  header = ClassHeader.build(dict(name=klass.name, element_count=klass.element_count, element_length=klass.element_length))
  return header + encode_kind(klass.kind)
