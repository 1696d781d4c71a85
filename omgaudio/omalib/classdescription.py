from .fields import CLASS_DESCRIPTION_SIZE, ClassDescriptionEntry
from .model import ClassDescription

def decode_class_description(cursor):
  entry = ClassDescriptionEntry.parse(cursor.take(CLASS_DESCRIPTION_SIZE))
  return ClassDescription(entry.name, entry.address, entry.len)

def encode_class_description(description):
  return ClassDescriptionEntry.build(dict(name=description.name, address=description.address, len=description.len))
