from dataclasses import dataclass

from .fields import tag_str

@dataclass(frozen=True)
class ClassDescription:
  name: bytes
  address: int
  len: int

  def __str__(self):
    return "{} at 0x{:06x}, 0x{:06x} bytes".format(tag_str(self.name), self.address, self.len)

@dataclass(frozen=True)
class OmaClass:
  name: bytes
  element_count: int
  element_length: int # informational, the kind fixes the real element size
  kind: object # Gplb, Tplb

  @property
  def elements(self):
    return self.kind.elements

  def __str__(self):
    return "{}: {} elements of {} bytes".format(tag_str(self.name), self.element_count, self.element_length)

@dataclass(frozen=True)
class Table:
  name: bytes
  class_count: int
  class_descriptions: tuple # ClassDescription, positionally paired with classes
  classes: tuple # OmaClass

  def get_class(self, tag):
    for klass in self.classes:
      if klass.name == tag:
        return klass
    raise KeyError("Table: class {} not found in {}".format(tag_str(tag), tag_str(self.name)))

  def __str__(self):
    return "{} with {} classes".format(tag_str(self.name), self.class_count)
