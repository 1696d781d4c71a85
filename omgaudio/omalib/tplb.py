from dataclasses import dataclass

from construct import Array, Int16ub, Struct

TPLB_TAG = b"TPLB"
TPLB_ELEMENT_SIZE = 2

TplbElementEntry = Struct(
  "title_id" / Int16ub # element index in 04CNTINF
)

@dataclass(frozen=True)
class TplbElement:
  title_id: int

@dataclass(frozen=True)
class Tplb:
  tag = TPLB_TAG
  element_size = TPLB_ELEMENT_SIZE
  elements: tuple = ()

  @property
  def title_ids(self):
    return [e.title_id for e in self.elements]

def decode_tplb(cursor, element_count):
  raw = cursor.take(element_count * TPLB_ELEMENT_SIZE)
  entries = Array(element_count, TplbElementEntry).parse(raw)
  return Tplb(tuple(TplbElement(e.title_id) for e in entries))

def encode_tplb(kind):
  return Array(len(kind.elements), TplbElementEntry).build([dict(title_id=e.title_id) for e in kind.elements])
