from dataclasses import dataclass

from construct import Array, Int16ub, Padding, Struct

GPLB_TAG = b"GPLB"
GPLB_ELEMENT_SIZE = 8
GPLB_CLASS_LENGTH = 0x4010 # constant, room for 2040 elements

ASSOCIATION_UNUSED = 0x0000 # listed in the group info file but without tracks
ASSOCIATION_TRACKS = 0x0100
ASSOCIATION_ALBUM = 0x0200 # artist-album tree only, the 0x0100 entries are artists there

GplbElementEntry = Struct(
  "id" / Int16ub, # element index in the matching 03GINFxx file
  "association" / Int16ub,
  "title_id" / Int16ub, # 1-based position of the group's first track in TPLB
  Padding(2)
)

@dataclass(frozen=True)
class GplbElement:
  id: int
  association: int
  title_id: int

  @property
  def in_use(self):
    return self.association != ASSOCIATION_UNUSED

@dataclass(frozen=True)
class Gplb:
  tag = GPLB_TAG
  element_size = GPLB_ELEMENT_SIZE
  elements: tuple = ()

def decode_gplb(cursor, element_count):
  raw = cursor.take(element_count * GPLB_ELEMENT_SIZE)
  entries = Array(element_count, GplbElementEntry).parse(raw)
  return Gplb(tuple(GplbElement(e.id, e.association, e.title_id) for e in entries))

def encode_gplb(kind):
  return b"".join(GplbElementEntry.build(dict(id=e.id, association=e.association, title_id=e.title_id)) for e in kind.elements)
