from collections import namedtuple

from .errors import UnknownClassKind
from .fields import CLASS_HEADER_SIZE
from .gplb import GPLB_TAG, GPLB_CLASS_LENGTH, decode_gplb, encode_gplb
from .tplb import TPLB_TAG, decode_tplb, encode_tplb

ClassKindCodec = namedtuple("ClassKindCodec", ["decode", "encode", "fixed_length"])

# further tags (GPFB, CNFB, CILB, GTFB...) get a variant and an entry here
CLASS_KINDS = {
  GPLB_TAG: ClassKindCodec(decode_gplb, encode_gplb, GPLB_CLASS_LENGTH),
  TPLB_TAG: ClassKindCodec(decode_tplb, encode_tplb, None),
}

def get_codec(tag):
  try:
    return CLASS_KINDS[tag]
  except KeyError:
    raise UnknownClassKind(tag) from None

def decode_kind(tag, cursor, element_count):
  return get_codec(tag).decode(cursor, element_count)

def encode_kind(kind):
  return get_codec(kind.tag).encode(kind)

# declared class length for a kind, used when laying out a new table
def class_length(kind):
  codec = get_codec(kind.tag)
  if codec.fixed_length is not None:
    return codec.fixed_length
  return CLASS_HEADER_SIZE + len(kind.elements)*kind.element_size
