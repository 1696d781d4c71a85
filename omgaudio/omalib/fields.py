from construct import Bytes, Const, ExprAdapter, Int8ub, Int32ub, Padding, Struct

# all numbers are stored most significant byte first
TABLE_MAGIC = 0x01010000
TABLE_HEADER_SIZE = 16
CLASS_DESCRIPTION_SIZE = 16
CLASS_HEADER_SIZE = 16
CLASS_ALIGNMENT = 0x10

# 16 bit quantity stored in a 4 byte slot, the upper half is reserved
Int16InSlot = ExprAdapter(Int32ub,
  decoder=lambda obj, ctx: obj & 0xffff,
  encoder=lambda obj, ctx: obj)

Tag = Bytes(4)

TableHeader = Struct(
  "name" / Tag, # TREE, GTIF, GPIF, CNIF, CIDL...
  "magic" / Const(TABLE_MAGIC, Int32ub),
  "class_count" / Int8ub,
  Padding(7)
)

ClassDescriptionEntry = Struct(
  "name" / Tag,
  "address" / Int32ub, # absolute, from the start of the table
  "len" / Int32ub, # including the class header
  Padding(4)
)

ClassHeader = Struct(
  "name" / Tag,
  "element_count" / Int16InSlot,
  "element_length" / Int16InSlot,
  Padding(4) # sometimes repeats the element count
)

def tag_str(tag):
  return tag.decode("ascii", errors="replace")

def align(offset, alignment=CLASS_ALIGNMENT):
  return (offset + alignment - 1) // alignment * alignment
