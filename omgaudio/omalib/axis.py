from enum import Enum

class Axis(Enum):
  upload = 0x01
  artist = 0x02
  album = 0x03
  genre = 0x04
  artist_album = 0x2d

  @property
  def label(self):
    return self.name.replace("_", "-")

  # group/track index, 01TREE01.DAT...
  @property
  def tree_filename(self):
    return "01TREE{:02X}.DAT".format(self.value)

  # group names, 03GINF01.DAT...
  @property
  def group_info_filename(self):
    return "03GINF{:02X}.DAT".format(self.value)
