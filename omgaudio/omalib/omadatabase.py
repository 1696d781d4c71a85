import os
import logging

from .axis import Axis
from .consistency import anchor_entries, check_table, index_pair
from .gplb import ASSOCIATION_UNUSED
from .omatable import parse_table

class OmaDatabase(dict):
  def __init__(self):
    super().__init__()
    self.strict = False
    self.validate = True
    self.findings = []

  def get_table(self, axis):
    if not axis in self:
      raise KeyError("OmaDatabase: no table loaded for axis {}".format(axis.label))
    return self[axis]

  def get_index(self, axis):
    return index_pair(self.get_table(axis))

  # title_ids in axis order
  def get_tracks(self, axis):
    gplb, tplb = self.get_index(axis)
    return tplb.title_ids

  # returns (GplbElement, [title_id, ...]) for each group holding tracks,
  # a group spans from its first track up to the first track of the next group
  def get_groups(self, axis):
    gplb, tplb = self.get_index(axis)
    title_ids = tplb.title_ids
    anchors = []
    for _, e in anchor_entries(gplb, axis):
      if not 1 <= e.title_id <= len(title_ids):
        logging.warning("skipping group %d of %s, it references TPLB position %d of %d", e.id, axis.label, e.title_id, len(title_ids))
        continue
      anchors.append(e)
    ends = [e.title_id-1 for e in anchors[1:]] + [len(title_ids)]
    return [(e, title_ids[e.title_id-1:end]) for e, end in zip(anchors, ends)]

  def get_unused_groups(self, axis):
    gplb, tplb = self.get_index(axis)
    return [e.id for e in gplb.elements if e.association == ASSOCIATION_UNUSED]

  def check(self, axis, track_groups=None):
    findings = check_table(self.get_table(axis), axis, track_groups)
    for finding in findings:
      logging.warning("inconsistent index: %s", finding)
    return findings

  def load_buffer(self, axis, data):
    logging.debug("Loading %s tree from buffer", axis.label)
    self[axis] = parse_table(data, self.strict)
    if self.validate:
      self.findings += self.check(axis)

  def load_file(self, axis, filename):
    logging.debug("Loading %s tree file \"%s\"", axis.label, filename)
    with open(filename, "rb") as f:
      data = f.read()
    self.load_buffer(axis, data)

  def load_dir(self, path):
    logging.info("Loading OMGAUDIO database \"%s\"", path)
    for axis in Axis:
      filename = os.path.join(path, axis.tree_filename)
      if not os.path.exists(filename):
        logging.warning("table %s not found in %s", axis.tree_filename, path)
        continue
      self.load_file(axis, filename)
    logging.info("Loaded %d trees, %d inconsistencies", len(self), len(self.findings))
