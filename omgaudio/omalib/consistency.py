from itertools import zip_longest

from .axis import Axis
from .errors import IndexInconsistency
from .gplb import ASSOCIATION_ALBUM, ASSOCIATION_TRACKS, ASSOCIATION_UNUSED, GPLB_TAG
from .tplb import TPLB_TAG

# A GPLB/TPLB pair describes one axis: TPLB lists the in-use title_ids in
# axis order, GPLB lists the groups in the order they first appear in TPLB,
# each pointing at the 1-based TPLB position of its first track, followed
# by the unused groups.

def _elements(obj):
  return tuple(getattr(obj, "elements", obj))

def _album_style(elements, axis):
  if axis is None:
    return any(e.association == ASSOCIATION_ALBUM for e in elements)
  return axis is Axis.artist_album

# GPLB elements pointing at the first track of a group, as (1-based GPLB position, element)
def anchor_entries(gplb, axis=None):
  elements = _elements(gplb)
  if _album_style(elements, axis):
    return [(i, e) for i, e in enumerate(elements, 1) if e.association == ASSOCIATION_ALBUM]
  return [(i, e) for i, e in enumerate(elements, 1) if e.in_use]

def index_pair(table):
  return table.get_class(GPLB_TAG).kind, table.get_class(TPLB_TAG).kind

def check_index(gplb, tplb, axis=None, track_groups=None):
  groups = _elements(gplb)
  title_ids = [e.title_id for e in _elements(tplb)]
  findings = []

  def report(detail, *args):
    findings.append(IndexInconsistency(axis, detail.format(*args)))

  seen = {}
  for position, title_id in enumerate(title_ids, 1):
    if title_id in seen:
      report("title_id {} is listed at TPLB positions {} and {}", title_id, seen[title_id], position)
    else:
      seen[title_id] = position

  allowed = {ASSOCIATION_UNUSED, ASSOCIATION_TRACKS}
  if axis in (None, Axis.artist_album):
    allowed.add(ASSOCIATION_ALBUM)
  first_unused = None
  for position, element in enumerate(groups, 1):
    if element.association not in allowed:
      report("GPLB element {} (id {}) has unexpected association 0x{:04x}", position, element.id, element.association)
    elif element.association == ASSOCIATION_UNUSED:
      if first_unused is None:
        first_unused = position
    elif first_unused is not None:
      report("GPLB element {} (id {}) is in use but follows unused element {}", position, element.id, first_unused)

  anchors = anchor_entries(groups, axis)
  previous = 0
  for position, element in anchors:
    if not 1 <= element.title_id <= len(title_ids):
      report("GPLB element {} (id {}) references TPLB position {}, but TPLB holds only {} elements",
        position, element.id, element.title_id, len(title_ids))
      continue
    if element.title_id <= previous:
      report("GPLB element {} (id {}) references TPLB position {}, not after the preceding group at {}",
        position, element.id, element.title_id, previous)
    elif previous == 0 and element.title_id != 1:
      report("first group (GPLB element {}, id {}) starts at TPLB position {} instead of 1",
        position, element.id, element.title_id)
    previous = max(previous, element.title_id)
  if title_ids and not anchors:
    report("TPLB holds {} tracks but no GPLB element references them", len(title_ids))

  # artist headers of the artist-album tree usually hold 0, any other value must still point into TPLB
  anchor_positions = {position for position, _ in anchors}
  for position, element in enumerate(groups, 1):
    if position in anchor_positions or not element.in_use or element.title_id == 0:
      continue
    if element.title_id > len(title_ids):
      report("GPLB element {} (id {}) references TPLB position {}, but TPLB holds only {} elements",
        position, element.id, element.title_id, len(title_ids))

  if track_groups is not None:
    first_seen = []
    seen_groups = set()
    for position, title_id in enumerate(title_ids, 1):
      if title_id not in track_groups:
        report("title_id {} at TPLB position {} belongs to no group", title_id, position)
        continue
      group = track_groups[title_id]
      if group not in seen_groups:
        seen_groups.add(group)
        first_seen.append((group, position))
    listed = [(e.id, e.title_id) for _, e in anchors]
    for expected, actual in zip_longest(first_seen, listed):
      if expected == actual:
        continue
      if actual is None:
        report("group {} first appearing at TPLB position {} has no GPLB element", *expected)
      elif expected is None:
        report("GPLB lists group {} at TPLB position {} but every group of TPLB is already listed", *actual)
      else:
        report("expected group {} at TPLB position {}, GPLB lists group {} at position {}", *(expected + actual))
      break

  return findings

def validate_index(gplb, tplb, axis=None, track_groups=None):
  findings = check_index(gplb, tplb, axis, track_groups)
  if findings:
    raise findings[0]

def check_table(table, axis=None, track_groups=None):
  try:
    gplb, tplb = index_pair(table)
  except KeyError as e:
    return [IndexInconsistency(axis, e.args[0])]
  return check_index(gplb, tplb, axis, track_groups)

def validate_table(table, axis=None, track_groups=None):
  findings = check_table(table, axis, track_groups)
  if findings:
    raise findings[0]
