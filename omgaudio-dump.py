#!/usr/bin/env python3

import logging
import argparse
import os
import sys

from omgaudio.omalib.errors import DecodeError
from omgaudio.omalib.omadatabase import OmaDatabase
from omgaudio.omalib.omatable import parse_table

parser = argparse.ArgumentParser(description='Dump OMGAUDIO catalog tables')
parser.add_argument('paths', metavar='PATH', nargs='+', help='OMGAUDIO folder or single table file (01TREE01.DAT...)')
parser.add_argument('--strict', action='store_true', help='Abort when a class is named differently than its description')
parser.add_argument('--no-validate', dest='validate', action='store_false', help='Skip the index consistency checks')
parser.add_argument('-q', '--quiet', action='store_const', dest='loglevel', const=logging.WARNING, help='Only display warning messages', default=logging.INFO)
parser.add_argument('-d', '--debug', action='store_const', dest='loglevel', const=logging.DEBUG, help='Display verbose debugging information')

args = parser.parse_args()

logging.basicConfig(level=args.loglevel, format='%(levelname)-7s %(module)s: %(message)s')

def dump_table(filename):
  with open(filename, "rb") as f:
    table = parse_table(f.read(), args.strict)
  logging.info("%s: %s", filename, table)
  for description, klass in zip(table.class_descriptions, table.classes):
    logging.info("  %s", description)
    logging.info("    %s", klass)
    for element in klass.elements:
      logging.debug("      %s", element)

def dump_database(path):
  db = OmaDatabase()
  db.strict = args.strict
  db.validate = args.validate
  db.load_dir(path)
  for axis in db:
    logging.info("%s (%s):", axis.label, axis.tree_filename)
    for group, title_ids in db.get_groups(axis):
      logging.info("  group %d: %s", group.id, " ".join("{}".format(t) for t in title_ids))
    unused = db.get_unused_groups(axis)
    if unused:
      logging.info("  unused groups: %s", " ".join("{}".format(i) for i in unused))

failed = False
for path in args.paths:
  try:
    if os.path.isdir(path):
      dump_database(path)
    else:
      dump_table(path)
  except (DecodeError, OSError) as e:
    logging.error("%s: %s", path, e)
    failed = True

sys.exit(1 if failed else 0)
