## cups-genppd

## Copyright (C) 2026 The cups-genppd authors

## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.

## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.

## You should have received a copy of the GNU General Public License
## along with this program; if not, write to the Free Software
## Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

import gzip
import os
import shutil
import sys
import tempfile

from .debug import debugprint

def _load_ppd (filename):
    import cups

    if not filename.endswith (".gz"):
        return cups.PPD (filename)

    # libcups wants a plain file.
    (tmpfd, tmpfname) = tempfile.mkstemp (suffix=".ppd")
    try:
        with os.fdopen (tmpfd, "wb") as tmpf:
            with gzip.open (filename, "rb") as f:
                shutil.copyfileobj (f, tmpf)

        return cups.PPD (tmpfname)
    finally:
        os.unlink (tmpfname)

def check_ppd (filename):
    """
    Load a written PPD with libcups and report what it thinks.

    @returns: 0 if the PPD loads, 3 if it does not
    """
    try:
        ppd = _load_ppd (filename)
    except RuntimeError as e:
        print ("cups-genppd: Invalid PPD file \"%s\" - %s." % (filename, e),
               file=sys.stderr)
        return 3

    ppd.markDefaults ()
    defaults = {}
    for group in ppd.optionGroups:
        for option in group.options:
            defaults[option.keyword] = option.defchoice

    debugprint ("%s: %d groups, defaults %s" % (filename,
                                                len (ppd.optionGroups),
                                                defaults))
    conflicts = ppd.conflicts ()
    if conflicts:
        debugprint ("%s: %d conflicts with default options" % (filename,
                                                               conflicts))

    return 0
