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

import os

PACKAGE = "cups-genppd"
VERSION = "4.2.7"

prefix = "/usr"
datadir = os.path.join (prefix, "share")
localedir = os.path.join (datadir, "locale")
pkgdatadir = os.path.join (os.path.dirname (os.path.abspath (__file__)), "xml")

# Where PPDs go unless -p is given.
GENPPD_PPD_PREFIX = os.path.join (datadir, "cups", "model", "gimp-print")

# PostScript language level advertised in every PPD (2 or 3).
CUPS_PPD_PS_LEVEL = 2

# Write .ppd.gz instead of .ppd unless overridden on the command line.
COMPRESS_PPDS = os.environ.get ("GENPPD_COMPRESS", "1") not in ("0", "no", "")

CATALOG = os.path.join ("LC_MESSAGES", "%s.mo" % PACKAGE)

DRIVER_DATABASE = os.path.join (pkgdatadir, "drivers.xml")
