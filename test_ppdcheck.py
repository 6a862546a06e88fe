#!/usr/bin/python3

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


import pytest
try:
    import cups
except ImportError:
    cups = None

from genppd.drivers import DriverDatabase
from genppd import config
from genppd.options import stp_options
from genppd.ppdcheck import check_ppd
from genppd.ppdwriter import ppd_filename, write_ppd

@pytest.mark.skipif(cups is None, reason="cups module not available")
@pytest.mark.parametrize ("compress", [False, True])
def test_bundled_ppds_load(tmp_path, compress):
    db = DriverDatabase ()
    db.load (config.DRIVER_DATABASE)
    table = stp_options (db.minimum_settings (), db.maximum_settings (),
                         db.default_settings ())
    prefix = str (tmp_path)
    for printer in db.printers ():
        if printer.driver in ("ps", "ps2"):
            continue

        assert write_ppd (printer, prefix, table, compress=compress) == 0
        filename = ppd_filename (prefix, printer.driver, compress)
        assert check_ppd (filename) == 0

        if not compress:
            ppd = cups.PPD (filename)
            assert ppd.findOption ("PageSize") is not None
            assert ppd.findOption ("stpBrightness") is not None

@pytest.mark.skipif(cups is None, reason="cups module not available")
def test_invalid_ppd(tmp_path, capsys):
    filename = tmp_path / "broken.ppd"
    filename.write_text ("this is not a PPD\n")
    assert check_ppd (str (filename)) == 3
    assert "Invalid PPD file" in capsys.readouterr ().err
