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

from genppd import config
from genppd.main import main

SMALL_DB = """<?xml version="1.0"?>
<drivers>
  <printer driver="ps" color="true">
    <long-name>PostScript Level 1</long-name>
  </printer>
  <printer driver="acme-1" model="1">
    <long-name>Acme Jet One</long-name>
    <parameter name="PageSize" default="Letter">
      <choice name="Letter"/>
    </parameter>
    <parameter name="Resolution">
      <choice name="300dpi" xdpi="300">300 DPI</choice>
    </parameter>
  </printer>
  <printer driver="acme-2" model="2" color="true">
    <long-name>Acme Jet Two</long-name>
    <parameter name="PageSize" default="A4">
      <choice name="A4"/>
      <choice name="Custom"/>
    </parameter>
    <size-limit max-width="612" max-height="1008" min-width="144" min-height="144"/>
  </printer>
</drivers>
"""

@pytest.fixture
def database(tmp_path):
    filename = tmp_path / "drivers.xml"
    filename.write_text (SMALL_DB, encoding="utf-8")
    return str (filename)

def run (tmp_path, database, *args):
    return main (["-d", database, "-p", str (tmp_path / "ppd"),
                  "-c", str (tmp_path / "locale"), "-Z"] + list (args))

def test_help(capsys):
    assert main (["-h"]) == 0
    out = capsys.readouterr ().out
    assert "Usage: cups-genppd" in out
    assert "-M            List available printer models." in out

def test_version(capsys):
    assert main (["-V"]) == 0
    out = capsys.readouterr ().out
    assert config.VERSION in out
    assert "CUPS PPD PostScript Level:     %d" % config.CUPS_PPD_PS_LEVEL \
        in out

def test_bad_option(capsys):
    assert main (["-x"]) == 1
    assert "Usage:" in capsys.readouterr ().out

def test_list_models(database, capsys):
    assert main (["-d", database, "-M"]) == 0
    assert capsys.readouterr ().out == "acme-1\nacme-2\n"

    assert main (["-d", database, "-M", "-v"]) == 0
    assert capsys.readouterr ().out == ("%-20s%s\n%-20s%s\n" %
                                        ("acme-1", "Acme Jet One",
                                         "acme-2", "Acme Jet Two"))

def test_list_models_bundled(capsys):
    assert main (["-M"]) == 0
    models = capsys.readouterr ().out.split ()
    assert "escp2-740" in models
    assert "ps" not in models
    assert "ps2" not in models

def test_list_translations(tmp_path, capsys):
    d = tmp_path / "locale" / "sv" / "LC_MESSAGES"
    d.mkdir (parents=True)
    (d / ("%s.mo" % config.PACKAGE)).write_bytes (b"")
    assert main (["-L", "-c", str (tmp_path / "locale")]) == 0
    assert capsys.readouterr ().out == "sv\n"

def test_write_all(tmp_path, database, capsys):
    assert run (tmp_path, database) == 0
    prefix = tmp_path / "ppd"
    assert sorted (p.name for p in prefix.iterdir ()) == ["acme-1.ppd",
                                                          "acme-2.ppd"]
    assert "*VariableSizes: true" in (prefix / "acme-2.ppd").read_text ()
    assert capsys.readouterr ().err.endswith (" done.\n")

def test_write_named_models(tmp_path, database):
    assert run (tmp_path, database, "Acme Jet Two") == 0
    prefix = tmp_path / "ppd"
    assert [p.name for p in prefix.iterdir ()] == ["acme-2.ppd"]

    assert run (tmp_path, database, "acme-1", "ps") == 0
    assert sorted (p.name for p in prefix.iterdir ()) == ["acme-1.ppd",
                                                          "acme-2.ppd"]

def test_verbose(tmp_path, database, capsys):
    assert run (tmp_path, database, "-v", "acme-1") == 0
    err = capsys.readouterr ().err
    assert "Writing %s..." % (tmp_path / "ppd" / "acme-1.ppd") in err
    assert "done." not in err

def test_compressed(tmp_path, database):
    assert run (tmp_path, database, "-z", "acme-1") == 0
    assert (tmp_path / "ppd" / "acme-1.ppd.gz").exists ()

@pytest.mark.parametrize ("language", ["C", "en_US"])
def test_language_without_catalog(tmp_path, database, monkeypatch, language):
    from genppd.langs import _LOCALE_VARIABLES
    for var in _LOCALE_VARIABLES:
        monkeypatch.setenv (var, "C")

    assert run (tmp_path, database, "-l", language, "acme-1") == 0
    assert (tmp_path / "ppd" / "acme-1.ppd").exists ()

def test_driver_not_found(tmp_path, database, capsys):
    assert run (tmp_path, database, "acme-1", "nosuch", "acme-2") == 1
    assert "Driver not found: nosuch" in capsys.readouterr ().out
    assert not (tmp_path / "ppd" / "acme-2.ppd").exists ()

def test_stops_on_first_failure(tmp_path, database):
    (tmp_path / "ppd" / "acme-1.ppd").mkdir (parents=True)
    assert run (tmp_path, database) == 1
    assert not (tmp_path / "ppd" / "acme-2.ppd").exists ()

def test_bad_database(tmp_path, capsys):
    with pytest.raises (SystemExit) as e:
        main (["-d", str (tmp_path / "missing.xml"), "-M"])

    assert e.value.code == 1
    assert "cannot load printer drivers" in capsys.readouterr ().err
