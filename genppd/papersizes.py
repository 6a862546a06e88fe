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

from collections import namedtuple
from gettext import gettext as _

__all__ = ['PaperSize',
           'get_papersize_by_name',
           'get_papersizes']

def N_ (x):
    return x

PaperSize = namedtuple ('PaperSize', ['name', 'text', 'width', 'height'])

# Nominal sizes in points (1/72 inch).  Zero means "chosen at print time".
_PAPERSIZES = [
    # US
    PaperSize ("Letter",        N_("Letter"),                 612,  792),
    PaperSize ("Legal",         N_("Legal"),                  612, 1008),
    PaperSize ("Tabloid",       N_("Tabloid"),                792, 1224),
    PaperSize ("Executive",     N_("Executive"),              522,  756),
    PaperSize ("Statement",     N_("Manual"),                 396,  612),
    PaperSize ("w576h792",      N_("8x11"),                   576,  792),
    PaperSize ("w612h936",      N_("Letter Extra"),           612,  936),
    PaperSize ("SuperB",        N_("13x19"),                  936, 1368),
    PaperSize ("w288h432",      N_("4x6"),                    288,  432),
    PaperSize ("w360h504",      N_("5x7"),                    360,  504),
    PaperSize ("w576h720",      N_("8x10"),                   576,  720),
    PaperSize ("Postcard",      N_("Postcard"),               283,  416),

    # ISO A series
    PaperSize ("A0",            N_("A0"),                    2384, 3370),
    PaperSize ("A1",            N_("A1"),                    1684, 2384),
    PaperSize ("A2",            N_("A2"),                    1191, 1684),
    PaperSize ("A3",            N_("A3"),                     842, 1191),
    PaperSize ("A4",            N_("A4"),                     595,  842),
    PaperSize ("A5",            N_("A5"),                     420,  595),
    PaperSize ("A6",            N_("A6"),                     297,  420),
    PaperSize ("A3+",           N_("A3+"),                    935, 1377),

    # ISO B series
    PaperSize ("ISOB4",         N_("B4 ISO"),                 709, 1001),
    PaperSize ("ISOB5",         N_("B5 ISO"),                 499,  709),

    # JIS B series
    PaperSize ("B4",            N_("B4 JIS"),                 729, 1032),
    PaperSize ("B5",            N_("B5 JIS"),                 516,  729),
    PaperSize ("B6",            N_("B6 JIS"),                 363,  516),

    # Envelopes
    PaperSize ("Env10",         N_("Commercial 10 Envelope"), 297,  684),
    PaperSize ("EnvDL",         N_("DL Envelope"),            312,  624),
    PaperSize ("EnvC5",         N_("C5 Envelope"),            459,  649),
    PaperSize ("EnvC6",         N_("C6 Envelope"),            323,  459),
    PaperSize ("EnvMonarch",    N_("Monarch Envelope"),       279,  540),

    # Roll paper and friends
    PaperSize ("w288h0",        N_("4 inch roll"),            288,    0),
    PaperSize ("Custom",        N_("Custom"),                   0,    0),
    ]

_PAPERSIZES_BY_NAME = {}
for papersize in _PAPERSIZES:
    _PAPERSIZES_BY_NAME[papersize.name] = papersize

def get_papersize_by_name (name):
    """
    Look up the nominal dimensions of a named page size.

    @param name: PageSize key, e.g. 'A4'
    @type name: string
    @returns: PaperSize, or None if the name is not known
    """
    return _PAPERSIZES_BY_NAME.get (name)

def get_papersizes ():
    return list (_PAPERSIZES)

def get_papersize_text (name):
    papersize = get_papersize_by_name (name)
    if papersize is None:
        return name

    return _(papersize.text)
