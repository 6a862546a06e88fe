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

__all__  = ['set_debugprint_fn',
            'DriverDatabase', 'DriverDatabaseError', 'Parameter', 'Printer',
            'NumericOption', 'stp_options',
            'PaperSize', 'get_papersize_by_name',
            'write_ppd',
            'drivers',
            'options',
            'papersizes',
            'ppdwriter']

def _no_debug (x):
    return

_debugprint_fn = _no_debug
def _debugprint (x):
    _debugprint_fn (x)

def set_debugprint_fn (debugprint):
    """
    Set debugging hook.

    @param debugprint: function to print debug output
    @type debugprint: fn (str) -> None
    """
    global _debugprint_fn
    _debugprint_fn = debugprint

from .drivers import				\
    DriverDatabase,				\
    DriverDatabaseError,			\
    Parameter,					\
    Printer

from .options import				\
    NumericOption,				\
    stp_options

from .papersizes import				\
    PaperSize,					\
    get_papersize_by_name

from .ppdwriter import write_ppd

from . import drivers
from . import options
from . import papersizes
from . import ppdwriter
