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

"""
Numeric STP options: colour and tone adjustments offered as PPD
choices in thousandths.
"""

from collections import namedtuple

__all__ = ['NumericOption',
           'STEP',
           'stp_options',
           'choice_count',
           'choices']

def N_ (x):
    return x

NumericOption = namedtuple ('NumericOption',
                            ['name', 'text', 'low', 'high', 'defval', 'step'])

STEP = 50

# Monochrome drivers only get the first four.
_STP_OPTIONS = [
    ("stpBrightness",   N_("Brightness"),   'brightness'),
    ("stpContrast",     N_("Contrast"),     'contrast'),
    ("stpGamma",        N_("Gamma"),        'gamma'),
    ("stpDensity",      N_("Density"),      'density'),
    ("stpCyan",         N_("Cyan"),         'cyan'),
    ("stpMagenta",      N_("Magenta"),      'magenta'),
    ("stpYellow",       N_("Yellow"),       'yellow'),
    ("stpSaturation",   N_("Saturation"),   'saturation'),
    ]

def _thousandths (x):
    return int (1000 * x)

def stp_options (lower, upper, defaults):
    """
    Build the numeric option table from the driver library's
    minimum, maximum and default settings.

    @param lower: minimum settings
    @type lower: dict, setting name to float
    @param upper: maximum settings
    @type upper: dict
    @param defaults: default settings
    @type defaults: dict
    @returns: tuple of NumericOption, in PPD order
    """
    table = []
    for name, text, setting in _STP_OPTIONS:
        table.append (NumericOption (name, text,
                                     _thousandths (lower[setting]),
                                     _thousandths (upper[setting]),
                                     _thousandths (defaults[setting]),
                                     STEP))

    return tuple (table)

def choice_count (option):
    if option.high < option.low:
        return 0

    return (option.high - option.low) // option.step + 1

def choices (option):
    """
    Yield (value, label) for each choice, low to high inclusive.
    """
    for value in range (option.low, option.high + 1, option.step):
        yield (value, "%.3f" % (value * 0.001))
