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

import gettext
import locale
import os

from . import config
from .debug import debugprint, fatal

_LOCALE_VARIABLES = ["LC_CTYPE", "LC_COLLATE", "LC_TIME", "LC_NUMERIC",
                     "LC_MONETARY", "LC_MESSAGES", "LC_ALL", "LANG",
                     "LANGUAGE"]

def checkcat (localedir, lang):
    """
    Return True if a message catalog exists for lang.
    """
    catpath = os.path.join (localedir, lang, config.CATALOG)
    return os.path.isfile (catpath)

def getlangs (localedir=config.localedir):
    """
    List the languages with a message catalog under localedir.

    @returns: sorted list of language names, or None if localedir
    cannot be read
    """
    try:
        entries = os.listdir (localedir)
    except OSError as e:
        debugprint ("Cannot read %s: %s" % (localedir, e.strerror))
        return None

    return sorted ([x for x in entries if checkcat (localedir, x)])

def printlangs (langs):
    if langs:
        for lang in langs:
            print (lang)

def set_language (language):
    if language:
        for var in _LOCALE_VARIABLES:
            os.environ.pop (var, None)

        os.environ["LC_ALL"] = language
        os.environ["LANG"] = language

    try:
        locale.setlocale (locale.LC_ALL, "")
    except locale.Error:
        debugprint ("Unable to set locale %s" % language)

def bind_catalog (localedir=config.localedir, language=None):
    """
    Bind and select the message catalog used for PPD strings.

    A language without a catalog gives untranslated output; only a
    failure to bind the text domain is fatal.
    """
    if language and gettext.find (config.PACKAGE, localedir,
                                  languages=[language]) is None:
        debugprint ("no message catalog for %s under %s" % (language,
                                                            localedir))

    if gettext.bindtextdomain (config.PACKAGE, localedir) is None:
        fatal ("cannot bind message catalog %s to %s" % (config.PACKAGE,
                                                         localedir))
    debugprint ("bound textdomain: %s under %s" % (config.PACKAGE,
                                                  localedir))
    if not gettext.textdomain (config.PACKAGE):
        fatal ("cannot select message catalog %s" % config.PACKAGE)
    debugprint ("textdomain set: %s" % config.PACKAGE)
