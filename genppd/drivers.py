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
import xml.etree.ElementTree
from .papersizes import get_papersize_by_name, get_papersize_text
from . import _debugprint

__all__ = ['OUTPUT_GRAY',
           'OUTPUT_COLOR',
           'Parameter',
           'Printer',
           'DriverDatabase',
           'DriverDatabaseError']

OUTPUT_GRAY = 0
OUTPUT_COLOR = 1

# Settings understood by the driver library, with their ranges.
SETTINGS = ['brightness', 'contrast', 'gamma', 'density',
            'cyan', 'magenta', 'yellow', 'saturation']

_MINIMUM_SETTINGS = { 'brightness': 0.0, 'contrast': 0.0,
                      'gamma': 0.1, 'density': 0.1,
                      'cyan': 0.0, 'magenta': 0.0, 'yellow': 0.0,
                      'saturation': 0.0 }
_MAXIMUM_SETTINGS = { 'brightness': 2.0, 'contrast': 4.0,
                      'gamma': 4.0, 'density': 2.0,
                      'cyan': 4.0, 'magenta': 4.0, 'yellow': 4.0,
                      'saturation': 9.0 }
_DEFAULT_SETTINGS = dict.fromkeys (SETTINGS, 1.0)

Parameter = namedtuple ('Parameter', ['name', 'text'])

class DriverDatabaseError(Exception):
    def __init__ (self, filename, reason):
        Exception.__init__ (self, "%s: %s" % (filename, reason))
        self.filename = filename
        self.reason = reason

class Printer:
    """
    A printer driver descriptor.

    Queries that depend on the current option selection take a print
    vars dict, as returned by get_printvars(), with the selected
    PageSize, Resolution and so on.
    """

    def __init__ (self, driver, long_name, model=0, output_type=OUTPUT_GRAY,
                  parameters=None, defaults=None, margins=(0, 0, 0, 0),
                  page_margins=None, size_limit=(0, 0, 0, 0),
                  resolutions=None):
        """
        @param driver: short driver key, e.g. 'escp2-740'
        @param long_name: display name, manufacturer first
        @param parameters: dict of category name to list of Parameter
        @param defaults: dict of category name to default key
        @param margins: hardware (left, right, bottom, top) in points
        @param page_margins: dict of PageSize key to margins, for
        sizes the device handles differently
        @param size_limit: (max_width, max_height, min_width,
        min_height) for custom sizes
        @param resolutions: dict of Resolution key to (xdpi, ydpi)
        """
        self.driver = driver
        self.long_name = long_name
        self.model = model
        self.output_type = output_type
        self._parameters = parameters or {}
        self._defaults = defaults or {}
        self._margins = margins
        self._page_margins = page_margins or {}
        self._size_limit = size_limit
        self._resolutions = resolutions or {}

    def __repr__ (self):
        return "<Printer %s>" % self.driver

    def is_color (self):
        return self.output_type == OUTPUT_COLOR

    def get_printvars (self):
        v = {}
        for name in self._parameters.keys ():
            default = self.get_default_parameter (None, name)
            if default is not None:
                v[name] = default

        return v

    def get_parameters (self, v, name):
        return list (self._parameters.get (name, []))

    def get_default_parameter (self, v, name):
        default = self._defaults.get (name)
        if default is not None:
            return default

        params = self._parameters.get (name)
        if params:
            return params[0].name

        return None

    def get_size_limit (self, v):
        return self._size_limit

    def get_media_size (self, v):
        (max_width, max_height, min_width, min_height) = self._size_limit
        width = height = 0
        papersize = get_papersize_by_name (v.get ("PageSize"))
        if papersize:
            width = papersize.width
            height = papersize.height

        # Variable dimensions take the largest the device allows.
        if width <= 0:
            width = max_width
        if height <= 0:
            height = max_height

        return (width, height)

    def get_imageable_area (self, v):
        """
        Return (left, right, bottom, top) for the selected page size.

        left and right are measured from the left edge; bottom and
        top from the top edge.
        """
        (width, height) = self.get_media_size (v)
        (left, right, bottom, top) = self._page_margins.get (v.get ("PageSize"),
                                                            self._margins)
        return (left, width - right, height - bottom, top)

    def describe_resolution (self, v):
        return self._resolutions.get (v.get ("Resolution"), (-1, -1))

class DriverDatabase:
    """
    The known printer drivers, in database order.
    """

    def __init__ (self):
        self._printers = []
        self._minimum = dict (_MINIMUM_SETTINGS)
        self._maximum = dict (_MAXIMUM_SETTINGS)
        self._default = dict (_DEFAULT_SETTINGS)

    def load (self, filename):
        """
        Load printer drivers from an XML file.
        """
        try:
            with open (filename, "rb") as f:
                root = xml.etree.ElementTree.XML (f.read ())
        except OSError as e:
            raise DriverDatabaseError (filename, e.strerror)
        except xml.etree.ElementTree.ParseError as e:
            raise DriverDatabaseError (filename, str (e))

        try:
            self._load_root (root)
        except (KeyError, ValueError) as e:
            raise DriverDatabaseError (filename,
                                       "bad printer entry (%s)" % e)

        _debugprint ("%s: loaded %d drivers" % (filename,
                                               len (self._printers)))

    def _load_root (self, root):
        common = {}
        printers = []
        for child in root:
            if child.tag == "settings":
                for snapshot in child:
                    if snapshot.tag == "minimum":
                        self._minimum.update (self._settings (snapshot))
                    elif snapshot.tag == "maximum":
                        self._maximum.update (self._settings (snapshot))
                    elif snapshot.tag == "default":
                        self._default.update (self._settings (snapshot))
            elif child.tag == "common":
                for param in child:
                    if param.tag == "parameter":
                        common[param.attrib["name"]] = param
            elif child.tag == "printer":
                printers.append (child)

        for printer in printers:
            self._printers.append (self._load_printer (printer, common))

    def _settings (self, snapshot):
        settings = {}
        for name, value in snapshot.attrib.items ():
            if name in SETTINGS:
                settings[name] = float (value)

        return settings

    def _margins (self, elem):
        return (int (elem.get ("left", 0)), int (elem.get ("right", 0)),
                int (elem.get ("bottom", 0)), int (elem.get ("top", 0)))

    def _load_printer (self, printer, common):
        driver = printer.attrib["driver"]
        long_name = printer.findtext ("long-name", driver).strip ()
        model = int (printer.get ("model", 0))
        if printer.get ("color", "false").lower () in ("true", "yes", "1"):
            output_type = OUTPUT_COLOR
        else:
            output_type = OUTPUT_GRAY

        params = dict (common)
        margins = (0, 0, 0, 0)
        page_margins = {}
        size_limit = (0, 0, 0, 0)
        for child in printer:
            if child.tag == "parameter":
                params[child.attrib["name"]] = child
            elif child.tag == "margins":
                margins = self._margins (child)
            elif child.tag == "page-margins":
                page_margins[child.attrib["page-size"]] = self._margins (child)
            elif child.tag == "size-limit":
                size_limit = (int (child.attrib["max-width"]),
                              int (child.attrib["max-height"]),
                              int (child.attrib["min-width"]),
                              int (child.attrib["min-height"]))

        parameters = {}
        defaults = {}
        resolutions = {}
        for name, param in params.items ():
            choices = []
            seen = set ()
            for choice in param:
                if choice.tag != "choice":
                    continue

                key = choice.attrib["name"]
                if key in seen:
                    raise ValueError ("duplicate choice %s for %s in %s" %
                                      (key, name, driver))
                seen.add (key)

                text = (choice.text or "").strip ()
                if not text:
                    if name == "PageSize":
                        text = get_papersize_text (key)
                    else:
                        text = key

                choices.append (Parameter (key, text))
                if name == "Resolution" and "xdpi" in choice.attrib:
                    resolutions[key] = (int (choice.attrib["xdpi"]),
                                        int (choice.get ("ydpi",
                                                         choice.attrib["xdpi"])))

            parameters[name] = choices
            if param.get ("default"):
                defaults[name] = param.get ("default")

        return Printer (driver, long_name, model=model,
                        output_type=output_type,
                        parameters=parameters, defaults=defaults,
                        margins=margins, page_margins=page_margins,
                        size_limit=size_limit, resolutions=resolutions)

    def printers (self):
        return list (self._printers)

    def known_printers (self):
        return len (self._printers)

    def get_printer_by_index (self, index):
        try:
            return self._printers[index]
        except IndexError:
            return None

    def get_printer_by_driver (self, driver):
        for printer in self._printers:
            if printer.driver == driver:
                return printer

        return None

    def get_printer_by_long_name (self, long_name):
        for printer in self._printers:
            if printer.long_name == long_name:
                return printer

        return None

    def minimum_settings (self):
        return dict (self._minimum)

    def maximum_settings (self):
        return dict (self._maximum)

    def default_settings (self):
        return dict (self._default)
