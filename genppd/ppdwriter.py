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

import errno
import gzip
import os
import sys
from collections import namedtuple
from gettext import gettext as _

from . import _debugprint
from . import config
from .debug import fatal
from .options import choices
from .papersizes import get_papersize_by_name

__all__ = ['Paper',
           'SKIPPED_DRIVERS',
           'get_papers',
           'open_ppd_file',
           'ppd_filename',
           'write_ppd']

PPDEXT = ".ppd"
PPDEXT_GZ = ".ppd.gz"

# Generic PostScript pass-through drivers need no PPD of their own.
SKIPPED_DRIVERS = ["ps", "ps2"]

# cups/raster.h
CUPS_CSPACE_W = 0
CUPS_CSPACE_RGB = 1
CUPS_CSPACE_K = 3
CUPS_CSPACE_CMYK = 6
CUPS_ORDER_CHUNKED = 0

Paper = namedtuple ('Paper', ['name', 'text', 'width', 'height',
                              'left', 'right', 'bottom', 'top'])

_FONTS = [
    ("AvantGarde-Book", "Standard", "(001.006S)", "Standard"),
    ("AvantGarde-BookOblique", "Standard", "(001.006S)", "Standard"),
    ("AvantGarde-Demi", "Standard", "(001.007S)", "Standard"),
    ("AvantGarde-DemiOblique", "Standard", "(001.007S)", "Standard"),
    ("Bookman-Demi", "Standard", "(001.004S)", "Standard"),
    ("Bookman-DemiItalic", "Standard", "(001.004S)", "Standard"),
    ("Bookman-Light", "Standard", "(001.004S)", "Standard"),
    ("Bookman-LightItalic", "Standard", "(001.004S)", "Standard"),
    ("Courier", "Standard", "(002.004S)", "Standard"),
    ("Courier-Bold", "Standard", "(002.004S)", "Standard"),
    ("Courier-BoldOblique", "Standard", "(002.004S)", "Standard"),
    ("Courier-Oblique", "Standard", "(002.004S)", "Standard"),
    ("Helvetica", "Standard", "(001.006S)", "Standard"),
    ("Helvetica-Bold", "Standard", "(001.007S)", "Standard"),
    ("Helvetica-BoldOblique", "Standard", "(001.007S)", "Standard"),
    ("Helvetica-Narrow", "Standard", "(001.006S)", "Standard"),
    ("Helvetica-Narrow-Bold", "Standard", "(001.007S)", "Standard"),
    ("Helvetica-Narrow-BoldOblique", "Standard", "(001.007S)", "Standard"),
    ("Helvetica-Narrow-Oblique", "Standard", "(001.006S)", "Standard"),
    ("Helvetica-Oblique", "Standard", "(001.006S)", "Standard"),
    ("NewCenturySchlbk-Bold", "Standard", "(001.009S)", "Standard"),
    ("NewCenturySchlbk-BoldItalic", "Standard", "(001.007S)", "Standard"),
    ("NewCenturySchlbk-Italic", "Standard", "(001.006S)", "Standard"),
    ("NewCenturySchlbk-Roman", "Standard", "(001.007S)", "Standard"),
    ("Palatino-Bold", "Standard", "(001.005S)", "Standard"),
    ("Palatino-BoldItalic", "Standard", "(001.005S)", "Standard"),
    ("Palatino-Italic", "Standard", "(001.005S)", "Standard"),
    ("Palatino-Roman", "Standard", "(001.005S)", "Standard"),
    ("Symbol", "Special", "(001.007S)", "Special"),
    ("Times-Bold", "Standard", "(001.007S)", "Standard"),
    ("Times-BoldItalic", "Standard", "(001.009S)", "Standard"),
    ("Times-Italic", "Standard", "(001.007S)", "Standard"),
    ("Times-Roman", "Standard", "(001.007S)", "Standard"),
    ("ZapfChancery-MediumItalic", "Standard", "(001.007S)", "Standard"),
    ("ZapfDingbats", "Special", "(001.004S)", "Standard"),
    ]

def ppd_filename (prefix, driver, compress=config.COMPRESS_PPDS):
    if compress:
        ext = PPDEXT_GZ
    else:
        ext = PPDEXT

    return os.path.join (prefix, driver + ext)

def open_ppd_file (filename, compress=config.COMPRESS_PPDS):
    """
    Open a PPD for writing as a text stream, gzip-compressed or not.
    """
    if compress:
        return gzip.open (filename, "wt", encoding="utf-8")

    return open (filename, "w", encoding="utf-8")

def make_prefix (prefix):
    try:
        os.makedirs (prefix, 0o777)
    except OSError as e:
        if e.errno == errno.EEXIST and os.path.isdir (prefix):
            return

        fatal ("Cannot create directory %s: %s" % (prefix, e.strerror),
               file=sys.stdout)

def get_manufacturer (long_name):
    words = long_name.split ()
    if not words:
        return ""

    return words[0][:63]

def get_papers (printer, v):
    """
    Work out the page sizes a driver offers.

    @param printer: driver descriptor
    @param v: print vars; PageSize is changed while probing
    @returns: (list of Paper in driver order, variable_sizes)
    """
    papers = []
    variable_sizes = False
    for opt in printer.get_parameters (v, "PageSize"):
        if opt.name == "Custom":
            variable_sizes = True
            continue

        papersize = get_papersize_by_name (opt.name)
        if not papersize:
            _debugprint ("%s: unable to lookup size %s" % (printer.driver,
                                                          opt.name))
            continue

        if papersize.width <= 0 or papersize.height <= 0:
            continue

        # The driver may report a different size or margins for this
        # particular selection.
        v["PageSize"] = opt.name
        (width, height) = printer.get_media_size (v)
        (left, right, bottom, top) = printer.get_imageable_area (v)
        papers.append (Paper (opt.name, opt.text, width, height,
                              left, right, height - bottom, height - top))

    return (papers, variable_sizes)

def _default (defopt):
    if defopt is None:
        return ""

    return defopt

def write_header (fp, printer):
    driver = printer.driver
    long_name = printer.long_name
    manufacturer = get_manufacturer (long_name)
    version = config.VERSION

    fp.write ("*PPD-Adobe: \"4.3\"\n")
    fp.write ("*%PPD file for CUPS/GIMP-print.\n")
    fp.write ("*%Copyright 1993-2001 by Easy Software Products, "
              "All Rights Reserved.\n")
    fp.write ("*%This PPD file may be freely used and distributed "
              "under the terms of\n")
    fp.write ("*%the GNU GPL.\n")
    fp.write ("*FormatVersion:\t\"4.3\"\n")
    fp.write ("*FileVersion:\t\"%s\"\n" % version)
    # Translators: the English name of the language of this PPD,
    # e.g. "Swedish" rather than "Svenska".
    fp.write ("*LanguageVersion: %s\n" % _("English"))
    # Translators: the PPD encoding of this translation, e.g. ISOLatin1
    fp.write ("*LanguageEncoding: %s\n" % _("ISOLatin1"))
    fp.write ("*PCFileName:\t\"%s.ppd\"\n" % driver)
    fp.write ("*Manufacturer:\t\"%s\"\n" % manufacturer)
    fp.write ("*Product:\t\"(GIMP-print v%s)\"\n" % version)
    fp.write ("*ModelName:     \"%s\"\n" % driver)
    fp.write ("*ShortNickName: \"%s\"\n" % long_name)
    fp.write ("*NickName:      \"%s, CUPS+GIMP-print v%s\"\n" % (long_name,
                                                               version))
    if config.CUPS_PPD_PS_LEVEL == 2:
        fp.write ("*PSVersion:\t\"(2017.000) 705\"\n")
    else:
        fp.write ("*PSVersion:\t\"(3010.000) 705\"\n")

    fp.write ("*LanguageLevel:\t\"%d\"\n" % config.CUPS_PPD_PS_LEVEL)
    if printer.is_color ():
        fp.write ("*ColorDevice:\tTrue\n")
        fp.write ("*DefaultColorSpace: RGB\n")
    else:
        fp.write ("*ColorDevice:\tFalse\n")
        fp.write ("*DefaultColorSpace: Gray\n")

    fp.write ("*FileSystem:\tFalse\n")
    fp.write ("*LandscapeOrientation: Plus90\n")
    fp.write ("*TTRasterizer:\tType42\n")

    fp.write ("*cupsVersion:\t1.1\n")
    fp.write ("*cupsModelNumber: \"%d\"\n" % printer.model)
    fp.write ("*cupsManualCopies: True\n")
    fp.write ("*cupsFilter:\t\"application/vnd.cups-raster 100 "
              "rastertoprinter\"\n")
    if manufacturer.lower () == "epson":
        fp.write ("*cupsFilter:\t\"application/vnd.cups-command 33 "
                  "commandtoepson\"\n")

    fp.write ("\n")

def write_page_sizes (fp, papers, defopt, variable_sizes):
    defopt = _default (defopt)
    if variable_sizes:
        fp.write ("*VariableSizes: true\n\n")
    else:
        fp.write ("*VariableSizes: false\n\n")

    fp.write ("*OpenUI *PageSize: PickOne\n")
    fp.write ("*OrderDependency: 10 AnySetup *PageSize\n")
    fp.write ("*DefaultPageSize: %s\n" % defopt)
    for paper in papers:
        fp.write ("*PageSize %s/%s:\t\"<</PageSize[%d %d]"
                  "/ImagingBBox null>>setpagedevice\"\n" %
                  (paper.name, paper.text, paper.width, paper.height))
    fp.write ("*CloseUI: *PageSize\n\n")

    fp.write ("*OpenUI *PageRegion: PickOne\n")
    fp.write ("*OrderDependency: 10 AnySetup *PageRegion\n")
    fp.write ("*DefaultPageRegion: %s\n" % defopt)
    for paper in papers:
        fp.write ("*PageRegion %s/%s:\t\"<</PageRegion[%d %d]"
                  "/ImagingBBox null>>setpagedevice\"\n" %
                  (paper.name, paper.text, paper.width, paper.height))
    fp.write ("*CloseUI: *PageRegion\n\n")

    fp.write ("*DefaultImageableArea: %s\n" % defopt)
    for paper in papers:
        fp.write ("*ImageableArea %s/%s:\t\"%d %d %d %d\"\n" %
                  (paper.name, paper.text,
                   paper.left, paper.bottom, paper.right, paper.top))
    fp.write ("\n")

    fp.write ("*DefaultPaperDimension: %s\n" % defopt)
    for paper in papers:
        fp.write ("*PaperDimension %s/%s:\t\"%d %d\"\n" %
                  (paper.name, paper.text, paper.width, paper.height))
    fp.write ("\n")

def write_custom_size (fp, printer, v):
    (max_width, max_height,
     min_width, min_height) = printer.get_size_limit (v)
    v["PageSize"] = "Custom"
    (width, height) = printer.get_media_size (v)
    (left, right, bottom, top) = printer.get_imageable_area (v)

    fp.write ("*MaxMediaWidth:  \"%d\"\n" % max_width)
    fp.write ("*MaxMediaHeight: \"%d\"\n" % max_height)
    fp.write ("*HWMargins:      %d %d %d %d\n" %
              (left, height - bottom, width - right, top))
    fp.write ("*CustomPageSize True: \"pop pop pop <</PageSize[5 -2 roll]"
              "/ImagingBBox null>>setpagedevice\"\n")
    fp.write ("*ParamCustomPageSize Width:        1 points %d %d\n" %
              (min_width, max_width))
    fp.write ("*ParamCustomPageSize Height:       2 points %d %d\n" %
              (min_height, max_height))
    fp.write ("*ParamCustomPageSize WidthOffset:  3 points 0 0\n")
    fp.write ("*ParamCustomPageSize HeightOffset: 4 points 0 0\n")
    fp.write ("*ParamCustomPageSize Orientation:  5 int 0 0\n\n")

def _color_model (fp, name, text, cspace):
    fp.write ("*ColorModel %s/%s:\t\"<<"
              "/cupsColorSpace %d"
              "/cupsColorOrder %d"
              "/cupsBitsPerColor 8>>setpagedevice\"\n" %
              (name, text, cspace, CUPS_ORDER_CHUNKED))

def write_color_model (fp, printer):
    fp.write ("*OpenUI *ColorModel: PickOne\n")
    fp.write ("*OrderDependency: 10 AnySetup *ColorModel\n")
    if printer.is_color ():
        fp.write ("*DefaultColorModel: RGB\n")
    else:
        fp.write ("*DefaultColorModel: Gray\n")

    _color_model (fp, "Gray", "Grayscale", CUPS_CSPACE_W)
    _color_model (fp, "Black", "Black & White", CUPS_CSPACE_K)
    if printer.is_color ():
        _color_model (fp, "RGB", "Color", CUPS_CSPACE_RGB)
        _color_model (fp, "CMYK", "Raw CMYK", CUPS_CSPACE_CMYK)

    fp.write ("*CloseUI: *ColorModel\n\n")

def write_media_options (fp, printer, v):
    """
    MediaType and InputSlot groups, each only if the driver has any.
    """
    for (name, text, key, order) in [("MediaType", _("Media Type"),
                                      "MediaType", 10),
                                     ("InputSlot", _("Media Source"),
                                      "MediaClass", 10)]:
        opts = printer.get_parameters (v, name)
        if not opts:
            continue

        defopt = printer.get_default_parameter (v, name)
        fp.write ("*OpenUI *%s/%s: PickOne\n" % (name, text))
        fp.write ("*OrderDependency: %d AnySetup *%s\n" % (order, name))
        fp.write ("*Default%s: %s\n" % (name, _default (defopt)))
        for opt in opts:
            fp.write ("*%s %s/%s:\t\"<</%s(%s)>>setpagedevice\"\n" %
                      (name, opt.name, opt.text, key, opt.name))
        fp.write ("*CloseUI: *%s\n\n" % name)

def write_resolutions (fp, printer, v):
    opts = printer.get_parameters (v, "Resolution")
    defopt = printer.get_default_parameter (v, "Resolution")

    fp.write ("*OpenUI *Resolution/%s: PickOne\n" % _("Resolution"))
    fp.write ("*OrderDependency: 20 AnySetup *Resolution\n")
    fp.write ("*DefaultResolution: %s\n" % _default (defopt))
    for i, opt in enumerate (opts):
        v["Resolution"] = opt.name
        (xdpi, ydpi) = printer.describe_resolution (v)
        if xdpi == -1 or ydpi == -1:
            _debugprint ("%s: no DPI for resolution %s" % (printer.driver,
                                                          opt.name))
            continue

        fp.write ("*Resolution %s/%s:\t\"<</HWResolution[%d %d]"
                  "/cupsCompression %d>>setpagedevice\"\n" %
                  (opt.name, opt.text, xdpi, ydpi, i))

    fp.write ("*CloseUI: *Resolution\n\n")

def write_stp_group (fp, printer, v, stp_options):
    fp.write ("*OpenGroup: STP\n")

    fp.write ("*OpenUI *stpImageType/%s: PickOne\n" % _("Image Type"))
    fp.write ("*OrderDependency: 10 AnySetup *stpImageType\n")
    fp.write ("*DefaultstpImageType: LineArt\n")
    fp.write ("*stpImageType LineArt/%s:\t\"<</cupsRowCount 0>>"
              "setpagedevice\"\n" % _("Line Art"))
    fp.write ("*stpImageType SolidTone/%s:\t\"<</cupsRowCount 1>>"
              "setpagedevice\"\n" % _("Solid Colors"))
    fp.write ("*stpImageType Continuous/%s:\t\"<</cupsRowCount 2>>"
              "setpagedevice\"\n" % _("Photograph"))
    fp.write ("*CloseUI: *stpImageType\n\n")

    opts = printer.get_parameters (v, "DitherAlgorithm")
    defopt = printer.get_default_parameter (v, "DitherAlgorithm")
    fp.write ("*OpenUI *stpDither/%s: PickOne\n" % _("Dither Algorithm"))
    fp.write ("*OrderDependency: 10 AnySetup *stpDither\n")
    fp.write ("*DefaultstpDither: %s\n" % _default (defopt))
    for i, opt in enumerate (opts):
        fp.write ("*stpDither %s/%s: \"<</cupsRowStep %d>>setpagedevice\"\n" %
                  (opt.name, opt.text, i))
    fp.write ("*CloseUI: *stpDither\n\n")

    opts = printer.get_parameters (v, "InkType")
    if opts:
        defopt = printer.get_default_parameter (v, "InkType")
        fp.write ("*OpenUI *stpInkType/%s: PickOne\n" % _("Ink Type"))
        fp.write ("*OrderDependency: 20 AnySetup *stpInkType\n")
        fp.write ("*DefaultstpInkType: %s\n" % _default (defopt))
        for opt in opts:
            fp.write ("*stpInkType %s/%s:\t\"<</OutputType(%s)>>"
                      "setpagedevice\"\n" % (opt.name, opt.text, opt.name))
        fp.write ("*CloseUI: *stpInkType\n\n")

    if printer.is_color ():
        numeric = stp_options[:8]
    else:
        numeric = stp_options[:4]

    for option in numeric:
        fp.write ("*OpenUI *%s/%s: PickOne\n" % (option.name,
                                                 _(option.text)))
        # Always 1000, whatever option.defval says.
        fp.write ("*Default%s: 1000\n" % option.name)
        for (value, label) in choices (option):
            fp.write ("*%s %d/%s: \"\"\n" % (option.name, value, label))
        fp.write ("*CloseUI: *%s\n\n" % option.name)

    fp.write ("*CloseGroup: STP\n\n")

def write_fonts (fp):
    fp.write ("*DefaultFont: Courier\n")
    for (name, encoding, version, charset) in _FONTS:
        fp.write ("*Font %s: %s \"%s\" %s ROM\n" % (name, encoding,
                                                    version, charset))

def write_ppd (printer, prefix, stp_options, verbose=False,
               compress=config.COMPRESS_PPDS):
    """
    Write a PPD file for one driver.

    @param printer: driver descriptor
    @type printer: drivers.Printer
    @param prefix: output directory, created if missing
    @type prefix: string
    @param stp_options: numeric option table from options.stp_options()
    @param verbose: report the file name rather than a progress dot
    @param compress: write <driver>.ppd.gz instead of <driver>.ppd
    @returns: 0 on success (or nothing to do), 2 if the file could
    not be created
    """
    driver = printer.driver
    if driver in SKIPPED_DRIVERS:
        _debugprint ("Skipping %s" % driver)
        return 0

    make_prefix (prefix)
    filename = ppd_filename (prefix, driver, compress)
    try:
        fp = open_ppd_file (filename, compress)
    except OSError as e:
        print ("cups-genppd: Unable to create file \"%s\" - %s." %
               (filename, e.strerror), file=sys.stderr)
        return 2

    if verbose:
        print ("Writing %s..." % filename, file=sys.stderr)
    else:
        sys.stderr.write (".")
        sys.stderr.flush ()

    try:
        write_header (fp, printer)

        v = printer.get_printvars ()
        (papers, variable_sizes) = get_papers (printer, v)
        defopt = printer.get_default_parameter (v, "PageSize")
        write_page_sizes (fp, papers, defopt, variable_sizes)
        if variable_sizes:
            write_custom_size (fp, printer, v)

        write_color_model (fp, printer)
        write_media_options (fp, printer, v)
        write_resolutions (fp, printer, v)
        write_stp_group (fp, printer, v, stp_options)
        write_fonts (fp)

        fp.write ("\n*%%End of %s.ppd\n" % driver)
    finally:
        fp.close ()

    return 0
