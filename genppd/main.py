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

import getopt
import sys

import genppd
from . import config
from . import langs
from .debug import PROGRAM_NAME, debugprint, fatal, set_debugging
from .drivers import DriverDatabase, DriverDatabaseError
from .options import stp_options
from .ppdwriter import SKIPPED_DRIVERS, ppd_filename, write_ppd

def show_usage ():
    print ("Usage: %s [-c localedir] "
           "[-l locale] [-p prefix] [-q] [-v] [-z|-Z] [-C] models...\n"
           "       %s -L [-c localedir]\n"
           "       %s -M [-v]\n"
           "       %s -h\n"
           "       %s -V\n" % ((PROGRAM_NAME,) * 5))

def show_help ():
    print ("Generate gimp-print PPD files for use with CUPS\n\n")
    show_usage ()
    print ("\nExamples: LANG=de_DE %s -p ppd -c /usr/share/locale\n"
           "          %s -L -c /usr/share/locale\n"
           "          %s -M -v\n\n"
           "Commands:\n"
           "  -h            Show this help message.\n"
           "  -L            List available translations (message catalogs).\n"
           "  -M            List available printer models.\n"
           "  -V            Show version information and defaults.\n"
           "  The default is to output PPDs.\n"
           "Options:\n"
           "  -c localedir  Use localedir as the base directory for locale data.\n"
           "  -l locale     Output PPDs translated with messages for locale.\n"
           "  -p prefix     Output PPDs in directory prefix.\n"
           "  -d database   Read printer drivers from database.\n"
           "  -z            Write gzip-compressed PPDs (.ppd.gz).\n"
           "  -Z            Write uncompressed PPDs (.ppd).\n"
           "  -C            Check each PPD with libcups after writing it.\n"
           "  -q            Quiet mode.\n"
           "  -v            Verbose mode.\n"
           "  --debug       Print debugging messages.\n"
           "models:\n"
           "  A list of printer models, either the driver or quoted full name.\n"
           % ((PROGRAM_NAME,) * 3))

def show_version ():
    print ("%s version %s, "
           "Copyright (c) 1993-2001 by Easy Software Products.\n" %
           (PROGRAM_NAME, config.VERSION))
    print ("CUPS PPD PostScript Level:     %d" % config.CUPS_PPD_PS_LEVEL)
    print ("Default PPD location (prefix): %s" % config.GENPPD_PPD_PREFIX)
    print ("Default base locale directory: %s\n" % config.localedir)
    print ("This program is free software; you can redistribute it and/or\n"
           "modify it under the terms of the GNU General Public License as\n"
           "published by the Free Software Foundation; either version 2 of\n"
           "the License, or (at your option) any later version.\n"
           "\n"
           "This program is distributed in the hope that it will be useful,\n"
           "but WITHOUT ANY WARRANTY; without even the implied warranty of\n"
           "MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the\n"
           "GNU General Public License for more details.")

def printmodels (db, verbose):
    for printer in db.printers ():
        if printer.driver in SKIPPED_DRIVERS:
            continue

        if verbose:
            print ("%-20s%s" % (printer.driver, printer.long_name))
        else:
            print (printer.driver)

def load_database (filename):
    db = DriverDatabase ()
    try:
        db.load (filename)
    except DriverDatabaseError as e:
        fatal ("cannot load printer drivers from %s: %s" % (e.filename,
                                                           e.reason))

    return db

def write_one (printer, prefix, verbose, table, compress, check):
    status = write_ppd (printer, prefix, table, verbose=verbose,
                        compress=compress)
    if status == 0 and check and printer.driver not in SKIPPED_DRIVERS:
        from . import ppdcheck
        status = ppdcheck.check_ppd (ppd_filename (prefix, printer.driver,
                                                   compress))

    return status

def main (argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        opts, models = getopt.gnu_getopt (argv, 'hvqc:p:l:d:LMVzZC',
                                          ['debug'])
    except getopt.GetoptError:
        show_usage ()
        return 1

    prefix = config.GENPPD_PPD_PREFIX
    localedir = config.localedir
    database = config.DRIVER_DATABASE
    language = None
    verbose = False
    compress = config.COMPRESS_PPDS
    check = False
    opt_printlangs = False
    opt_printmodels = False
    for opt, optarg in opts:
        if opt == "-h":
            show_help ()
            return 0
        elif opt == "-V":
            show_version ()
            return 0
        elif opt == "-v":
            verbose = True
        elif opt == "-q":
            verbose = False
        elif opt == "-c":
            localedir = optarg
            debugprint ("localedir: %s" % localedir)
        elif opt == "-p":
            prefix = optarg
            debugprint ("prefix: %s" % prefix)
        elif opt == "-l":
            language = optarg
        elif opt == "-d":
            database = optarg
        elif opt == "-L":
            opt_printlangs = True
        elif opt == "-M":
            opt_printmodels = True
        elif opt == "-z":
            compress = True
        elif opt == "-Z":
            compress = False
        elif opt == "-C":
            check = True
        elif opt == "--debug":
            set_debugging (True)
            genppd.set_debugprint_fn (debugprint)

    if opt_printlangs:
        langs.printlangs (langs.getlangs (localedir))
        return 0

    db = load_database (database)
    if opt_printmodels:
        printmodels (db, verbose)
        return 0

    if check:
        try:
            import cups
        except ImportError:
            fatal ("-C needs pycups (the 'cups' Python module)")

    table = stp_options (db.minimum_settings (),
                         db.maximum_settings (),
                         db.default_settings ())

    langs.set_language (language)
    langs.bind_catalog (localedir, language)

    if models:
        for model in models:
            printer = db.get_printer_by_driver (model)
            if not printer:
                printer = db.get_printer_by_long_name (model)

            if not printer:
                print ("Driver not found: %s" % model)
                return 1

            if write_one (printer, prefix, verbose, table, compress, check):
                return 1
    else:
        for i in range (db.known_printers ()):
            printer = db.get_printer_by_index (i)
            if (printer and
                write_one (printer, prefix, verbose, table, compress, check)):
                return 1

    if not verbose:
        print (" done.", file=sys.stderr)

    return 0

def run ():
    sys.exit (main ())

if __name__ == "__main__":
    run ()
