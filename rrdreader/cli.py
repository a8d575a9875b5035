import argparse
import logging
import sys

from rrdreader.config import Config, find_config_file
from rrdreader.exceptions import ConfigError, ConfigFileNotFound, InvalidRRD
from rrdreader.log import Logging
from rrdreader.rrd import RRDFile


def load_config(path=None):
    '''
    Use the given configuration file, or the first one found in the known
    locations. Without any, the built in defaults apply.
    '''
    if path is None:
        try:
            path = find_config_file()
        except ConfigFileNotFound:
            path = None
    return Config(path)


def main(argv=None, out=None):
    out = out or sys.stdout
    parser = argparse.ArgumentParser(
        description="Print the structure of an RRD file.")
    parser.add_argument("-c", "--config", help="configuration file")
    parser.add_argument("-l", "--loglevel",
                        choices=("debug", "info", "warning", "error",
                                 "critical", "none"),
                        help="override the configured log level")
    parser.add_argument("filename", help="RRD file to read")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as error:
        print("Bad configuration: %s" % error, file=sys.stderr)
        return 1
    if args.loglevel:
        config.general.loglevel = args.loglevel

    log = Logging()
    log.start(config)
    try:
        try:
            rrd = RRDFile.fromPath(args.filename)
        except (InvalidRRD, IOError) as error:
            log.error("Cannot read %s: %s" % (args.filename, error))
            # the console handler already shows it when error is enabled
            if not (config.general.logconsole and
                    log.logger.isEnabledFor(logging.ERROR)):
                print("%s: %s" % (args.filename, error), file=sys.stderr)
            return 1
        print("filename = %s" % args.filename, file=out)
        rrd.printInfo(out)
    finally:
        log.stop()
    return 0

