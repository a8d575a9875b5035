import configparser
import os

from rrdreader.exceptions import ConfigError, ConfigFileNotFound

CONFIG_NAME = "rrdreader.conf"


def _getOpt(get, section, option, default = None):
    res = default
    try:
        res = get(section, option)
    except (configparser.NoOptionError, configparser.NoSectionError):
        if res == None:
            raise ConfigError("[%s]::%s" % (section, option))
    except ValueError:
        raise ConfigError("[%s]::%s" % (section, option))

    return res


def find_config_file():
    '''
    Locate the configuration file: /etc first, then the current working
    directory.
    '''
    config_file = os.path.join(os.sep, 'etc', CONFIG_NAME)

    if os.path.exists(config_file):
        return config_file
    elif os.path.exists(os.path.join(os.getcwd(), CONFIG_NAME)):
        return os.path.join(os.getcwd(), CONFIG_NAME)
    else:
        raise ConfigFileNotFound("/etc/ or working directory.")


class Config:

    def __init__(self, config_file=None):

        self.file_path = config_file
        parser = configparser.ConfigParser()
        if config_file is not None:
            with open(self.file_path, 'r') as f:
                parser.read_file(f)

        self.general = _ConfigGeneral(parser)


class _ConfigGeneral:

    LEVELS = ('debug', 'info', 'warning', 'error', 'critical', 'none')

    def __init__(self, parser):
        self.loglevel = _getOpt(
                parser.get, "general", "loglevel", "warning").lower()
        if self.loglevel not in self.LEVELS:
            raise ConfigError("[general]::loglevel")

        self.logpath = _getOpt(
                parser.get, "general", "logpath", "")
        if not self.logpath:
            self.logpath = None

        self.logconsole = _getOpt(
                parser.getboolean, "general", "logconsole", True)
        self.logsize = _getOpt(
                parser.getint, "general", "logsize", 1024)
        self.logcount = _getOpt(
                parser.getint, "general", "logcount", 5)
