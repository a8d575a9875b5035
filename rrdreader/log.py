import logging
import logging.handlers
import os
import sys

from twisted.python import log as twisted_log

LOGGER_NAME = "rrdreader"


class Logging():
    '''
    This class provides generic logging facilities for the reader.
    Messages go through the Twisted log and end up in the Python logging
    module once start() has been called.
    '''

    def __init__(self, name=LOGGER_NAME):
        '''
        @param name: the system name attached to each message, also used
        as the name of the logfile
        '''
        self.name = name
        self.logger = logging.getLogger(LOGGER_NAME)
        self.observer = None
        self.handlers = []

    def start(self, config):
        '''
        Start forwarding Twisted log events to the Python logging module.
        @param config: a Config instance, its general section holds the
        log path, size, count and console settings.
        '''
        if self.observer is not None:
            return

        self.observer = twisted_log.PythonLoggingObserver(loggerName=LOGGER_NAME)
        self.observer.start()

        formatter = logging.Formatter('%(asctime)s %(levelname)s: %(message)s')

        if config.general.logpath:
            log_handler = logging.handlers.RotatingFileHandler(
                filename=os.path.join(config.general.logpath, "%s.log" % self.name),
                maxBytes=config.general.logsize * 1024,
                backupCount=config.general.logcount)
            self.handlers.append(log_handler)

        if config.general.logconsole:
            console_handler = logging.StreamHandler(sys.stderr)
            self.handlers.append(console_handler)

        for handler in self.handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        self.set_level(config.general.loglevel)

    def stop(self):
        if self.observer is not None:
            self.observer.stop()
            self.observer = None
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []

    def set_level(self, level):
        '''
        This function allows you to set the level of logging.
        @param level: the level of logging, valid arguments are debug, info,
        warning, error, critical or none.
        '''
        if level == 'debug':
            self.logger.setLevel(logging.DEBUG)
        elif level == 'warning':
            self.logger.setLevel(logging.WARNING)
        elif level == 'error':
            self.logger.setLevel(logging.ERROR)
        elif level == 'critical':
            self.logger.setLevel(logging.CRITICAL)
        elif level == 'info':
            self.logger.setLevel(logging.INFO)
        elif level == 'none':
            # above every level, nothing gets through
            self.logger.setLevel(logging.CRITICAL + 1)

    def error(self, message):
        twisted_log.msg(message, logLevel=logging.ERROR, system=self.name)

    def warning(self, message):
        twisted_log.msg(message, logLevel=logging.WARNING, system=self.name)

    def info(self, message):
        twisted_log.msg(message, logLevel=logging.INFO, system=self.name)

    def debug(self, message):
        twisted_log.msg(message, logLevel=logging.DEBUG, system=self.name)

    def critical(self, message):
        twisted_log.msg(message, logLevel=logging.CRITICAL, system=self.name)
