'''
vlogging
========

Everything from the standard logging module, plus a LOUD level that sits
below DEBUG for the really chatty messages, like every fold step of the tree
or every segment the Japanese segmenter produces.

Loggers from get_logger have a `loud` method. The countstat command line
takes --loud, --debug, --warning, --quiet, and --silent to pick the level of
the stderr handler, see main_decorator.
'''
from logging import *

_getLogger = getLogger

# The root logger has no level of its own so that each handler decides what
# it wants to see. Otherwise the default WARNING on the root would keep DEBUG
# messages away from a handler that asked for them.
root = getLogger()
root.setLevel(NOTSET)

LOUD = 1
SILENT = 99999999999

addLevelName(LOUD, 'LOUD')

LEVEL_ARGUMENTS = {
    '--loud': LOUD,
    '--debug': DEBUG,
    '--warning': WARNING,
    '--quiet': ERROR,
    '--silent': SILENT,
}

def add_loud(log):
    def loud(self, message, *args, **kwargs):
        if self.isEnabledFor(LOUD):
            self._log(LOUD, message, args, **kwargs)

    log.loud = loud.__get__(log, log.__class__)

def basic_config(level):
    '''
    Put a stderr handler with the given level on the root logger, unless the
    root already has handlers.
    '''
    if root.handlers:
        return

    handler = StreamHandler()
    handler.setFormatter(Formatter('{levelname}:{name}:{message}', style='{'))
    handler.setLevel(level)
    root.addHandler(handler)

def get_level_by_argv(argv):
    '''
    Return the level chosen by the first of LEVEL_ARGUMENTS found in argv, or
    INFO if there is none, along with a copy of argv that has all of those
    arguments taken out so the argparser never sees them.
    '''
    level = INFO
    remaining = []
    found = False
    for arg in argv:
        if arg in LEVEL_ARGUMENTS:
            if not found:
                level = LEVEL_ARGUMENTS[arg]
                found = True
            continue
        remaining.append(arg)
    return (level, remaining)

def get_level_by_name(name):
    '''
    Return the integer level for a name like "debug" or "LOUD", for reading
    levels out of config files. Integers are returned unchanged.
    '''
    if isinstance(name, int):
        return name

    if not isinstance(name, str):
        raise TypeError(f'name should be str, not {type(name)}.')

    levels = {
        'SILENT': SILENT,
        'CRITICAL': CRITICAL,
        'ERROR': ERROR,
        'WARN': WARNING,
        'WARNING': WARNING,
        'INFO': INFO,
        'DEBUG': DEBUG,
        'LOUD': LOUD,
        'NOTSET': NOTSET,
    }

    value = levels.get(name.upper())
    if value is None:
        raise ValueError(f'{name} is not a known level.')

    return value

def get_logger(name=None, main_fallback=None):
    '''
    Return the logger for `name` with the loud method added.

    When a module is run directly its __name__ is "__main__", which looks
    odd in the log output, so main_fallback is used as the name instead.
    '''
    if name == '__main__' and main_fallback is not None:
        name = main_fallback
    log = _getLogger(name)
    add_loud(log)
    return log

getLogger = get_logger

def main_decorator(main):
    '''
    Decorate a main(argv) function so that the log level arguments are taken
    out of argv and used to set up the stderr handler before main runs.
    '''
    def wrapped(argv):
        (level, argv) = get_level_by_argv(argv)
        basic_config(level)
        return main(argv)
    return wrapped
