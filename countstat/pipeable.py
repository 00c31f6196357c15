'''
Resolve command line arguments into input, and write output lines.

An argument of !i reads the lines of stdin instead, and !c reads the lines of
the clipboard, so a list of files can come from another program:

    find docs -name "*.txt" | countstat !i

Anything else is taken literally.
'''
# import pyperclip moved to stay lazy.
import sys

CLIPBOARD_STRINGS = ['!c', '!clip', '!clipboard']
INPUT_STRINGS = ['!i', '!in', '!input', '!stdin']

class PipeableException(Exception):
    pass

class NoArguments(PipeableException):
    pass

def ctrlc_return1(function):
    '''
    Decorate a main function so that ctrl+c makes it return 1 instead of
    dumping a traceback.
    '''
    def wrapped(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except KeyboardInterrupt:
            return 1
    return wrapped

def input(arg, *, skip_blank=True, strip=True):
    '''
    Return the lines of stdin if arg is one of INPUT_STRINGS, the lines of the
    clipboard if it is one of CLIPBOARD_STRINGS, and otherwise a list holding
    just the arg itself.
    '''
    if not isinstance(arg, str):
        raise TypeError(f'arg should be {str}, not {type(arg)}.')

    arg_lower = arg.lower()

    if arg_lower in INPUT_STRINGS:
        lines = sys.stdin.read().splitlines()

    elif arg_lower in CLIPBOARD_STRINGS:
        import pyperclip
        lines = pyperclip.paste().splitlines()

    else:
        return [arg]

    if strip:
        lines = [line.strip() for line in lines]
    if skip_blank:
        lines = [line for line in lines if line]
    return lines

def input_many(args, **input_kwargs):
    '''
    Yield the input() lines for every argument in turn. Raise NoArguments if
    there were no arguments, because reading nothing is almost certainly a
    mistake on the command line.
    '''
    if isinstance(args, str):
        args = [args]

    if not args:
        raise NoArguments()

    for arg in args:
        yield from input(arg, **input_kwargs)

def output(stream, line, *, end):
    line = str(line)
    stream.write(line)
    if not line.endswith(end):
        stream.write(end)
    if stream.isatty():
        stream.flush()

def stdout(line='', end='\n'):
    # In pythonw, stdout is None.
    if sys.stdout is not None:
        output(sys.stdout, line, end=end)

def stderr(line='', end='\n'):
    if sys.stderr is not None:
        output(sys.stderr, line, end=end)
