'''
countstat
=========

Print the word and character counts of text files, as a tree with a subtotal
on every directory and a grand total at the end.

> countstat paths [--flat] [--no-words] [--no-chars] [--no-files] [--no-dirs]
  [--no-total] [--encoding name] [--config file]

paths:
    The files to count. Use !i to read the paths from stdin, one per line, or
    !c to read them from the clipboard. Directories are not searched, so let
    your shell or another program find the files.

--flat:
    List every file and directory by its full path instead of drawing a tree.

--no-words, --no-chars:
    Leave out the word or character counts.

--no-files, --no-dirs, --no-total:
    Leave out the per-file lines, the directory subtotals, or the grand total.

--encoding name:
    Decode the files with this codec, like shift_jis, or undo this
    binary-to-text scheme, like base64, before counting. The default is UTF-8.

--config file:
    A JSON file with any of the keys words, chars, show_file, show_dir,
    show_total, tree, encoding. Command line flags win over the file.
'''
import argparse
import os
import sys

from countstat import configlayers
from countstat import pipeable
from countstat import report
from countstat import vlogging
from countstat import wordcount

log = vlogging.get_logger(__name__, 'countstat')

def normalize_path(path) -> str:
    '''
    Turn a path from the command line into the relative, slash-separated form
    the tree expects.
    '''
    path = os.path.normpath(path)
    if os.path.isabs(path):
        path = os.path.relpath(path)
    return path.replace(os.sep, '/')

def read_files(paths):
    '''
    Return a list of (path, bytes) for every path that could be read, and the
    list of paths that could not.
    '''
    files = []
    failed = []
    for path in paths:
        try:
            with open(path, 'rb') as handle:
                content = handle.read()
        except OSError as exc:
            log.warning('Could not read %s: %s', path, exc)
            failed.append(path)
            continue
        files.append((normalize_path(path), content))
    return (files, failed)

def build_options(args):
    (config, needs_rewrite) = configlayers.load_file(args.config, report.DEFAULT_CONFIG)
    if needs_rewrite and args.config is not None and os.path.isfile(args.config):
        log.info('%s is missing some keys, defaults were used for them.', args.config)

    for key in report.DEFAULT_CONFIG:
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value
    return config

def countstat_argparse(args):
    try:
        options = build_options(args)
    except configlayers.ConfigError as exc:
        log.error(exc)
        return 1

    try:
        paths = list(pipeable.input_many(args.paths))
    except pipeable.NoArguments:
        log.error('No files were given.')
        return 1

    (files, failed) = read_files(paths)

    try:
        report.count_stat(files, sink=pipeable.stdout, **options)
    except wordcount.DecodingError as exc:
        log.error(exc)
        return 1

    return 1 if failed else 0

@pipeable.ctrlc_return1
@vlogging.main_decorator
def main(argv):
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('paths', nargs='*')
    parser.add_argument('--flat', dest='tree', action='store_false', default=None)
    parser.add_argument('--no_words', '--no-words', dest='words', action='store_false', default=None)
    parser.add_argument('--no_chars', '--no-chars', dest='chars', action='store_false', default=None)
    parser.add_argument('--no_files', '--no-files', dest='show_file', action='store_false', default=None)
    parser.add_argument('--no_dirs', '--no-dirs', dest='show_dir', action='store_false', default=None)
    parser.add_argument('--no_total', '--no-total', dest='show_total', action='store_false', default=None)
    parser.add_argument('--encoding', default=None)
    parser.add_argument('--config', default=None)
    parser.set_defaults(func=countstat_argparse)

    args = parser.parse_args(argv)
    return args.func(args)

def main_entry():
    # For the console script, which calls with no arguments.
    return main(sys.argv[1:])

if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))
