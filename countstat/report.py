'''
report
======

Count the words and characters of a set of files and report them as a tree,
with a subtotal on every directory and a grand total at the end.

    >>> lines = count_stat({
    ...     'docs/intro.txt': 'Hello, world!',
    ...     'docs/guide/setup.txt': 'two words',
    ...     'docs/guide/usage.txt': '日本語のテスト',
    ... })
    guide : 6 words 16 characters
    ├─ setup.txt : 2 words 9 characters
    └─ usage.txt : 4 words 7 characters
    intro.txt : 2 words 13 characters
    Total : 8 words 29 characters

The directories all the files have in common are folded away, and so is every
other directory with only one thing in it. With tree=False the same nodes are
listed flat by their full path, each directory after its contents.
'''
from countstat import filetree
from countstat import pipeable
from countstat import vlogging
from countstat import wordcount

log = vlogging.get_logger(__name__, 'report')

DEFAULT_CONFIG = {
    # Show the word counts.
    'words': True,
    # Show the character counts.
    'chars': True,
    # Show a line for each file.
    'show_file': True,
    # Show the subtotals on directory lines.
    'show_dir': True,
    # Show the grand total line.
    'show_total': True,
    # Draw the tree, or list the full paths when False.
    'tree': True,
    # Binary-to-text scheme or codec for the file contents, see wordcount.
    'encoding': None,
}

def format_counts(counts, *, words=True, chars=True) -> str:
    '''
    format_counts(Counts(2, 14)) -> '2 words 14 characters'
    format_counts(Counts(2, 14), words=False) -> '14 characters'
    '''
    parts = []
    if words:
        parts.append(f'{counts.words} words')
    if chars:
        parts.append(f'{counts.chars} characters')
    return ' '.join(parts)

def labeled(label, stats) -> str:
    if stats:
        return f'{label} : {stats}'
    return label

def build_tree(files, *, encoding=None):
    '''
    Return a FileTree of the given (path, content) pairs, or dict of
    path: content, with the Counts of each file in its node's data.
    '''
    if isinstance(files, dict):
        files = files.items()

    tree = filetree.FileTree()
    for (path, content) in files:
        node = tree.add(path)
        node.data = wordcount.count(content, encoding=encoding)
        log.debug('%s: %s', path, node.data)
    return tree

def aggregate(tree):
    '''
    Set the data of every directory to the sum of its children's Counts, and
    return the sum over all of the files.
    '''
    total = wordcount.Counts()
    for node in tree.root.postorder():
        if node.children:
            node.data = sum((child.data for child in node.children), wordcount.Counts())
        elif node is not tree.root:
            total += node.data
    return total

def count_stat(
        files,
        *,
        words=True,
        chars=True,
        show_file=True,
        show_dir=True,
        show_total=True,
        tree=True,
        encoding=None,
        sink=None,
    ):
    '''
    Count the files and pass each line of the report to sink, which defaults
    to writing on stdout. The lines are also returned as a list.

    Directory lines without show_dir still appear in the tree, as bare names,
    so that the files have something to hang from. In the flat listing they
    are left out entirely.
    '''
    if sink is None:
        sink = pipeable.stdout

    file_tree = build_tree(files, encoding=encoding)
    total = aggregate(file_tree)

    if not show_file:
        file_tree.reject(lambda node: node.is_leaf)

    file_tree.sort().fold()

    # The root is normally the folded common directory and goes unprinted, but a
    # single file or directory folds all the way into the root. A root which is
    # still the '.' placeholder has no name worth printing.
    root = file_tree.root
    skip_root = not (root.is_leaf and root.data is not None and root.name != filetree.ROOT_NAME)

    def shows_counts(node):
        is_file = show_file and node.is_leaf
        return is_file or show_dir

    def stats(node):
        if shows_counts(node):
            return format_counts(node.data, words=words, chars=chars)
        return ''

    def render(node):
        prefix = node.tree_prefix(skip_root=True)
        return prefix + labeled(node.name, stats(node))

    lines = []
    def emit(line):
        lines.append(line)
        sink(line)

    if tree:
        file_tree.print(render, skip_root=skip_root, sink=emit)
    else:
        def visit(node):
            if (skip_root and node is file_tree.root) or not shows_counts(node):
                return
            emit(labeled(node.path, stats(node)))
        file_tree.walk_depth_first(visit)

    if show_total:
        emit(labeled('Total', format_counts(total, words=words, chars=chars)))

    return lines
