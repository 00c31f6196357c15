'''
filetree
========

Build a tree out of slash-delimited relative paths, then walk it, reshape it,
and print it with ruled lines.

    >>> tree = FileTree(['docs/intro.txt', 'docs/usage.txt', 'readme.txt'])
    >>> tree.print()
    .
    ├─ docs
    │   ├─ intro.txt
    │   └─ usage.txt
    └─ readme.txt

Every node has a `data` attribute which the tree never looks at, so callers
can hang word counts or anything else on it.

Paths are taken as given. There is no handling of '.', '..', empty segments or
leading slashes, so clean them up before adding them.
'''
from countstat import pipeable
from countstat import sentinel
from countstat import vlogging

log = vlogging.get_logger(__name__, 'filetree')

SEPARATOR = '/'
ROOT_NAME = '.'

# Visitors passed to the walk methods return STOP to end the walk right away.
# Any other return value, including None, lets it continue.
CONTINUE = sentinel.Sentinel('continue')
STOP = sentinel.Sentinel('stop', truthyness=False)

NOT_FOUND = sentinel.Sentinel('not found', truthyness=False)

TEE = '├─ '
CORNER = '└─ '
PIPE = '│   '
BLANK = '     '

def render_prefix(lasts) -> str:
    '''
    Return the ruled-line prefix for a node, given a list of booleans with one
    entry per printed level from the top down to the node itself, telling
    whether the node at that level is the last of its siblings.

    The final entry chooses the node's own glyph. The earlier entries are the
    ancestors, which continue their line downward if they still have siblings
    below them.

    render_prefix([]) -> ''
    render_prefix([True]) -> '└─ '
    render_prefix([False, True]) -> '│   └─ '
    render_prefix([True, False]) -> '     ├─ '
    '''
    if not lasts:
        return ''
    indent = ''.join(BLANK if last else PIPE for last in lasts[:-1])
    glyph = CORNER if lasts[-1] else TEE
    return indent + glyph

class Node:
    def __init__(self, name, data=None):
        self.name = name
        self.data = data
        self.parent = None
        self.children = []

    def __repr__(self):
        return f'Node({self.path})'

    @property
    def is_leaf(self):
        return len(self.children) == 0

    @property
    def is_last(self):
        '''
        True if this node is the final child of its parent. The root counts
        as last since it has no siblings at all.
        '''
        if self.parent is None:
            return True
        return self.parent.children[-1] is self

    @property
    def path(self):
        '''
        The names from the root down to this node, joined by slashes.

        The placeholder root '.' is left out of its descendants' paths, but a
        root which has been renamed by folding is included.
        '''
        lineage = [self]
        lineage.extend(self.walk_parents())
        lineage.reverse()
        if len(lineage) > 1 and lineage[0].name == ROOT_NAME:
            lineage = lineage[1:]
        return SEPARATOR.join(node.name for node in lineage)

    def absorb_child(self):
        '''
        Merge the only child into this node. This node takes the child's
        children and data, and its name becomes "name/childname", except that
        the placeholder root simply becomes the child's name.
        '''
        (child,) = self.children
        if self.parent is None and self.name == ROOT_NAME:
            name = child.name
        else:
            name = f'{self.name}{SEPARATOR}{child.name}'
        log.loud('Folding %s into %s.', child.name, self.name)

        self.name = name
        self.data = child.data
        self.children = []
        for grandchild in child.children:
            self.add_child(grandchild)
        child.children = []
        child.parent = None

    def add_child(self, other_node):
        other_node.parent = self
        self.children.append(other_node)
        return other_node

    def get_child(self, name):
        for child in self.children:
            if child.name == name:
                return child
        return None

    def keep_children(self, predicate):
        '''
        Drop every child for which the predicate is false, along with
        everything beneath it.
        '''
        kept = []
        for child in self.children:
            if predicate(child):
                kept.append(child)
            else:
                child.parent = None
        self.children = kept

    def leaves(self):
        for node in self.preorder():
            if node.is_leaf:
                yield node

    def postorder(self):
        for child in self.children:
            yield from child.postorder()
        yield self

    def preorder(self):
        yield self
        for child in self.children:
            yield from child.preorder()

    def tree_prefix(self, skip_root=False) -> str:
        '''
        The ruled lines which go in front of this node's name when the tree
        is printed. With skip_root, the prefix is the one used when the root
        line is left out of the printout and its children start at the left
        margin.
        '''
        lineage = [self]
        lineage.extend(self.walk_parents())
        lineage.reverse()
        # The root itself never gets a glyph.
        lineage = lineage[1:]
        if skip_root:
            lineage = lineage[1:]
        return render_prefix([node.is_last for node in lineage])

    def walk_parents(self):
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

def _walk(nodes, visitor):
    for node in nodes:
        if visitor(node) is STOP:
            return STOP
    return CONTINUE

class FileTree:
    '''
    A tree of path segments under a single placeholder root named '.'.

    The walk methods call the visitor with each node and stop as soon as it
    returns STOP, returning STOP themselves, or CONTINUE if they went all the
    way through. Exceptions raised by a visitor are not caught, and whatever
    the visitor changed before raising stays changed.

    The reshaping methods modify the tree in place and return it, so they can
    be chained: tree.sort().fold().print()
    '''
    def __init__(self, paths=None):
        self.root = Node(ROOT_NAME)
        if paths is not None:
            self.add_paths(paths)

    def __repr__(self):
        return f'FileTree({self.root.name})'

    def __str__(self):
        return self.to_string()

    @property
    def tree(self):
        return self.root

    def add(self, path):
        '''
        Add the nodes for this path, reusing any that already exist, and
        return the node at the end of the path.
        '''
        node = self.root
        for name in path.split(SEPARATOR):
            child = node.get_child(name)
            if child is None:
                child = node.add_child(Node(name))
            node = child
        return node

    def add_paths(self, paths):
        return [self.add(path) for path in paths]

    def get(self, path):
        '''
        Return the node for this path, or NOT_FOUND if any part of the path
        does not exist.
        '''
        node = self.root
        for name in path.split(SEPARATOR):
            node = node.get_child(name)
            if node is None:
                return NOT_FOUND
        return node

    def filter(self, predicate):
        '''
        Remove every node for which the predicate is false, together with its
        whole subtree. Parents are tested before their children, so the
        descendants of a removed node are never tested. The root always stays.
        '''
        for node in self.root.preorder():
            node.keep_children(predicate)
        return self

    def reject(self, predicate):
        return self.filter(lambda node: not predicate(node))

    def fold_root(self):
        '''
        While the root has exactly one child, merge that child into the root.
        This strips the leading directories that every path has in common,
        so common/part/a.txt and common/part/b.txt print under "common/part".
        '''
        while len(self.root.children) == 1:
            self.root.absorb_child()
        return self

    def fold(self):
        '''
        Like fold_root, but for every node in the tree. Any chain of nodes
        that each have exactly one child is collapsed into a single node
        named by the joined path, so afterwards no node has exactly one child.
        '''
        self.fold_root()
        for node in self.root.preorder():
            while len(node.children) == 1:
                node.absorb_child()
        return self

    def sort(self, key=None):
        '''
        Put every node's children in ascending order by name, or by the given
        key function.
        '''
        if key is None:
            key = lambda node: node.name
        for node in self.root.preorder():
            node.children.sort(key=key)
        return self

    def map(self, function):
        return [function(node) for node in self.root.preorder()]

    def map_leaf(self, function):
        return [function(node) for node in self.root.leaves()]

    def walk(self, visitor):
        '''
        Visit every node, each node before its children.
        '''
        return _walk(self.root.preorder(), visitor)

    def walk_depth_first(self, visitor):
        '''
        Visit every node, each node after its children, so the root is last.
        '''
        return _walk(self.root.postorder(), visitor)

    def walk_leaf(self, visitor):
        return _walk(self.root.leaves(), visitor)

    def to_object(self, data_key=None):
        '''
        Return nested dicts keyed by node name. Leaves map to an empty dict.

        If data_key is given, every dict, including the outermost one for the
        root, also holds the node's data under that key.
        '''
        def convert(node):
            obj = {}
            if data_key is not None:
                obj[data_key] = node.data
            for child in node.children:
                obj[child.name] = convert(child)
            return obj

        return convert(self.root)

    def render_lines(self, renderer=None, *, skip_root=False):
        '''
        Yield the printed line for each node, in the same order as walk.

        The renderer, if given, is called with each node and may return:
        - a string, which is used as the entire line. Call
          node.tree_prefix(skip_root=...) if you want the ruled lines.
        - a (prefix, suffix) pair or a {'prefix': ..., 'suffix': ...} dict,
          which are put on either side of the name, separated by spaces.
        - None, for the plain name.
        '''
        for node in self.root.preorder():
            if skip_root and node is self.root:
                continue
            yield _render_line(node, renderer=renderer, skip_root=skip_root)

    def print(self, renderer=None, *, skip_root=False, sink=None):
        '''
        Pass each rendered line to sink, which defaults to writing on stdout.
        '''
        if sink is None:
            sink = pipeable.stdout
        for line in self.render_lines(renderer=renderer, skip_root=skip_root):
            sink(line)

    def to_string(self, *, skip_root=False) -> str:
        return '\n'.join(self.render_lines(skip_root=skip_root))

def _render_line(node, *, renderer, skip_root):
    glyphs = node.tree_prefix(skip_root=skip_root)
    if renderer is None:
        return glyphs + node.name

    rendered = renderer(node)
    if rendered is None:
        return glyphs + node.name

    if isinstance(rendered, str):
        return rendered

    if isinstance(rendered, dict):
        before = rendered.get('prefix', '')
        after = rendered.get('suffix', '')
    else:
        (before, after) = rendered

    parts = [part for part in (before, node.name, after) if part]
    return glyphs + ' '.join(parts)
