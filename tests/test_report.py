import pytest

from countstat import filetree
from countstat import report
from countstat import wordcount

PATTERN1 = {
    'common/part/bar/ccc/ddd/eee.txt': 'one two three',
    'common/part/foo/aaa/bbb.txt': 'alpha beta',
    'common/part/foo/aaa/ccc.txt': 'gamma',
    'common/part/foo/bar/baz.txt': 'Hello, world!',
}

@pytest.fixture
def run():
    def run(**kwargs):
        lines = []
        returned = report.count_stat(PATTERN1, sink=lines.append, **kwargs)
        assert returned == lines
        return lines
    return run

# TREE
################################################################################

def test_tree_default(run):
    assert run() == [
        'bar/ccc/ddd/eee.txt : 3 words 13 characters',
        'foo : 5 words 28 characters',
        '├─ aaa : 3 words 15 characters',
        '│   ├─ bbb.txt : 2 words 10 characters',
        '│   └─ ccc.txt : 1 words 5 characters',
        '└─ bar/baz.txt : 2 words 13 characters',
        'Total : 8 words 41 characters',
    ]

def test_tree_without_words(run):
    assert run(words=False) == [
        'bar/ccc/ddd/eee.txt : 13 characters',
        'foo : 28 characters',
        '├─ aaa : 15 characters',
        '│   ├─ bbb.txt : 10 characters',
        '│   └─ ccc.txt : 5 characters',
        '└─ bar/baz.txt : 13 characters',
        'Total : 41 characters',
    ]

def test_tree_without_chars(run):
    assert run(chars=False) == [
        'bar/ccc/ddd/eee.txt : 3 words',
        'foo : 5 words',
        '├─ aaa : 3 words',
        '│   ├─ bbb.txt : 2 words',
        '│   └─ ccc.txt : 1 words',
        '└─ bar/baz.txt : 2 words',
        'Total : 8 words',
    ]

def test_tree_without_files(run):
    assert run(show_file=False) == [
        'bar/ccc/ddd : 3 words 13 characters',
        'foo : 5 words 28 characters',
        '├─ aaa : 3 words 15 characters',
        '└─ bar : 2 words 13 characters',
        'Total : 8 words 41 characters',
    ]

def test_tree_without_dirs(run):
    assert run(show_dir=False) == [
        'bar/ccc/ddd/eee.txt : 3 words 13 characters',
        'foo',
        '├─ aaa',
        '│   ├─ bbb.txt : 2 words 10 characters',
        '│   └─ ccc.txt : 1 words 5 characters',
        '└─ bar/baz.txt : 2 words 13 characters',
        'Total : 8 words 41 characters',
    ]

def test_tree_without_total(run):
    assert run(show_total=False) == [
        'bar/ccc/ddd/eee.txt : 3 words 13 characters',
        'foo : 5 words 28 characters',
        '├─ aaa : 3 words 15 characters',
        '│   ├─ bbb.txt : 2 words 10 characters',
        '│   └─ ccc.txt : 1 words 5 characters',
        '└─ bar/baz.txt : 2 words 13 characters',
    ]

# FLAT
################################################################################

def test_flat_default(run):
    assert run(tree=False) == [
        'common/part/bar/ccc/ddd/eee.txt : 3 words 13 characters',
        'common/part/foo/aaa/bbb.txt : 2 words 10 characters',
        'common/part/foo/aaa/ccc.txt : 1 words 5 characters',
        'common/part/foo/aaa : 3 words 15 characters',
        'common/part/foo/bar/baz.txt : 2 words 13 characters',
        'common/part/foo : 5 words 28 characters',
        'Total : 8 words 41 characters',
    ]

def test_flat_without_words(run):
    assert run(tree=False, words=False) == [
        'common/part/bar/ccc/ddd/eee.txt : 13 characters',
        'common/part/foo/aaa/bbb.txt : 10 characters',
        'common/part/foo/aaa/ccc.txt : 5 characters',
        'common/part/foo/aaa : 15 characters',
        'common/part/foo/bar/baz.txt : 13 characters',
        'common/part/foo : 28 characters',
        'Total : 41 characters',
    ]

def test_flat_without_files(run):
    assert run(tree=False, show_file=False) == [
        'common/part/bar/ccc/ddd : 3 words 13 characters',
        'common/part/foo/aaa : 3 words 15 characters',
        'common/part/foo/bar : 2 words 13 characters',
        'common/part/foo : 5 words 28 characters',
        'Total : 8 words 41 characters',
    ]

def test_flat_without_dirs(run):
    assert run(tree=False, show_dir=False) == [
        'common/part/bar/ccc/ddd/eee.txt : 3 words 13 characters',
        'common/part/foo/aaa/bbb.txt : 2 words 10 characters',
        'common/part/foo/aaa/ccc.txt : 1 words 5 characters',
        'common/part/foo/bar/baz.txt : 2 words 13 characters',
        'Total : 8 words 41 characters',
    ]

def test_flat_without_total(run):
    assert run(tree=False, show_total=False)[-1] == 'common/part/foo : 5 words 28 characters'

# OTHER
################################################################################

def test_default_sink_is_stdout(capsys):
    report.count_stat({'a/x.txt': 'one', 'a/y.txt': 'two words'})
    assert capsys.readouterr().out.splitlines() == [
        'x.txt : 1 words 3 characters',
        'y.txt : 2 words 9 characters',
        'Total : 3 words 12 characters',
    ]

def test_single_file_is_shown():
    lines = []
    report.count_stat([('docs/only.txt', 'just one file')], sink=lines.append)
    assert lines == [
        'docs/only.txt : 3 words 13 characters',
        'Total : 3 words 13 characters',
    ]

def test_no_files():
    lines = []
    report.count_stat([], sink=lines.append)
    assert lines == ['Total : 0 words 0 characters']

def test_accepts_pairs_and_bytes():
    lines = []
    files = [('b.txt', b'two words'), ('a.txt', 'one')]
    report.count_stat(files, sink=lines.append, show_total=False)
    assert lines == [
        'a.txt : 1 words 3 characters',
        'b.txt : 2 words 9 characters',
    ]

def test_encoding_applies_to_every_file():
    lines = []
    files = {'a.txt': 'one'.encode('utf-8').hex(), 'b.txt': 'two words'.encode('utf-8').hex()}
    report.count_stat(files, sink=lines.append, encoding='hex')
    assert lines[-1] == 'Total : 3 words 12 characters'

def test_decoding_error_propagates():
    with pytest.raises(wordcount.DecodingError):
        report.count_stat({'a.txt': 'not hex'}, sink=lambda line: None, encoding='hex')

def test_build_tree_and_aggregate():
    tree = report.build_tree(PATTERN1)
    total = report.aggregate(tree)
    assert total == {'words': 8, 'chars': 41}
    assert tree.get('common/part/foo').data == {'words': 5, 'chars': 28}
    assert tree.get('common/part/foo/aaa/ccc.txt').data == {'words': 1, 'chars': 5}
    assert tree.root.data == total
    assert tree.get('missing') is filetree.NOT_FOUND

def test_format_counts():
    counts = wordcount.Counts(words=2, chars=14)
    assert report.format_counts(counts) == '2 words 14 characters'
    assert report.format_counts(counts, words=False) == '14 characters'
    assert report.format_counts(counts, chars=False) == '2 words'
    assert report.format_counts(counts, words=False, chars=False) == ''

def test_without_words_or_chars_leaves_bare_labels(run):
    assert run(tree=False, words=False, chars=False, show_dir=False) == [
        'common/part/bar/ccc/ddd/eee.txt',
        'common/part/foo/aaa/bbb.txt',
        'common/part/foo/aaa/ccc.txt',
        'common/part/foo/bar/baz.txt',
        'Total',
    ]

def test_single_top_level_file_without_files():
    lines = []
    report.count_stat({'a.txt': 'Hello, world!'}, sink=lines.append, show_file=False)
    assert lines == ['Total : 2 words 13 characters']

def test_top_level_files_without_files_flat():
    lines = []
    files = {'a.txt': 'Hello, world!', 'b.txt': 'one'}
    report.count_stat(files, sink=lines.append, show_file=False, tree=False)
    assert lines == ['Total : 3 words 16 characters']
