'''
wordcount
=========

Count the words and characters of a piece of text, where the text may be
English, Japanese, or both mixed together.

Characters are unicode codepoints, so "日本語" is 3 characters even though it
is 9 bytes of UTF-8.

Words are found in three steps. First the text is split on whitespace, and
each token is split again into runs of Japanese and non-Japanese characters,
so "日本語noテスト" is the runs "日本語", "no" and "テスト". A non-Japanese run
is one word, unless it is nothing but punctuation, in which case it is no
words at all. A Japanese run is handed to TinySegmenter, which splits
Japanese text into words without needing a dictionary. Finally a kanji
compound which ends in a common suffix like 語 or 人 is split from that
suffix, so "日本語" is the two words "日本" and "語". Every resulting segment
that is not punctuation counts as one word.

    >>> count('Hello, world!')
    Counts(words=2, chars=13)
    >>> count('日本語のテスト')
    Counts(words=4, chars=7)
'''
import base64
import binascii
import codecs
import re

import tinysegmenter

from countstat import vlogging

log = vlogging.get_logger(__name__, 'wordcount')

# Kana, kanji, CJK punctuation and the fullwidth / halfwidth forms.
JAPANESE_RANGES = (
    r'\u3000-\u303f'
    r'\u3040-\u309f'
    r'\u30a0-\u30ff'
    r'\u31f0-\u31ff'
    r'\u3400-\u4dbf'
    r'\u4e00-\u9fff'
    r'\uf900-\ufaff'
    r'\uff00-\uffef'
)
JAPANESE_CHARACTER = re.compile(f'[{JAPANESE_RANGES}]')
SCRIPT_RUN = re.compile(f'[{JAPANESE_RANGES}]+|[^{JAPANESE_RANGES}]+')
WORD_CHARACTER = re.compile(r'\w')

# Single kanji which attach to the end of a compound as a word of their own:
# languages, nationalities, places and the -teki / -sei / -ka suffixes.
KANJI_SUFFIXES = '語人県市区町村的性化者'
KANJI_COMPOUND = re.compile(r'[\u4e00-\u9fff]{2,}')

# Each of these takes an ascii str with the whitespace already removed.
BINARY_TO_TEXT = {
    'base64': lambda text: base64.b64decode(text, validate=True),
    'base32': base64.b32decode,
    'hex': bytes.fromhex,
}

_SEGMENTER = None

class DecodingError(Exception):
    pass

class Counts:
    def __init__(self, words=0, chars=0):
        self.words = words
        self.chars = chars

    def __add__(self, other):
        return Counts(words=self.words + other.words, chars=self.chars + other.chars)

    def __eq__(self, other):
        if isinstance(other, dict):
            return other.keys() == {'words', 'chars'} and self.to_dict() == other
        if not isinstance(other, Counts):
            return NotImplemented
        return (self.words, self.chars) == (other.words, other.chars)

    def __repr__(self):
        return f'Counts(words={self.words}, chars={self.chars})'

    def to_dict(self):
        return {'words': self.words, 'chars': self.chars}

def _get_segmenter():
    global _SEGMENTER
    if _SEGMENTER is None:
        _SEGMENTER = tinysegmenter.TinySegmenter()
    return _SEGMENTER

def _binary_to_text(data, scheme):
    if not isinstance(data, str):
        data = bytes(data).decode('ascii', errors='replace')
    # Line-wrapped base64 is common, so newlines are allowed anywhere.
    data = ''.join(data.split())

    try:
        return BINARY_TO_TEXT[scheme](data)
    except (binascii.Error, ValueError) as exc:
        raise DecodingError(f'Input is not valid {scheme}.') from exc

def decode(data, encoding=None) -> str:
    '''
    Turn the input into text.

    encoding may name a binary-to-text scheme (base64, base32, hex), which is
    undone first and the result read as UTF-8, or an ordinary text codec like
    utf-8 or shift_jis for decoding bytes. Without an encoding, bytes are read
    as UTF-8 and strings are taken as they are.

    Bytes which are not valid in the codec are replaced by U+FFFD rather than
    raising, but an unknown encoding name or a corrupt base64 / base32 / hex
    payload raises DecodingError.
    '''
    if encoding is None:
        if isinstance(data, str):
            return data
        return bytes(data).decode('utf-8', errors='replace')

    scheme = encoding.lower().replace('_', '').replace('-', '')
    if scheme in BINARY_TO_TEXT:
        data = _binary_to_text(data, scheme)
        return data.decode('utf-8', errors='replace')

    try:
        codec = codecs.lookup(encoding)
    except LookupError as exc:
        raise DecodingError(f'Unknown encoding "{encoding}".') from exc

    if isinstance(data, str):
        return data
    return codec.decode(bytes(data), 'replace')[0]

def split_suffix(segment):
    '''
    Split a trailing suffix kanji off of a kanji compound of three or more
    characters, so 日本語 becomes 日本 and 語. Two-character compounds like
    英語 are left alone, as are segments which are not all kanji.
    '''
    stem = segment[:-1]
    suffix = segment[-1:]
    if suffix in KANJI_SUFFIXES and KANJI_COMPOUND.fullmatch(stem):
        return [stem, suffix]
    return [segment]

def segment_japanese(run):
    '''
    Return the words of a run of Japanese text.
    '''
    segments = []
    for segment in _get_segmenter().tokenize(run):
        segments.extend(split_suffix(segment))
    log.loud('Segmented %s into %s.', run, segments)
    return segments

def count_token_words(token) -> int:
    '''
    Return the number of words in a single whitespace-free token.
    '''
    words = 0
    for run in SCRIPT_RUN.findall(token):
        if not JAPANESE_CHARACTER.match(run):
            words += 1 if WORD_CHARACTER.search(run) else 0
            continue
        words += sum(1 for segment in segment_japanese(run) if WORD_CHARACTER.search(segment))
    return words

def count_words(text) -> int:
    return sum(count_token_words(token) for token in text.split())

def count(data, encoding=None):
    '''
    Return the Counts of words and characters for the given str or bytes.
    See decode for the meaning of encoding.
    '''
    text = decode(data, encoding=encoding)
    return Counts(words=count_words(text), chars=len(text))
