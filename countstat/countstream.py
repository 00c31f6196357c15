'''
A writable sink which collects chunks of text and counts them when closed.

    with countstream.CountStream() as stream:
        for chunk in chunks:
            stream.write(chunk)
    print(stream.words, stream.chars)

Chunks may be str or bytes. Bytes are joined before decoding so a multi-byte
character split across two chunks is still counted as one character.
'''
from countstat import vlogging
from countstat import wordcount

log = vlogging.get_logger(__name__, 'countstream')

class CountStreamException(Exception):
    pass

class StreamClosed(CountStreamException):
    pass

class StreamNotClosed(CountStreamException):
    pass

class CountStream:
    def __init__(self, encoding=None):
        self.encoding = encoding
        self.chunks = []
        self.closed = False
        self._counts = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        # Don't bother counting a stream that failed partway.
        if exc_type is None:
            self.close()

    def __repr__(self):
        return f'CountStream(closed={self.closed}, chunks={len(self.chunks)})'

    @property
    def counts(self):
        if self._counts is None:
            raise StreamNotClosed('Counts are only available after close.')
        return self._counts

    @property
    def chars(self):
        return self.counts.chars

    @property
    def words(self):
        return self.counts.words

    def _joined(self):
        if all(isinstance(chunk, str) for chunk in self.chunks):
            return ''.join(self.chunks)

        return b''.join(
            chunk.encode('utf-8') if isinstance(chunk, str) else chunk
            for chunk in self.chunks
        )

    def close(self):
        if self.closed:
            return self._counts

        # If this raises DecodingError the stream stays open with its chunks.
        self._counts = wordcount.count(self._joined(), encoding=self.encoding)
        self.closed = True
        self.chunks = []
        log.debug('Counted stream: %s.', self._counts)
        return self._counts

    def write(self, chunk):
        if self.closed:
            raise StreamClosed('Cannot write to a closed CountStream.')
        if not isinstance(chunk, (str, bytes, bytearray, memoryview)):
            raise TypeError(f'chunk should be str or bytes, not {type(chunk)}.')

        if not isinstance(chunk, str):
            chunk = bytes(chunk)
        self.chunks.append(chunk)
        return len(chunk)
