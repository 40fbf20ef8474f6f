# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# The text an index is built over.
from suffixarray.errors import InvalidArgument, InvalidInput

import numpy as np

class TextBuffer:
    '''Immutable owner of the indexed text. Suffixes are only ever
    referred to by their start offsets into it.
    '''
    __slots__ = ('_text',)

    def __init__(self, text = None):
        if text is None:
            raise InvalidArgument('No text to index given!')
        if not isinstance(text, (str, bytes)):
            fmt = 'Can only index str or bytes, not %s!'
            raise InvalidInput(fmt % type(text).__name__)
        self._text = text

    def __len__(self):
        return len(self._text)

    def __getitem__(self, i):
        return self._text[i]

    @property
    def text(self):
        return self._text

    @property
    def is_bytes(self):
        return isinstance(self._text, bytes)

    def code_units(self):
        '''Returns the code units as an int64 numpy array. Code points
        for str, byte values for bytes.'''
        if self.is_bytes:
            arr = np.frombuffer(self._text, dtype = np.uint8)
        else:
            data = self._text.encode('utf-32-le', 'surrogatepass')
            arr = np.frombuffer(data, dtype = '<u4')
        return arr.astype(np.int64)

    def coerce(self, pattern):
        '''Converts pattern to the same kind of sequence as the text. Returns
        None if that isn't possible.'''
        if isinstance(pattern, str):
            if self.is_bytes:
                try:
                    return pattern.encode('utf-8', 'surrogateescape')
                except UnicodeEncodeError:
                    return None
            return pattern
        if isinstance(pattern, (bytes, bytearray, memoryview)):
            pattern = bytes(pattern)
            if self.is_bytes:
                return pattern
            try:
                return pattern.decode('utf-8')
            except UnicodeDecodeError:
                return None
        return None
