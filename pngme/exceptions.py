class PNGException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    The "chain" attribute lists the layers the exception went through
    while propagating, innermost first.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)


class UnpackException(PNGException):
    pass


class ChunkTooSmall(UnpackException):
    pass


class InvalidChunkType(UnpackException):
    pass


class InvalidChunkSize(UnpackException):
    '''The length field asks for more bytes than the ones available.'''

    def __init__(self, bytes_received, length_field, **kwargs):
        self.bytes_received = bytes_received
        self.length_field = length_field
        super().__init__(
            f'length field is {length_field} but only {bytes_received} bytes were received',
            **kwargs)

    def __reduce__(self):
        return (self.__class__, (self.bytes_received, self.length_field), self.__dict__)


class InvalidCRC(UnpackException):

    def __init__(self, expected, found, **kwargs):
        self.expected = expected
        self.found = found
        super().__init__(f'crc mismatch: expected 0x{expected:08x}, found 0x{found:08x}', **kwargs)

    def __reduce__(self):
        return (self.__class__, (self.expected, self.found), self.__dict__)


class MagicException(UnpackException):
    pass


class PNGTooSmall(MagicException):
    pass


class InvalidHeader(MagicException):
    pass


class DataNotUTF8(PNGException):
    pass


class NoChunkOfGivenTypeFound(PNGException):

    def __init__(self, chunk_type, **kwargs):
        self.chunk_type = chunk_type
        super().__init__(f'no chunk with type {chunk_type}', **kwargs)

    def __reduce__(self):
        return (self.__class__, (self.chunk_type,), self.__dict__)
