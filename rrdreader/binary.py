"""
In-memory access to the raw bytes of an RRD file.

Any object with the same get*At methods can be handed to RRDFile; this one
reads from a bytes buffer, little endian, the way Linux on x86 writes RRDs.

>>> bf = BinaryFile(b"RRD\\x000003\\x00\\x01\\x02")
>>> bf.getCStringAt(0, 4)
'RRD'
>>> bf.getCStringAt(4, 5)
'0003'
>>> bf.getShortAt(9)
513
>>> bf.getLongAt(8)
Traceback (most recent call last):
rrdreader.exceptions.TruncatedData: <TruncatedData: Read of 4 bytes at offset 8 past end of data (11 bytes).>
"""
import struct

from twisted.python.filepath import FilePath

from rrdreader.exceptions import TruncatedData

_BYTE = struct.Struct("<B")
_SHORT = struct.Struct("<H")
_LONG = struct.Struct("<L")
_DOUBLE = struct.Struct("<d")


class BinaryFile(object):

    def __init__(self, data):
        self.data = bytes(data)

    @classmethod
    def fromPath(cls, path):
        """
        Read the whole file at path into memory.
        """
        return cls(FilePath(path).getContent())

    def getLength(self):
        return len(self.data)

    def _check(self, idx, size):
        if idx < 0 or idx + size > len(self.data):
            raise TruncatedData(idx, size, len(self.data))

    def _unpack(self, fmt, idx):
        self._check(idx, fmt.size)
        return fmt.unpack_from(self.data, idx)[0]

    def getByteAt(self, idx):
        return self._unpack(_BYTE, idx)

    def getShortAt(self, idx):
        return self._unpack(_SHORT, idx)

    def getLongAt(self, idx):
        return self._unpack(_LONG, idx)

    def getDoubleAt(self, idx):
        return self._unpack(_DOUBLE, idx)

    def getFastDoubleAt(self, idx):
        """
        Read only the high order half of the double at idx. Sign, exponent
        and the top 20 bits of the mantissa survive; the rest reads as zero.

        >>> bf = BinaryFile(struct.pack("<d", 1.0 / 3))
        >>> abs(bf.getFastDoubleAt(0) - 1.0 / 3) < 2 ** -20
        True
        """
        self._check(idx, 8)
        return _DOUBLE.unpack(b"\x00\x00\x00\x00" + self.data[idx + 4:idx + 8])[0]

    def getCStringAt(self, idx, maxSize):
        """
        At most maxSize bytes, cut at the first NUL. A string that reaches
        the end of the data before either is truncated.
        """
        self._check(idx, 0)
        raw = self.data[idx:idx + maxSize]
        end = raw.find(b"\x00")
        if end >= 0:
            raw = raw[:end]
        elif idx + maxSize > len(self.data):
            raise TruncatedData(idx, maxSize, len(self.data))
        return raw.decode("latin-1")
