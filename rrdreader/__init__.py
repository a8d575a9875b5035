"""
Reader for RRDtool database files (versions 0003 and 0004) held in memory.

    >>> from rrdreader import RRDFile
    >>> rrd = RRDFile.fromPath("/var/lib/collectd/load.rrd")  # doctest: +SKIP
    >>> rrd.getRRA(0).getEl(rrd.getRRA(0).getNrRows() - 1, 0)  # doctest: +SKIP
"""
from rrdreader.binary import BinaryFile
from rrdreader.exceptions import (
    IndexOutOfRange, InvalidFormat, InvalidRRD, TruncatedData,
    UnsupportedPlatform, UnsupportedVersion)
from rrdreader.rrd import RRDFile

version = '0.1'
