"""
Assembles small RRD files in memory, laid out the way rrdtool writes them on
32 and 64 bit Linux.
"""
import struct

from rrdreader import format

NAN = float("nan")


class DSSpec(object):

    def __init__(self, name, dsType="GAUGE", heartbeat=600, minval=NAN,
                 maxval=NAN, lastDS="U", unknownSec=0, value=0.0):
        self.name = name
        self.type = dsType
        self.heartbeat = heartbeat
        self.min = minval
        self.max = maxval
        self.lastDS = lastDS
        self.unknownSec = unknownSec
        self.value = value


class RRASpec(object):
    """
    rows holds the physical rows, each a list with one value per ds.
    cdpPrep holds one (value, unknown_datapoints, primary, secondary) tuple
    per ds.
    """
    def __init__(self, cf, rows, curRow, pdpPerRow=1, xff=0.5, cdpPrep=None):
        self.cf = cf
        self.rows = rows
        self.curRow = curRow
        self.pdpPerRow = pdpPerRow
        self.xff = xff
        self.cdpPrep = cdpPrep


def _putString(buf, offset, text, size):
    raw = text.encode("latin-1")[:size]
    buf[offset:offset + len(raw)] = raw


def buildRRD(dataSources, archives, align=64, step=300, lastUpdate=920808900,
             lastUpdateUsec=0, version=format.VERSION3, cookie=b"RRD\x00",
             floatCookie=format.FLOAT_COOKIE):
    layout = format.layoutFor(align)
    ulong = "<L" if align == 32 else "<Q"
    dsCount = len(dataSources)
    rraCount = len(archives)

    dsDefIdx = layout.topHeaderSize
    rraDefIdx = dsDefIdx + layout.dsDefSize * dsCount
    liveHeadIdx = rraDefIdx + layout.rraDefSize * rraCount
    pdpPrepIdx = liveHeadIdx + layout.liveHeadSize
    cdpPrepIdx = pdpPrepIdx + layout.pdpPrepSize * dsCount
    rraPtrIdx = cdpPrepIdx + layout.cdpPrepSize * dsCount * rraCount
    headerSize = rraPtrIdx + layout.rraPtrSize * rraCount
    totalRows = sum([len(rra.rows) for rra in archives])
    buf = bytearray(headerSize + totalRows * dsCount * 8)

    buf[0:4] = cookie
    _putString(buf, format.VERSION_OFFSET, version, 5)
    struct.pack_into("<d", buf, layout.floatCookieOffset, floatCookie)
    struct.pack_into(ulong, buf, layout.dsCountOffset, dsCount)
    struct.pack_into(ulong, buf, layout.rraCountOffset, rraCount)
    struct.pack_into(ulong, buf, layout.pdpStepOffset, step)

    for idx, ds in enumerate(dataSources):
        base = dsDefIdx + layout.dsDefSize * idx
        _putString(buf, base, ds.name, 19)
        _putString(buf, base + format.DS_TYPE_OFFSET, ds.type, 19)
        struct.pack_into(ulong, buf, base + format.DS_HEARTBEAT_OFFSET,
                         ds.heartbeat)
        struct.pack_into("<d", buf, base + format.DS_MIN_OFFSET, ds.min)
        struct.pack_into("<d", buf, base + format.DS_MAX_OFFSET, ds.max)

        base = pdpPrepIdx + layout.pdpPrepSize * idx
        _putString(buf, base, ds.lastDS, 29)
        struct.pack_into(ulong, buf, base + format.PDP_UNKNOWN_SEC_OFFSET,
                         ds.unknownSec)
        struct.pack_into("<d", buf, base + format.PDP_VALUE_OFFSET, ds.value)

    struct.pack_into(ulong, buf, liveHeadIdx, lastUpdate)
    struct.pack_into(ulong, buf, liveHeadIdx + layout.lastUpUsecOffset,
                     lastUpdateUsec)

    dataIdx = headerSize
    for rraIdx, rra in enumerate(archives):
        base = rraDefIdx + layout.rraDefSize * rraIdx
        _putString(buf, base, rra.cf, 19)
        struct.pack_into(ulong, buf, base + layout.rowCountOffset,
                         len(rra.rows))
        struct.pack_into(ulong, buf, base + layout.pdpPerRowOffset,
                         rra.pdpPerRow)
        struct.pack_into("<d", buf, base + layout.xffOffset, rra.xff)

        for dsIdx, prep in enumerate(rra.cdpPrep or []):
            base = cdpPrepIdx + layout.cdpPrepSize * (rraIdx * dsCount + dsIdx)
            value, unknown, primary, secondary = prep
            struct.pack_into("<d", buf, base + format.CDP_VALUE_OFFSET, value)
            struct.pack_into(ulong, buf, base + format.CDP_UNKNOWN_PDP_OFFSET,
                             unknown)
            struct.pack_into("<d", buf,
                             base + format.CDP_PRIMARY_VALUE_OFFSET, primary)
            struct.pack_into("<d", buf,
                             base + format.CDP_SECONDARY_VALUE_OFFSET,
                             secondary)

        struct.pack_into(ulong, buf, rraPtrIdx + layout.rraPtrSize * rraIdx,
                         rra.curRow)

        for row in rra.rows:
            for value in row:
                struct.pack_into("<d", buf, dataIdx, value)
                dataIdx += 8

    return bytes(buf)


def sampleRRD(align=64, **kwargs):
    """
    Two data sources, two archives. Archive 0 has 10 rows with cur_row 3;
    physical row r holds r for "speed" and 100 + r for "temp". Archive 1 has
    4 rows with cur_row 0 and values 1000 + r / 2000 + r.
    """
    dataSources = [
        DSSpec("speed", "COUNTER", heartbeat=600, lastDS="12423",
               unknownSec=0, value=1.5),
        DSSpec("temp", "GAUGE", heartbeat=300, minval=-40.0, maxval=60.0),
        ]
    archives = [
        RRASpec("AVERAGE", [[float(r), 100.0 + r] for r in range(10)],
                curRow=3, pdpPerRow=1, xff=0.5,
                cdpPrep=[(NAN, 0, 0.25, NAN), (1.0, 2, 3.0, 4.0)]),
        RRASpec("MAX", [[1000.0 + r, 2000.0 + r] for r in range(4)],
                curRow=0, pdpPerRow=6, xff=0.25),
        ]
    return buildRRD(dataSources, archives, align=align, **kwargs)
