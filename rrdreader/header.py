from rrdreader import format
from rrdreader.exceptions import (
    IndexOutOfRange, InvalidFormat, UnsupportedPlatform, UnsupportedVersion)
from rrdreader.log import Logging
from rrdreader.views import RRDDS

log = Logging()


class RRDHeader(object):
    """
    Decodes the structural part of an RRD file: checks the cookies, works
    out the struct packing and computes where every section starts.

    Construction either yields a complete header or raises. The row counts
    of the archives are a second step, loadRowCounts(), which RRDFile runs
    right away.
    """
    def __init__(self, rrdData):
        self.rrdData = rrdData
        self.rowCounts = None
        self.rowCountSums = None
        self._validate()
        self._loadHeader()
        self._calcIdxs()
        log.debug("RRD version %s, %s-bit alignment, %s data sources, "
                  "%s archives, step %s" % (
                      self.version, self.layout.align, self.dsCount,
                      self.rraCount, self.pdpStep))

    def _validate(self):
        data = self.rrdData
        if data.getCStringAt(0, format.COOKIE_SIZE) != format.RRD_COOKIE:
            raise InvalidFormat()

        self.version = data.getCStringAt(
            format.VERSION_OFFSET, format.VERSION_SIZE)
        if self.version not in format.SUPPORTED_VERSIONS:
            raise UnsupportedVersion(self.version)

        self.layout = None
        for layout in format.LAYOUTS:
            if data.getDoubleAt(layout.floatCookieOffset) == format.FLOAT_COOKIE:
                self.layout = layout
                break
        if self.layout is None:
            raise UnsupportedPlatform()

    def _loadHeader(self):
        # on 64-bit files only the low 32 bits are read, the high ones are
        # expected to be 0
        layout = self.layout
        self.dsCount = self.rrdData.getLongAt(layout.dsCountOffset)
        self.rraCount = self.rrdData.getLongAt(layout.rraCountOffset)
        self.pdpStep = self.rrdData.getLongAt(layout.pdpStepOffset)

    def _calcIdxs(self):
        layout = self.layout
        self.dsDefIdx = layout.topHeaderSize
        self.rraDefIdx = self.dsDefIdx + layout.dsDefSize * self.dsCount
        self.liveHeadIdx = self.rraDefIdx + layout.rraDefSize * self.rraCount
        self.pdpPrepIdx = self.liveHeadIdx + layout.liveHeadSize
        self.cdpPrepIdx = self.pdpPrepIdx + layout.pdpPrepSize * self.dsCount
        self.rraPtrIdx = (self.cdpPrepIdx +
                          layout.cdpPrepSize * self.dsCount * self.rraCount)
        self.headerSize = self.rraPtrIdx + layout.rraPtrSize * self.rraCount

    def loadRowCounts(self):
        """
        Read the row count of every archive, along with the number of rows
        stored before it in the shared data area.
        """
        rowCounts = []
        rowCountSums = []
        total = 0
        for idx in range(self.rraCount):
            rowCount = self.rrdData.getLongAt(
                self.rraDefOffset(idx) + self.layout.rowCountOffset)
            rowCounts.append(rowCount)
            rowCountSums.append(total)
            total += rowCount
        self.rowCounts = rowCounts
        self.rowCountSums = rowCountSums
        log.debug("%s rows in %s archives" % (total, self.rraCount))

    def checkDSIdx(self, idx):
        if not 0 <= idx < self.dsCount:
            raise IndexOutOfRange("DS", idx, self.dsCount)

    def checkRRAIdx(self, idx):
        if not 0 <= idx < self.rraCount:
            raise IndexOutOfRange("RRA", idx, self.rraCount)

    def dsDefOffset(self, idx):
        return self.dsDefIdx + self.layout.dsDefSize * idx

    def pdpPrepOffset(self, idx):
        return self.pdpPrepIdx + self.layout.pdpPrepSize * idx

    def rraDefOffset(self, idx):
        return self.rraDefIdx + self.layout.rraDefSize * idx

    def rraPtrOffset(self, idx):
        return self.rraPtrIdx + self.layout.rraPtrSize * idx

    def cdpPrepOffset(self, rraIdx, dsIdx=0):
        return (self.cdpPrepIdx +
                self.layout.cdpPrepSize * (rraIdx * self.dsCount + dsIdx))

    # ---------------------------
    # Start of user functions

    def getVersion(self):
        return int(self.version)

    def getAlign(self):
        return self.layout.align

    def getStep(self):
        return self.pdpStep

    def getLastUpdate(self):
        return self.rrdData.getLongAt(self.liveHeadIdx)

    def getLastUpdateUsec(self):
        return self.rrdData.getLongAt(
            self.liveHeadIdx + self.layout.lastUpUsecOffset)

    def getNrDSs(self):
        return self.dsCount

    def getNrRRAs(self):
        return self.rraCount

    def getDS(self, idx):
        self.checkDSIdx(idx)
        return RRDDS(self.rrdData, self.dsDefOffset(idx), idx,
                     self.pdpPrepOffset(idx))
