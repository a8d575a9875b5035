"""
Read-only views over single records of an RRD file.

The views keep nothing but the byte source and the offsets they were built
with; every getter reads straight from the source.
"""
from rrdreader import format, mapper
from rrdreader.exceptions import IndexOutOfRange


class RRDDS(mapper.DSMapper):
    """
    One data source definition, with the live pdp_prep values of the same
    data source.
    """
    def __init__(self, rrdData, dsDefIdx, idx, pdpPrepIdx):
        self.rrdData = rrdData
        self.dsDefIdx = dsDefIdx
        self.idx = idx
        self.pdpPrepIdx = pdpPrepIdx

    def __repr__(self):
        return "<RRDDS %s %r>" % (self.idx, self.getName())

    def getIdx(self):
        return self.idx

    def getName(self):
        return self.rrdData.getCStringAt(self.dsDefIdx, format.DS_NAME_SIZE)

    def getType(self):
        return self.rrdData.getCStringAt(
            self.dsDefIdx + format.DS_TYPE_OFFSET, format.DS_NAME_SIZE)

    def getMinimalHeartbeat(self):
        return self.rrdData.getLongAt(
            self.dsDefIdx + format.DS_HEARTBEAT_OFFSET)

    def getMin(self):
        return self.rrdData.getDoubleAt(self.dsDefIdx + format.DS_MIN_OFFSET)

    def getMax(self):
        return self.rrdData.getDoubleAt(self.dsDefIdx + format.DS_MAX_OFFSET)

    def getLastDS(self):
        """
        The last raw value fed to this data source, as rrdtool stored it:
        a string, "U" when unknown.
        """
        return self.rrdData.getCStringAt(self.pdpPrepIdx, format.LAST_DS_SIZE)

    def getUnknownSec(self):
        return self.rrdData.getLongAt(
            self.pdpPrepIdx + format.PDP_UNKNOWN_SEC_OFFSET)

    def getValue(self):
        return self.rrdData.getDoubleAt(
            self.pdpPrepIdx + format.PDP_VALUE_OFFSET)


class RRDCDPPrep(mapper.CDPPrepMapper):
    """
    Consolidation scratch area of one (archive, data source) pair.
    """
    def __init__(self, rrdData, cdpPrepIdx):
        self.rrdData = rrdData
        self.cdpPrepIdx = cdpPrepIdx

    def getValue(self):
        return self.rrdData.getDoubleAt(
            self.cdpPrepIdx + format.CDP_VALUE_OFFSET)

    def getUnknownDatapoints(self):
        return self.rrdData.getLongAt(
            self.cdpPrepIdx + format.CDP_UNKNOWN_PDP_OFFSET)

    def getPrimaryValue(self):
        return self.rrdData.getDoubleAt(
            self.cdpPrepIdx + format.CDP_PRIMARY_VALUE_OFFSET)

    def getSecondaryValue(self):
        return self.rrdData.getDoubleAt(
            self.cdpPrepIdx + format.CDP_SECONDARY_VALUE_OFFSET)


class RRDRRA(mapper.RRAMapper):
    """
    One round robin archive: its definition and its rows.

    The rows of an archive form a ring. cur_row, the row written last, is
    read once when the view is built; logical row 0 is the row after it
    (the oldest) and logical row getNrRows()-1 is cur_row itself.
    """
    def __init__(self, rrdData, layout, rraDefIdx, rraPtrIdx, headerSize,
                 rowCount, prevRowCount, dsCount, pdpStep, idx=0,
                 cdpPrepIdx=None, lastUpdate=None):
        self.rrdData = rrdData
        self.layout = layout
        self.rraDefIdx = rraDefIdx
        self.rraPtrIdx = rraPtrIdx
        self.rowCount = rowCount
        self.dsCount = dsCount
        self.pdpStep = pdpStep
        self.idx = idx
        self.cdpPrepIdx = cdpPrepIdx
        self.lastUpdate = lastUpdate
        self.rowSize = dsCount * format.DOUBLE_SIZE
        self.baseIdx = headerSize + prevRowCount * self.rowSize
        # needed on every element access
        self.curRow = rrdData.getLongAt(rraPtrIdx)

    def __repr__(self):
        return "<RRDRRA %s %s rows=%s>" % (
            self.idx, self.getName(), self.rowCount)

    def checkRowIdx(self, rowIdx):
        if not 0 <= rowIdx < self.rowCount:
            raise IndexOutOfRange("Row", rowIdx, self.rowCount)

    def checkDSIdx(self, dsIdx):
        if not 0 <= dsIdx < self.dsCount:
            raise IndexOutOfRange("DS", dsIdx, self.dsCount)

    def calcIdx(self, rowIdx, dsIdx):
        """
        Absolute offset of the sample at logical row rowIdx, data source
        dsIdx.
        """
        self.checkRowIdx(rowIdx)
        self.checkDSIdx(dsIdx)
        realRowIdx = (rowIdx + self.curRow + 1) % self.rowCount
        return (self.baseIdx + self.rowSize * realRowIdx +
                dsIdx * format.DOUBLE_SIZE)

    # ----------------------------
    # Start of public methods

    def getIdx(self):
        return self.idx

    def getName(self):
        return self.rrdData.getCStringAt(self.rraDefIdx, format.CF_NAME_SIZE)

    getCFName = getName

    def getPdpPerRow(self):
        return self.rrdData.getLongAt(
            self.rraDefIdx + self.layout.pdpPerRowOffset)

    def getSecsPerRow(self):
        return self.pdpStep * self.getPdpPerRow()

    getStep = getSecsPerRow

    def getXff(self):
        return self.rrdData.getDoubleAt(self.rraDefIdx + self.layout.xffOffset)

    def getNrRows(self):
        return self.rowCount

    def getNrDSs(self):
        return self.dsCount

    def getCurRow(self):
        return self.curRow

    def getEl(self, rowIdx, dsIdx):
        """
        The sample at logical row rowIdx for data source dsIdx; NaN when
        rrdtool had no data for it.
        """
        return self.rrdData.getDoubleAt(self.calcIdx(rowIdx, dsIdx))

    def getElFast(self, rowIdx, dsIdx):
        """
        Like getEl, but only 4 of the 8 bytes of the double are read, which
        leaves a 20 bit mantissa.
        """
        return self.rrdData.getFastDoubleAt(self.calcIdx(rowIdx, dsIdx))

    def getRowTimestamp(self, rowIdx):
        """
        End time of the consolidation interval stored in logical row rowIdx.
        """
        self.checkRowIdx(rowIdx)
        if self.lastUpdate is None:
            raise ValueError("Archive view was built without a last update time")
        step = self.getSecsPerRow()
        lastRowTime = self.lastUpdate - self.lastUpdate % step
        return lastRowTime - (self.rowCount - 1 - rowIdx) * step

    def getCDPPrep(self, dsIdx):
        self.checkDSIdx(dsIdx)
        if self.cdpPrepIdx is None:
            raise ValueError("Archive view was built without a cdp_prep offset")
        return RRDCDPPrep(self.rrdData,
            self.cdpPrepIdx + self.layout.cdpPrepSize * dsIdx)
