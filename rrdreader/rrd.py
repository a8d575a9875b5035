from rrdreader import mapper, util
from rrdreader.binary import BinaryFile
from rrdreader.header import RRDHeader
from rrdreader.log import Logging
from rrdreader.views import RRDDS, RRDRRA, RRDCDPPrep

log = Logging()


class RRDFile(mapper.RRDMapper):
    """
    Gives access to the fields of an RRD file held in memory.

    rrdData is any object offering getByteAt, getShortAt, getLongAt,
    getDoubleAt, getFastDoubleAt and getCStringAt, such as a BinaryFile.
    It must not change while the RRDFile or any of its views is in use.

    Data sources and archives are looked up by index; each call builds a
    fresh view, so the order of the calls does not matter.
    """
    def __init__(self, rrdData):
        self.rrdData = rrdData
        self.rrdHeader = RRDHeader(rrdData)
        self.rrdHeader.loadRowCounts()

    @classmethod
    def fromPath(cls, path):
        log.debug("Loading RRD file %s" % path)
        return cls(BinaryFile.fromPath(path))

    # ===================================
    # Start of user functions

    def getVersion(self):
        return self.rrdHeader.getVersion()

    def getAlign(self):
        return self.rrdHeader.getAlign()

    def getStep(self):
        return self.rrdHeader.getStep()

    def getLastUpdate(self):
        return self.rrdHeader.getLastUpdate()

    def getLastUpdateUsec(self):
        return self.rrdHeader.getLastUpdateUsec()

    def getLastUpdateDatetime(self):
        return util.fromEpoch(self.getLastUpdate(), self.getLastUpdateUsec())

    def getNrDSs(self):
        return self.rrdHeader.getNrDSs()

    def getDS(self, idx):
        return self.rrdHeader.getDS(idx)

    def getDSNames(self):
        return [self.getDS(idx).getName() for idx in range(self.getNrDSs())]

    def getDSbyName(self, name):
        for idx in range(self.getNrDSs()):
            ds = self.getDS(idx)
            if ds.getName() == name:
                return ds
        raise KeyError("No data source named %r" % name)

    def getNrRRAs(self):
        return self.rrdHeader.getNrRRAs()

    def getRRA(self, idx):
        header = self.rrdHeader
        header.checkRRAIdx(idx)
        return RRDRRA(self.rrdData, header.layout,
                      header.rraDefOffset(idx),
                      header.rraPtrOffset(idx),
                      header.headerSize,
                      header.rowCounts[idx], header.rowCountSums[idx],
                      header.dsCount, header.pdpStep,
                      idx=idx,
                      cdpPrepIdx=header.cdpPrepOffset(idx),
                      lastUpdate=header.getLastUpdate())


__all__ = ["RRDFile", "RRDDS", "RRDRRA", "RRDCDPPrep"]
