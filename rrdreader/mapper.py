"""
Gives the RRD views a dictionary form and an "rrdtool info" style listing.

Each mapper names its fields in __fields__ as (key, getter name) pairs; the
getters live on the view classes.
"""
import sys


class Mapper(object):
    """
    """
    __fields__ = []

    def getData(self):
        items = {}
        for name, getter in self.__fields__:
            items[name] = getattr(self, getter)()
        return items

    def _printLines(self, prefix, out):
        # own fields only, nested views print themselves
        for name, value in Mapper.getData(self).items():
            if value is None:
                continue
            print("%s%s = %s" % (prefix, name, str(value)), file=out)


class CDPPrepMapper(Mapper):
    """
    """
    __fields__ = [
        ("value", "getValue"),
        ("unknown_datapoints", "getUnknownDatapoints"),
        ("primary_value", "getPrimaryValue"),
        ("secondary_value", "getSecondaryValue"),
        ]

    def printInfo(self, prefix, index, out=None):
        self._printLines("%s.cdp_prep[%s]." % (prefix, index),
                         out or sys.stdout)


class DSMapper(Mapper):
    """
    """
    __fields__ = [
        ("index", "getIdx"),
        ("type", "getType"),
        ("minimal_heartbeat", "getMinimalHeartbeat"),
        ("min", "getMin"),
        ("max", "getMax"),
        ("last_ds", "getLastDS"),
        ("value", "getValue"),
        ("unknown_sec", "getUnknownSec"),
        ]

    def getData(self):
        data = super(DSMapper, self).getData()
        data["name"] = self.getName()
        return data

    def printInfo(self, out=None):
        self._printLines("ds[%s]." % self.getName(), out or sys.stdout)


class RRAMapper(Mapper):
    """
    """
    __fields__ = [
        ("cf", "getCFName"),
        ("rows", "getNrRows"),
        ("cur_row", "getCurRow"),
        ("pdp_per_row", "getPdpPerRow"),
        ("xff", "getXff"),
        ]

    def getData(self):
        data = super(RRAMapper, self).getData()
        data["cdp_prep"] = [self.getCDPPrep(idx).getData()
                            for idx in range(self.getNrDSs())]
        return data

    def printInfo(self, out=None):
        out = out or sys.stdout
        prefix = "rra[%s]" % self.getIdx()
        self._printLines(prefix + ".", out)
        for idx in range(self.getNrDSs()):
            self.getCDPPrep(idx).printInfo(prefix, idx, out)


class RRDMapper(Mapper):
    """
    """
    __fields__ = [
        ("rrd_version", "getVersion"),
        ("step", "getStep"),
        ("last_update", "getLastUpdate"),
        ]

    def getData(self):
        """
        """
        data = super(RRDMapper, self).getData()
        data["ds"] = [self.getDS(idx).getData()
                      for idx in range(self.getNrDSs())]
        data["rra"] = [self.getRRA(idx).getData()
                       for idx in range(self.getNrRRAs())]
        return data

    def printInfo(self, out=None):
        out = out or sys.stdout
        self._printLines("", out)
        for idx in range(self.getNrDSs()):
            self.getDS(idx).printInfo(out)
        for idx in range(self.getNrRRAs()):
            self.getRRA(idx).printInfo(out)
