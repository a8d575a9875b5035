"""
The following follows the rrd_format.h file in the rrdtool source code.

The RRD File Layout
-------------------

An RRD file is a straight dump of the C structures rrdtool keeps in memory,
written one after the other:

 stat_head  - cookie "RRD", version "0003"/"0004", a float cookie used to
       detect the struct packing, ds_cnt, rra_cnt, pdp_step and ten unused
       parameters.

 ds_def     - one per data source (ds): char ds_nam[20], char dst[20],
       unival par[10]. par[0] is the minimal heartbeat, par[1] the minimum
       and par[2] the maximum value.

 rra_def    - one per round robin archive (rra): char cf_nam[20],
       ulong row_cnt, ulong pdp_cnt, unival par[10]. par[0] is the xff.

 live_head  - time_t last_up, long last_up_usec.

 pdp_prep   - one per ds: char last_ds[30], unival scratch[10].

 cdp_prep   - one per (rra, ds) pair, rra major: unival scratch[10].

 rra_ptr    - one per rra: ulong cur_row, the row written last.

 rrd_value  - the rows of every rra, packed back to back. A row holds one
       double for each ds.

Since these are raw structs, the size of a long and the padding the compiler
put between fields depend on the platform that wrote the file. Only the Linux
x86 layouts are known here, in their 32 and 64 bit flavours.
"""
RRD_COOKIE = "RRD"
VERSION3 = "0003"
VERSION4 = "0004"
SUPPORTED_VERSIONS = (VERSION3, VERSION4)
FLOAT_COOKIE = 8.642135e130

COOKIE_SIZE = 4
VERSION_SIZE = 5
VERSION_OFFSET = 4

DOUBLE_SIZE = 8

# ds_def
DS_NAME_SIZE = 20
DS_TYPE_OFFSET = 20
DS_HEARTBEAT_OFFSET = 40
DS_MIN_OFFSET = 48
DS_MAX_OFFSET = 56
DS_DEF_SIZE = 120

# rra_def
CF_NAME_SIZE = 20

# pdp_prep
LAST_DS_SIZE = 30
PDP_UNKNOWN_SEC_OFFSET = 32
PDP_VALUE_OFFSET = 40
PDP_PREP_SIZE = 112

# cdp_prep
CDP_VALUE_OFFSET = 0
CDP_UNKNOWN_PDP_OFFSET = 8
CDP_PRIMARY_VALUE_OFFSET = 64
CDP_SECONDARY_VALUE_OFFSET = 72
CDP_PREP_SIZE = 80


class Layout(object):
    """
    Offsets and record sizes that change with the struct packing of the file.

    >>> ALIGN32.topHeaderSize, ALIGN64.topHeaderSize
    (112, 128)
    >>> layoutFor(64) is ALIGN64
    True
    """
    def __init__(self, align, floatCookieOffset, dsCountOffset,
                 rraCountOffset, pdpStepOffset, topHeaderSize, rraDefSize,
                 rowCountOffset, pdpPerRowOffset, xffOffset, liveHeadSize,
                 lastUpUsecOffset, rraPtrSize):
        self.align = align
        self.floatCookieOffset = floatCookieOffset
        self.dsCountOffset = dsCountOffset
        self.rraCountOffset = rraCountOffset
        self.pdpStepOffset = pdpStepOffset
        self.topHeaderSize = topHeaderSize
        self.dsDefSize = DS_DEF_SIZE
        self.rraDefSize = rraDefSize
        self.rowCountOffset = rowCountOffset
        self.pdpPerRowOffset = pdpPerRowOffset
        self.xffOffset = xffOffset
        self.liveHeadSize = liveHeadSize
        self.lastUpUsecOffset = lastUpUsecOffset
        self.pdpPrepSize = PDP_PREP_SIZE
        self.cdpPrepSize = CDP_PREP_SIZE
        self.rraPtrSize = rraPtrSize

    def __repr__(self):
        return "<Layout %s-bit>" % self.align


ALIGN32 = Layout(
    align=32,
    floatCookieOffset=12,
    dsCountOffset=20,
    rraCountOffset=24,
    pdpStepOffset=28,
    topHeaderSize=112,
    rraDefSize=108,
    rowCountOffset=20,
    pdpPerRowOffset=24,
    xffOffset=28,
    liveHeadSize=8,
    lastUpUsecOffset=4,
    rraPtrSize=4,
    )

ALIGN64 = Layout(
    align=64,
    floatCookieOffset=16,
    dsCountOffset=24,
    rraCountOffset=32,
    pdpStepOffset=40,
    topHeaderSize=128,
    rraDefSize=120,
    rowCountOffset=24,
    pdpPerRowOffset=32,
    xffOffset=40,
    liveHeadSize=16,
    lastUpUsecOffset=8,
    rraPtrSize=8,
    )

# tried in this order
LAYOUTS = (ALIGN32, ALIGN64)


def layoutFor(align):
    for layout in LAYOUTS:
        if layout.align == align:
            return layout
    raise ValueError("No layout for %s-bit alignment" % align)


if __name__ == "__main__":
    import doctest
    doctest.testmod()
