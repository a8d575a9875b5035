import math
from datetime import datetime, timezone


def isUnknown(value):
    """
    RRD files mark missing samples with NaN.

    >>> isUnknown(float("nan"))
    True
    >>> isUnknown(0.04)
    False
    """
    return math.isnan(value)


def fromEpoch(seconds, usec=0):
    '''
    >>> fromEpoch(920808900)
    datetime.datetime(1999, 3, 7, 12, 15, tzinfo=datetime.timezone.utc)
    >>> fromEpoch(920808900, 250000).microsecond
    250000
    '''
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return dt.replace(microsecond=usec)
