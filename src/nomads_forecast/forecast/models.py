# models.py

from enum import Enum


class Models(str, Enum):
    GFS_0P25 = "gfs_0p25"
    GFS_0P25_1HR = "gfs_0p25_1hr"
    GFS_0P50 = "gfs_0p50"
    GFS_1P00 = "gfs_1p00"
