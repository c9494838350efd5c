"""Building blocks for PAR 1.0 and PAR 2.0 parity archives: MD5, Galois fields, PAR 1.0 records, paths and disk files."""

__version__ = "1.0.0"
__all__ = ["diskfile", "galois", "md5", "par1format", "paths", "recovery"]