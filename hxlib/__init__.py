"""Chat client support: HAVAL hashing, line history, file helpers and a MegaHAL word model."""

__version__ = "0.1.0"