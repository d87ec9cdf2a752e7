"""SubDemux - read timed text subtitle files into a cue timeline."""

__version__ = "0.1.0"
