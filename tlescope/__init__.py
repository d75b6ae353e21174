"""3D Earth viewer with camera-facing billboards, vector helpers and a TLE file reader."""

__version__ = "0.1.0"