"""gotest-explorer - Go test discovery and selective execution engine."""

__version__ = "0.1.0"
