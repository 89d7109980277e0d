"""artinit - initialize build projects against an Artifactory server."""

__version__ = "0.1.0"
