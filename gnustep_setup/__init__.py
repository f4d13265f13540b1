"""Provision a GNUstep/Objective-C development environment on GhostBSD."""

__version__ = "0.1.0"
