"""Relay Kalah: move resolution for Kalah with relay sowing."""

__version__ = "0.1.0"
