"""Munin plugin reporting per-interrupt counters from /proc/interrupts."""

__version__ = "0.1.0"
