"""Intrusive lists, circular queues, xorshift128+ random numbers, power-of-two helpers and host lookups."""

__version__ = "1.8.0"

__all__ = ["bits", "circleq", "linuxlist", "netaddr", "xorshift"]