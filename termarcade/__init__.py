"""Terminal arcade: a curses space shooter and a set of small terminal games and toys."""

__version__ = "0.1.0"