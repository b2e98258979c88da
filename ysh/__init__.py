"""
ysh - A small shell over an in-memory hierarchical file system.

Main API:
    from ysh.fs import InodeState

    state = InodeState()
    state.mkdir("docs")
    state.cd("docs")
    state.make(["notes", "hello", "world"])
    state.cat(["notes"])     # ['hello world']
    state.pwd()              # '/docs'

Interactive use:
    ysh shell
    ysh run script.ysh
"""

from .fs import InodeState

__version__ = "0.1.0"
__all__ = ["InodeState"]
