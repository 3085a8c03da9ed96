"""
Structures package for the Linked Toolbox.
Contains the node primitives and the FIFO-only queue the algorithms operate on.
"""
