"""
Algorithms package for the Linked Toolbox.
Contains linked list, queue, bracket and score algorithms.
"""
