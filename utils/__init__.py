"""
Utilities package for the Linked Toolbox.
Contains the shared logger and chain inspection helpers.
"""
