"""
-------
jsondir
-------

A tiny key-value store that keeps each record as a JSON file on disk.
"""
