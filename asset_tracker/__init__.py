"""Interactive tracker for company computers and phones.

Records typed at the prompt become ``Asset`` objects whose currency follows
their office. The collection is exported to a flat delimited file and printed
as an aligned table coloured by how close each asset is to end of life.
"""

__version__ = "0.1.0"
