"""
Kindle Clippings Export

Extract highlights and notes from a Kindle "My Clippings.txt" file,
drop re-synced duplicates and export them per document as JSON or
org-mode quote blocks.
"""

__version__ = "1.0.0"
__author__ = "Marcin Miłkowski"
__email__ = "marcinmilkowski@gmail.com"
__license__ = "GPL-3.0-or-later"

# Package metadata
__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
