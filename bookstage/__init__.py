"""
bookstage - build pipeline stages for book manuscripts

A stage consumes a manuscript descriptor, performs one step of the book build
and hands the manuscript on to the next stage.

Architecture:
- PDF Context: typesets the rendered HTML of a build into book.pdf with PrinceXML
"""

__version__ = "0.1.0"
