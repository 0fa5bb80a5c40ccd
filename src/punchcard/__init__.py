"""Punchcard - IBM 80-column punch card codec.

Punchcard converts between printable text, Hollerith punch patterns and the
raw binary and EBCDIC encodings of IBM 80-column cards, using the character
set of the IBM 029 keypunch.

Example:
    $ punchcard encode "HELLO WORLD" -o hello.bin

This will punch HELLO WORLD on a text card and save it in the dense
108-byte binary layout.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
