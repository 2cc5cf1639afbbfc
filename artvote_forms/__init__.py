"""
Art contest voting form builder.

Reads contest submissions from the response spreadsheet, re-hosts every
submission image and assembles a Google Form for the voting round.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
