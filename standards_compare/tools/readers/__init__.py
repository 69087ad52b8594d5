"""
Document readers

Supported formats:
- PDF (.pdf), one page per PDF page
- Word documents (.docx)
- HTML / XHTML chapters (.html, .htm, .xhtml)
- Plain text (.txt, .md, .rst), form feeds split pages
"""

from .readers_service import ReadersService

__all__ = ['ReadersService']
