"""
SEO Page Auditor
Single-page on-page SEO analysis: meta tags, headings and keyword density.
"""

__version__ = "1.0.0"
