"""
Multilingual Document QA

Upload PDFs in any language and ask questions about them in English.

Features:
- In-memory PDF processing (no file storage)
- Page-level text extraction and page viewer
- Google Gemini AI integration for answers and translation
- Source citations resolved back to document pages
- Streamlit client
"""

__version__ = "1.0.0"
__author__ = "Document QA Team"
__description__ = "Ask questions about uploaded PDFs and get cited answers"
