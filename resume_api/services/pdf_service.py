"""PDF text extraction.

Thin wrapper over PyPDF2. Anything that goes wrong while parsing surfaces as
ExtractionError so the request layer can treat it like any other failure.
"""
from __future__ import annotations

import io
from typing import List

import PyPDF2

from ..errors import ExtractionError


class PdfTextExtractor:
    def extract(self, data: bytes) -> str:
        if not data:
            raise ExtractionError("Empty upload")
        try:
            reader = PyPDF2.PdfReader(io.BytesIO(data))
            parts: List[str] = []
            for page in reader.pages:
                parts.append(page.extract_text() or "")
        except Exception as e:
            raise ExtractionError(f"PDF extraction failed: {type(e).__name__}: {e}") from e
        return "\n".join(parts).strip()
