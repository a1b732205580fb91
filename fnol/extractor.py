"""
Document Text Extractor
Reads the raw text of an uploaded FNOL document (PDF or TXT).
"""
import os

from fnol.logger import setup_logger

log = setup_logger("fnol_agent.extractor")

# Tried in order; utf-8 fails loudly on non-UTF-8 bytes, latin-1 never does
TEXT_ENCODINGS = ('utf-8', 'latin-1')


def _pdfplumber_pages(filepath):
    import pdfplumber
    with pdfplumber.open(filepath) as pdf:
        return [page.extract_text() for page in pdf.pages]


def _pypdf_pages(filepath):
    from pypdf import PdfReader
    return [page.extract_text() for page in PdfReader(filepath).pages]


# (name, page reader) in order of preference
PDF_BACKENDS = [
    ("pdfplumber", _pdfplumber_pages),
    ("pypdf", _pypdf_pages),
]


class DocumentExtractor:
    """Turns a PDF or TXT claim document into the raw text the parser reads."""

    def __init__(self):
        self.readers = {
            '.pdf': self.read_pdf,
            '.txt': self.read_txt,
        }

    def extract(self, filepath: str) -> str:
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"File not found: {filepath}")

        ext = os.path.splitext(filepath)[1].lower()
        reader = self.readers.get(ext)
        if reader is None:
            raise ValueError(f"Unsupported file type: {ext}. Only PDF and TXT are supported.")
        return reader(filepath)

    def read_pdf(self, filepath: str) -> str:
        """Page texts joined by blank lines, from the first backend that can open the file."""
        name = os.path.basename(filepath)
        failures = []
        for backend, read_pages in PDF_BACKENDS:
            try:
                pages = read_pages(filepath)
            except Exception as e:
                log.warning(f"[PDF] {backend} failed on '{name}': {e}")
                failures.append(f"{backend}: {e}")
                continue
            return "\n\n".join(text for text in pages if text)
        raise RuntimeError(f"Failed to extract text from PDF '{name}' ({'; '.join(failures)})")

    def read_txt(self, filepath: str) -> str:
        for encoding in TEXT_ENCODINGS[:-1]:
            try:
                with open(filepath, 'r', encoding=encoding) as f:
                    return f.read()
            except UnicodeDecodeError:
                log.info(f"[TXT] '{os.path.basename(filepath)}' is not {encoding}, trying the next encoding")
        with open(filepath, 'r', encoding=TEXT_ENCODINGS[-1]) as f:
            return f.read()
