from __future__ import annotations

import logging
import zipfile
from io import BytesIO

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from pdfminer.high_level import extract_text as pdfminer_extract_text
from PyPDF2 import PdfReader

from interview_prep.errors import DocumentDecodeError, UnsupportedFileType


logger = logging.getLogger(__name__)

DEFAULT_MAX_CHARS = 3000
SUPPORTED_EXTENSIONS = ("pdf", "docx", "doc", "txt")


def extension_of(filename: str | None) -> str:
	name = (filename or "").strip()
	if "." not in name:
		return ""
	return name.rsplit(".", 1)[-1].lower()


def extract_text_from_pdf(data: bytes) -> str:
	"""Extract text from PDF bytes.

	Strategy:
	1) Try PyPDF2 (fast, works on many text PDFs)
	2) Fallback to pdfminer.six (more robust)
	Returns empty string when neither finds any text.
	"""
	parts: list[str] = []
	try:
		reader = PdfReader(BytesIO(data))
		for index, page in enumerate(reader.pages):
			try:
				text = page.extract_text() or ""
			except Exception as exc:
				logger.debug("PyPDF2 failed on page %d: %s", index, exc)
				continue
			if text:
				parts.append(text)
	except Exception as exc:
		logger.info("PyPDF2 could not read document, falling back to pdfminer: %s", exc)
	if parts:
		return "\n".join(parts)

	try:
		return pdfminer_extract_text(BytesIO(data)) or ""
	except Exception as exc:
		logger.warning("pdfminer could not read document: %s", exc)
		return ""


def extract_text_from_docx(data: bytes) -> str:
	"""Paragraph text followed by table cell text, one block per line."""
	try:
		document = Document(BytesIO(data))
	except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
		# Legacy binary .doc files land here too
		raise DocumentDecodeError(
			"Unable to read Word document. Please upload a .docx, .pdf or .txt file.",
			details={"error": str(exc)},
		) from exc

	lines = [p.text for p in document.paragraphs if p.text.strip()]
	for table in document.tables:
		for row in table.rows:
			cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
			if cells:
				lines.append(" | ".join(cells))
	return "\n".join(lines)


def extract_text_from_txt(data: bytes) -> str:
	return data.decode("utf-8", errors="replace")


def extract_document_text(data: bytes, extension: str, limit: int = DEFAULT_MAX_CHARS) -> str:
	"""Return plain text for an uploaded document, cut to ``limit`` characters.

	``extension`` is matched case-insensitively (``"PDF"``, ``".pdf"`` and
	``"pdf"`` are equivalent). Anything outside ``SUPPORTED_EXTENSIONS`` raises
	``UnsupportedFileType`` before any decoding happens.
	"""
	ext = (extension or "").strip().lstrip(".").lower()
	if ext not in SUPPORTED_EXTENSIONS:
		raise UnsupportedFileType(ext)

	if ext == "pdf":
		text = extract_text_from_pdf(data)
	elif ext == "txt":
		text = extract_text_from_txt(data)
	else:
		text = extract_text_from_docx(data)

	if len(text) > limit:
		logger.debug("Truncating %s text from %d to %d characters", ext, len(text), limit)
	return text[:limit]
