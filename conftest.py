from __future__ import annotations

from io import BytesIO
from typing import List, Optional

import pytest
from docx import Document
from fastapi.testclient import TestClient

from interview_prep.config import Settings
from interview_prep.main import create_app


class StubLLMClient:
	"""Stands in for the provider; records every prompt it receives."""

	provider = "stub"
	model = "stub-model"

	def __init__(self, response: str = "", error: Optional[Exception] = None) -> None:
		self.response = response
		self.error = error
		self.prompts: List[str] = []

	async def generate(self, prompt: str) -> str:
		self.prompts.append(prompt)
		if self.error is not None:
			raise self.error
		return self.response


def _pdf_escape(text: str) -> str:
	return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(lines: List[str]) -> bytes:
	"""Single-page PDF with one Helvetica text line per entry."""
	ops = ["BT", "/F1 12 Tf", "72 720 Td"]
	for i, line in enumerate(lines):
		if i:
			ops.append("0 -16 Td")
		ops.append(f"({_pdf_escape(line)}) Tj")
	ops.append("ET")
	content = "\n".join(ops).encode("latin-1")

	objects = [
		b"<< /Type /Catalog /Pages 2 0 R >>",
		b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
		b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
		b"/Resources << /Font << /F1 5 0 R >> >> >>",
		b"<< /Length " + str(len(content)).encode() + b" >>\nstream\n" + content + b"\nendstream",
		b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
	]

	out = BytesIO()
	out.write(b"%PDF-1.4\n")
	offsets = []
	for number, body in enumerate(objects, start=1):
		offsets.append(out.tell())
		out.write(f"{number} 0 obj\n".encode() + body + b"\nendobj\n")
	xref_at = out.tell()
	out.write(f"xref\n0 {len(objects) + 1}\n".encode())
	out.write(b"0000000000 65535 f \n")
	for offset in offsets:
		out.write(f"{offset:010d} 00000 n \n".encode())
	out.write(f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode())
	return out.getvalue()


def make_docx(paragraphs: List[str], table: Optional[List[List[str]]] = None) -> bytes:
	document = Document()
	for text in paragraphs:
		document.add_paragraph(text)
	if table:
		grid = document.add_table(rows=len(table), cols=len(table[0]))
		for r, row in enumerate(table):
			for c, value in enumerate(row):
				grid.cell(r, c).text = value
	buf = BytesIO()
	document.save(buf)
	return buf.getvalue()


@pytest.fixture
def settings(tmp_path) -> Settings:
	return Settings(
		_env_file=None,
		api_key=None,
		llm_provider="gemini",
		gemini_api_key=None,
		groq_api_key=None,
		data_dir=str(tmp_path / "sessions"),
		max_upload_bytes=64 * 1024,
	)


@pytest.fixture
def stub_llm() -> StubLLMClient:
	return StubLLMClient()


@pytest.fixture
def app(settings, stub_llm):
	return create_app(settings, llm_client=stub_llm)


@pytest.fixture
def client(app):
	with TestClient(app) as c:
		yield c
