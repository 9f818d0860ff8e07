import pytest

from conftest import make_docx, make_pdf
from interview_prep.errors import DocumentDecodeError, UnsupportedFileType, ValidationError
from interview_prep.utils.text_extract import extension_of, extract_document_text, extract_text_from_pdf


def test_txt_is_decoded_as_utf8():
	text = extract_document_text("Python, FastAPI, Kafka: 5 años".encode("utf-8"), "txt")
	assert text == "Python, FastAPI, Kafka: 5 años"


def test_extension_is_case_insensitive_and_tolerates_dot():
	assert extract_document_text(b"hello", "TXT") == "hello"
	assert extract_document_text(b"hello", ".txt") == "hello"


def test_long_text_is_truncated_to_exactly_3000_characters():
	text = extract_document_text(b"x" * 5000, "txt")
	assert len(text) == 3000


def test_short_text_is_not_padded():
	assert len(extract_document_text(b"abc", "txt", limit=3000)) == 3


def test_docx_paragraphs_and_tables():
	data = make_docx(
		["Jane Doe", "Backend engineer working with Django and PostgreSQL"],
		table=[["Skill", "Years"], ["Python", "6"]],
	)
	text = extract_document_text(data, "docx")
	assert "Jane Doe" in text
	assert "Django and PostgreSQL" in text
	assert "Python | 6" in text


def test_doc_extension_uses_word_reader():
	data = make_docx(["Kubernetes operator experience"])
	assert "Kubernetes operator experience" in extract_document_text(data, "doc")


def test_docx_truncation_applies_uniformly():
	data = make_docx(["word " * 1000])
	assert len(extract_document_text(data, "docx")) == 3000


def test_unreadable_word_document_raises_decode_error():
	with pytest.raises(DocumentDecodeError) as excinfo:
		extract_document_text(b"\xd0\xcf\x11\xe0 legacy binary doc", "doc")
	assert excinfo.value.status_code == 415


def test_pdf_text_is_extracted():
	data = make_pdf(["Senior Python Developer", "Built payment APIs"])
	text = extract_document_text(data, "pdf")
	assert "Senior Python Developer" in text


def test_garbage_pdf_yields_empty_text():
	assert extract_text_from_pdf(b"this is not a pdf") == ""


@pytest.mark.parametrize("ext", ["exe", "png", "", "md"])
def test_unsupported_extension(ext):
	with pytest.raises(UnsupportedFileType) as excinfo:
		extract_document_text(b"MZ\x90\x00", ext)
	assert isinstance(excinfo.value, ValidationError)
	assert excinfo.value.status_code == 400


def test_extension_of():
	assert extension_of("Resume.Final.PDF") == "pdf"
	assert extension_of("notes") == ""
	assert extension_of(None) == ""


def test_invalid_utf8_is_replaced_not_dropped():
	text = extract_document_text(b"caf\xe9 owner", "txt")
	assert text == "caf\ufffd owner"
