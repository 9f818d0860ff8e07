import json

import pytest

from interview_prep.errors import MalformedResponse, SchemaMismatch
from interview_prep.services.normalizer import (
	normalize_response,
	parse_explanation,
	parse_question_list,
	strip_code_fences,
)


def test_leading_and_trailing_fence():
	assert normalize_response("```json\n{\"a\":1}\n```") == {"a": 1}


def test_fences_surrounded_by_prose():
	assert normalize_response("prefix ```json {\"a\":1} ``` suffix") == {"a": 1}


def test_fence_tag_is_case_insensitive():
	assert normalize_response("```JSON\n[1, 2]\n```") == [1, 2]


def test_untagged_fence_and_missing_closing_fence():
	assert normalize_response("```\n{\"a\": 2}\n```") == {"a": 2}
	assert normalize_response("```json\n{\"a\": 3}") == {"a": 3}


def test_unfenced_json_passes_through():
	assert normalize_response("  [{\"question\": \"q\", \"answer\": \"a\"}]  ") == [{"question": "q", "answer": "a"}]


def test_code_blocks_inside_answers_are_kept():
	answer = "Use slicing:\n```python\nxs[::-1]\n```"
	raw = json.dumps([{"question": "Reverse a list?", "answer": answer}])
	data = normalize_response("```json\n" + raw + "\n```")
	assert data == [{"question": "Reverse a list?", "answer": answer}]


def test_code_blocks_inside_unfenced_json_are_kept():
	answer = "```js\nconst x = 1;\n```"
	assert normalize_response(json.dumps({"title": "t", "explanation": answer}))["explanation"] == answer


def test_trailing_fence_after_bare_json():
	assert normalize_response("[1]\n```") == [1]


def test_strip_code_fences_trims_whitespace():
	assert strip_code_fences("\n\n```json\n  {}  \n```\n") == "{}"
	assert strip_code_fences(None) == ""


def test_not_json_raises_malformed_response_with_cleaned_text():
	with pytest.raises(MalformedResponse) as excinfo:
		normalize_response("not json at all")
	err = excinfo.value
	assert err.cleaned_text == "not json at all"
	assert err.parser_message
	assert err.status_code == 500
	assert err.to_dict()["raw"] == "not json at all"


def test_parse_question_list():
	raw = "```json\n[{\"question\": \"What is GIL?\", \"answer\": \"A lock.\"}]\n```"
	questions = parse_question_list(raw)
	assert [q.question for q in questions] == ["What is GIL?"]


def test_parse_question_list_accepts_wrapped_array():
	raw = "{\"questions\": [{\"question\": \"q1\", \"answer\": \"a1\"}]}"
	assert parse_question_list(raw)[0].answer == "a1"


def test_question_list_shape_mismatch():
	with pytest.raises(SchemaMismatch) as excinfo:
		parse_question_list("[{\"q\": \"missing keys\"}]")
	assert excinfo.value.to_dict()["raw"] == [{"q": "missing keys"}]


def test_parse_explanation():
	explanation = parse_explanation("```json\n{\"title\": \"Closures\", \"explanation\": \"Functions capture scope.\"}\n```")
	assert explanation.title == "Closures"


def test_explanation_shape_mismatch():
	with pytest.raises(SchemaMismatch):
		parse_explanation("[1, 2, 3]")
