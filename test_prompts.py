from interview_prep.services.prompts import (
	concept_explain_prompt,
	question_answer_prompt,
	resume_based_question_prompt,
)


def test_question_prompt_names_every_input():
	prompt = question_answer_prompt("Backend Developer", "3 years", "Node.js,MongoDB", 5)
	for value in ("Backend Developer", "3 years", "Node.js,MongoDB", "5 interview questions"):
		assert value in prompt
	assert "valid JSON" in prompt
	assert "\"question\"" in prompt and "\"answer\"" in prompt


def test_prompts_are_deterministic():
	assert question_answer_prompt("a", "b", "c", 1) == question_answer_prompt("a", "b", "c", 1)
	assert concept_explain_prompt("What is a closure?") == concept_explain_prompt("What is a closure?")


def test_explanation_prompt_requests_title_and_explanation():
	prompt = concept_explain_prompt("What is event loop?")
	assert "What is event loop?" in prompt
	assert "\"title\"" in prompt and "\"explanation\"" in prompt


def test_batch_prompts_share_the_same_output_shape():
	role_prompt = question_answer_prompt("SRE", "2 years", "Linux", 3)
	resume_prompt = resume_based_question_prompt("Kafka, Go", "2 years", "SRE", 3)
	shape = '"question": "Question here?"'
	assert shape in role_prompt
	assert shape in resume_prompt


def test_resume_prompt_embeds_document():
	prompt = resume_based_question_prompt("Led migration to Kubernetes", "5 years", "Platform Engineer", 10)
	assert "Led migration to Kubernetes" in prompt
	assert "Platform Engineer" in prompt
	assert "10 interview questions" in prompt
