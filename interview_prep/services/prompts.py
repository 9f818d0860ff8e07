from __future__ import annotations


QUESTION_LIST_SHAPE = (
	"[\n"
	"  {\n"
	"    \"question\": \"Question here?\",\n"
	"    \"answer\": \"Answer here.\"\n"
	"  },\n"
	"  ...\n"
	"]"
)

EXPLANATION_SHAPE = (
	"{\n"
	"  \"title\": \"Short title here\",\n"
	"  \"explanation\": \"Explanation here.\"\n"
	"}"
)

JSON_ONLY_RULE = "Important: Do NOT add any extra text. Only return valid JSON."


def question_answer_prompt(role: str, experience: str, topics_to_focus: str, number_of_questions: int) -> str:
	return (
		"You are an AI trained to generate technical interview questions and answers.\n\n"
		"Task:\n"
		f"- Role: {role}\n"
		f"- Candidate Experience: {experience}\n"
		f"- Focus Topics: {topics_to_focus}\n"
		f"- Write {number_of_questions} interview questions.\n"
		"- For each question, generate a detailed but beginner-friendly answer.\n"
		"- If the answer needs a code example, add a small code block inside the answer string.\n"
		"- Keep formatting very clean.\n"
		"- Return a pure JSON array like:\n"
		f"{QUESTION_LIST_SHAPE}\n"
		f"{JSON_ONLY_RULE}"
	)


def concept_explain_prompt(question: str) -> str:
	return (
		"You are an AI trained to generate explanations for a given interview question.\n\n"
		"Task:\n"
		"- Explain the following interview question and its concept in depth as if you're teaching a beginner developer.\n"
		f"- Question: \"{question}\"\n"
		"- After the explanation, provide a short and clear title that summarizes the concept for the article or page header.\n"
		"- If the explanation includes a code example, provide a small code block.\n"
		"- Keep the formatting very clean and clear.\n"
		"- Return the result as a valid JSON object in the following format:\n"
		f"{EXPLANATION_SHAPE}\n"
		f"{JSON_ONLY_RULE}"
	)


def resume_based_question_prompt(resume_text: str, experience: str, job_title: str, number_of_questions: int) -> str:
	return (
		"You are an AI trained to generate interview questions and answers tailored to a candidate's "
		"resume or a job description.\n\n"
		"Task:\n"
		f"- Target Job Title: {job_title}\n"
		f"- Candidate Experience: {experience}\n"
		f"- Write {number_of_questions} interview questions grounded in the document below: its skills, "
		"projects, responsibilities and technologies.\n"
		"- For each question, generate a detailed but beginner-friendly answer.\n"
		"- If the answer needs a code example, add a small code block inside the answer string.\n"
		"- Return a pure JSON array like:\n"
		f"{QUESTION_LIST_SHAPE}\n"
		f"{JSON_ONLY_RULE}\n\n"
		"Document:\n"
		"\"\"\"\n"
		f"{resume_text}\n"
		"\"\"\""
	)
