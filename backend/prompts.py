from models.verdicts import Verdict

VERDICT_CHOICES = ", ".join(f'"{v.value}"' for v in Verdict)

ANALYSIS_PROMPT = """
Analyze the following text for misinformation. Your task is to act as an expert fact-checker.

Text to analyze:
---
{text}
---

Perform the following steps:
1.  Identify the main claims made in the text.
2.  Use your search capabilities to find credible, neutral sources to verify these claims.
3.  Based on your findings, provide a single, overall verdict for the text. The verdict must be one of the following exact strings: {verdicts}.
4.  Provide a confidence score as an integer between 0 and 100 for your verdict.
5.  Write a concise, neutral explanation for your verdict, explaining which claims are true, false, or misleading and why. Mention the evidence you found.

Your final output must be a single JSON object inside a markdown code block. The JSON object must have the following structure: {{ "verdict": "...", "confidenceScore": ..., "explanation": "..." }}. Do not include any text outside of the JSON markdown block.
"""


def build_analysis_prompt(text: str) -> str:
    """Render the fact-checking prompt around the user's text, embedded verbatim."""
    return ANALYSIS_PROMPT.format(text=text, verdicts=VERDICT_CHOICES)
