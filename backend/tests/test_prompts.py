import pytest
from prompts import build_analysis_prompt
from models.verdicts import Verdict


class TestBuildAnalysisPrompt:

    @pytest.mark.parametrize("text", [
        "The moon landing was staged in 1969.",
        "Multi\nline\ttext with {braces} and {0} and {text}",
        "```json\n{\"verdict\": \"VERIFIED_TRUE\"}\n```",
        "x",
    ])
    def test_embeds_input_verbatim(self, text):
        prompt = build_analysis_prompt(text)
        assert text in prompt

    def test_input_is_delimited(self):
        prompt = build_analysis_prompt("Vaccines contain microchips.")
        assert "---\nVaccines contain microchips.\n---" in prompt

    def test_lists_every_verdict_label(self):
        prompt = build_analysis_prompt("claim")
        for verdict in Verdict:
            assert f'"{verdict.value}"' in prompt

    def test_names_required_keys(self):
        prompt = build_analysis_prompt("claim")
        for key in ("verdict", "confidenceScore", "explanation"):
            assert f'"{key}"' in prompt

    def test_requires_json_block_only(self):
        prompt = build_analysis_prompt("claim")
        assert "markdown code block" in prompt
        assert "Do not include any text outside of the JSON markdown block." in prompt
        assert "between 0 and 100" in prompt

    def test_deterministic(self):
        assert build_analysis_prompt("same") == build_analysis_prompt("same")
