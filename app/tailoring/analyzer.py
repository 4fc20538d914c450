"""AI-powered resume/job-description alignment analysis."""

from app.llm.client_base import BaseChatClient
from app.llm.prompt_loader import load_prompt_template
from app.llm.response_parser import as_string_list, parse_json_object
from app.logging.logger import Log
from app.tailoring.models import AnalysisResult


class ResumeAnalyzer:
    """Asks the model which job terms a resume covers and which it misses."""

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.2,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._system_prompt = load_prompt_template("analyze_system.txt")
        self._user_template = load_prompt_template("analyze_user.txt")

    def analyze(self, resume: str, job_description: str) -> AnalysisResult:
        prompt = self._user_template.format(resume=resume, job_description=job_description)
        Log.debug(f"Analyze prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = parse_json_object(raw_response)
        result = AnalysisResult(
            analysis=str(parsed.get("analysis") or ""),
            top_terms=as_string_list(parsed.get("topTerms")),
            missing_terms=as_string_list(parsed.get("missingTerms")),
            suggestions=as_string_list(parsed.get("suggestions")),
        )
        Log.info(
            f"Analysis complete: {len(result.top_terms)} top terms, "
            f"{len(result.missing_terms)} missing terms"
        )
        return result
