from app.llm.client_base import BaseChatClient
from app.llm.prompt_loader import load_prompt_template
from app.llm.response_parser import clean_bullets, parse_json_object
from app.logging.logger import Log
from app.tailoring.exceptions import TailoringError
from app.tailoring.models import RewriteResult


class BulletRewriter:
    """Rewrites resume content into impact-focused bullets for a target job."""

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.5,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._system_prompt = load_prompt_template("rewrite_system.txt")
        self._user_template = load_prompt_template("rewrite_user.txt")

    def rewrite(self, resume: str, job_description: str) -> RewriteResult:
        """Return cleaned bullets.

        Raises:
            TailoringError: if the model output holds no usable bullet.
        """
        prompt = self._user_template.format(resume=resume, job_description=job_description)
        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = parse_json_object(raw_response)
        bullets = clean_bullets(parsed.get("bullets") or raw_response)
        if not bullets:
            raise TailoringError("Model returned no bullets.")

        Log.info(f"Rewrite complete: {len(bullets)} bullets")
        return RewriteResult(bullets=bullets)
