from pathlib import Path

from app.llm.exceptions import LLMError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a prompt template bundled with the package.

    Args:
        name: File name of the template, e.g. ``analyze_user.txt``.
        prompt_dir: Directory to read from. Defaults to the bundled prompts.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        LLMError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LLMError(f"Failed to load prompt template '{name}': {exc}") from exc
