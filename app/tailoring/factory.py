from app.config.settings import Settings
from app.llm.factory import ChatClientFactory
from app.tailoring.analyzer import ResumeAnalyzer
from app.tailoring.rewriter import BulletRewriter


class TailoringFactory:
    """Wires the configured chat client into the tailoring services."""

    @classmethod
    def create_analyzer(cls, settings: Settings) -> ResumeAnalyzer:
        return ResumeAnalyzer(
            client=ChatClientFactory.create(settings),
            model=ChatClientFactory.model_name(settings),
            temperature=settings.analyze_temperature,
        )

    @classmethod
    def create_rewriter(cls, settings: Settings) -> BulletRewriter:
        return BulletRewriter(
            client=ChatClientFactory.create(settings),
            model=ChatClientFactory.model_name(settings),
            temperature=settings.rewrite_temperature,
        )
