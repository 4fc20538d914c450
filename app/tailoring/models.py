from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnalysisResult:
    """Resume/job-description alignment produced by the analyzer."""

    analysis: str = ""
    top_terms: list[str] = field(default_factory=list)
    missing_terms: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RewriteResult:
    bullets: list[str]
