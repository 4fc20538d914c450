import pytest

from app.documents.filenames import safe_filename


class TestSafeFilename:
    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Draft Resume", "Draft_Resume.txt"),
            ("My Resume / v2", "My_Resume_v2.txt"),
            ("report-final.v1", "report-final.v1.txt"),
            ("Résumé", "R_sum_.txt"),
        ],
    )
    def test_replaces_unsafe_runs(self, title: str, expected: str) -> None:
        assert safe_filename(title, ".txt") == expected

    def test_truncates_stem_to_64_characters(self) -> None:
        result = safe_filename("a" * 100, ".docx")
        assert result == "a" * 64 + ".docx"
