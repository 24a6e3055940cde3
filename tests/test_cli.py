"""Tests for the typer CLI."""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from cv_arbiter.cli import app

runner = CliRunner()


@pytest.fixture
def bullets_file(tmp_path, strategic_bullets):
    path = tmp_path / "bullets.md"
    path.write_text("\n".join(f"- {b}" for b in strategic_bullets), encoding="utf-8")
    return path


@pytest.fixture
def jd_file(tmp_path, sample_jd_text):
    path = tmp_path / "jd.txt"
    path.write_text(sample_jd_text, encoding="utf-8")
    return path


class TestScoreCommand:
    def test_score(self):
        result = runner.invoke(app, ["score", "Led checkout redesign, increasing conversion 12%"])
        assert result.exit_code == 0
        assert "Total:" in result.stdout

    def test_score_with_job_title(self):
        result = runner.invoke(app, ["score", "Led launch", "--job-title", "Data Engineer"])
        assert result.exit_code == 0


class TestKeywordsCommand:
    def test_lists_keywords(self, jd_file):
        result = runner.invoke(app, ["keywords", "--jd", str(jd_file)])
        assert result.exit_code == 0
        assert "- project management" in result.stdout

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["keywords", "--jd", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestArbitrateCommand:
    def test_arbitrate(self, tmp_path):
        original = tmp_path / "original.txt"
        tailored = tmp_path / "tailored.txt"
        original.write_text("- Increased conversion 30% across 5 teams by redesigning checkout\n")
        tailored.write_text("- Increased conversion by redesigning checkout\n")
        result = runner.invoke(
            app, ["arbitrate", "--original", str(original), "--tailored", str(tailored)]
        )
        assert result.exit_code == 0
        assert "original" in result.stdout
        assert "preserved" in result.stdout


class TestNarrativeCommand:
    def test_narrative(self, bullets_file):
        result = runner.invoke(
            app,
            [
                "narrative",
                "--bullets", str(bullets_file),
                "--role", "VP of Product",
                "--seniority", "executive",
                "--brand", "A product leader who sets vision",
            ],
        )
        assert result.exit_code == 0
        assert "Strategic Leader" in result.stdout

    def test_invalid_profile(self, bullets_file):
        result = runner.invoke(
            app,
            ["narrative", "--bullets", str(bullets_file), "--role", "PM", "--seniority", "intern"],
        )
        assert result.exit_code == 1
        assert "Invalid profile" in result.stdout


class TestTailorCommand:
    def test_tailor_writes_output(self, tmp_path, bullets_file, jd_file, strategic_bullets):
        class EchoRewriter:
            def __init__(self, *args, **kwargs):
                pass

            async def rewrite(self, bullets, keywords, job_title=None):
                return list(bullets)

        output = tmp_path / "out" / "optimised.md"
        with patch("cv_arbiter.cli.LLMClient", MagicMock()), patch(
            "cv_arbiter.cli.ClaudeBulletRewriter", EchoRewriter
        ):
            result = runner.invoke(
                app,
                ["tailor", "--bullets", str(bullets_file), "--jd", str(jd_file), "--output", str(output)],
            )

        assert result.exit_code == 0, result.stdout
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines == [f"- {b}" for b in strategic_bullets]

    def test_tailor_runs_narrative_check_with_role(self, bullets_file, jd_file):
        class EchoRewriter:
            def __init__(self, *args, **kwargs):
                pass

            async def rewrite(self, bullets, keywords, job_title=None):
                return list(bullets)

        with patch("cv_arbiter.cli.LLMClient", MagicMock()), patch(
            "cv_arbiter.cli.ClaudeBulletRewriter", EchoRewriter
        ):
            result = runner.invoke(
                app,
                [
                    "tailor",
                    "--bullets", str(bullets_file),
                    "--jd", str(jd_file),
                    "--role", "VP of Product",
                    "--seniority", "executive",
                ],
            )

        assert result.exit_code == 0, result.stdout
        assert "Strategic Leader" in result.stdout

    def test_tailor_rejects_invalid_profile(self, bullets_file, jd_file):
        result = runner.invoke(
            app,
            [
                "tailor",
                "--bullets", str(bullets_file),
                "--jd", str(jd_file),
                "--role", "PM",
                "--strength", "charisma",
            ],
        )
        assert result.exit_code == 1
        assert "Invalid profile" in result.stdout
