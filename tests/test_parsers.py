"""Tests for document loading and bullet parsing."""

import pytest

from cv_arbiter.parsers.documents import (
    clean_text,
    load_bullets,
    load_document,
    load_jd_file,
    parse_bullets,
    parse_jd,
)


class TestParseBullets:
    def test_dash_bullets(self):
        text = "Experience\n- Led launch of checkout\n- Reduced churn 10%\n"
        assert parse_bullets(text) == ["Led launch of checkout", "Reduced churn 10%"]

    def test_mixed_markers(self):
        text = "* Led launch\n• Shipped search\n1. Cut costs 5%\n2) Grew revenue"
        assert parse_bullets(text) == ["Led launch", "Shipped search", "Cut costs 5%", "Grew revenue"]

    def test_marked_lines_win_over_prose(self):
        text = "Acme Corp, 2020-2023\n- Led launch\nSome summary sentence"
        assert parse_bullets(text) == ["Led launch"]

    def test_plain_lines_when_no_markers(self):
        text = "# Bullets\n\nLed launch\n\nShipped search\n"
        assert parse_bullets(text) == ["Led launch", "Shipped search"]

    def test_empty(self):
        assert parse_bullets("") == []
        assert parse_bullets("\n  \n") == []


class TestCleanText:
    def test_strips_invisible_characters(self):
        assert clean_text("\ufeffLed\u200b launch\u00ad") == "Led launch"

    def test_normalises_bullet_glyphs(self):
        assert clean_text("● Led launch\n▪ Shipped search") == "- Led launch\n- Shipped search"

    def test_collapses_blank_runs(self):
        assert clean_text("a\n\n\n\nb") == "a\n\nb"


class TestParseJD:
    def test_normalises_whitespace(self):
        assert parse_jd("  Product   Manager \n\n\n\n Roadmap\tplanning ") == "Product Manager\n\nRoadmap planning"


class TestLoadDocument:
    def test_txt(self, tmp_path):
        path = tmp_path / "bullets.txt"
        path.write_text("- Led launch\n- Shipped search\n", encoding="utf-8")
        assert load_bullets(path) == ["Led launch", "Shipped search"]

    def test_markdown_jd(self, tmp_path, sample_jd_text):
        path = tmp_path / "jd.md"
        path.write_text(sample_jd_text, encoding="utf-8")
        assert "Product Manager" in load_jd_file(path)

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "cv.rtf"
        path.write_text("x")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_document(path)

    def test_docx(self, tmp_path):
        from docx import Document

        path = tmp_path / "cv.docx"
        doc = Document()
        doc.add_paragraph("• Led launch of checkout")
        doc.add_paragraph("")
        doc.add_paragraph("• Reduced churn 10%")
        doc.save(str(path))
        assert load_bullets(path) == ["Led launch of checkout", "Reduced churn 10%"]

    def test_pdf(self, tmp_path):
        import fitz

        path = tmp_path / "cv.pdf"
        doc = fitz.open()
        page = doc.new_page()
        page.insert_text((72, 72), "- Led launch of checkout")
        doc.save(str(path))
        doc.close()
        assert "Led launch of checkout" in load_document(path)
