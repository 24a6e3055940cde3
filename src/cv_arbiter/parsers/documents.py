"""Load job descriptions and CV bullet lists from text, Markdown, PDF or DOCX."""

from __future__ import annotations

import re
from pathlib import Path

_BULLET_PREFIX = re.compile(r"^\s*(?:[-*+•●◦▪■◆○★]|\d{1,2}[.)])\s+")


def load_document(file_path: str | Path) -> str:
    """Return the plain text of a PDF, DOCX, TXT or MD file."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return _parse_pdf(path)
    elif suffix in (".docx", ".doc"):
        return _parse_docx(path)
    elif suffix in (".txt", ".md", ""):
        return clean_text(path.read_text(encoding="utf-8"))
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")


def clean_text(text: str) -> str:
    """Strip unicode artefacts, unify bullet glyphs and collapse blank runs."""
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)
    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def parse_jd(text: str) -> str:
    """Clean and normalize job description text."""
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r"[ \t]+", " ", text)
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(lines).strip()


def load_jd_file(file_path: str | Path) -> str:
    return parse_jd(load_document(file_path))


def parse_bullets(text: str) -> list[str]:
    """Extract bullet points from text.

    Lines carrying a bullet marker ("-", "*", "•", "1.") win; when a document
    has none, every non-empty line that is not a Markdown heading is a bullet.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    marked = [_BULLET_PREFIX.sub("", line).strip() for line in lines if _BULLET_PREFIX.match(line)]
    if marked:
        return [b for b in marked if b]
    return [line.strip() for line in lines if not line.lstrip().startswith("#")]


def load_bullets(file_path: str | Path) -> list[str]:
    return parse_bullets(load_document(file_path))


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    text = []
    for page in doc:
        text.append(page.get_text())
    doc.close()
    return clean_text("\n".join(text))


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return clean_text("\n".join(p.text for p in doc.paragraphs if p.text.strip()))
