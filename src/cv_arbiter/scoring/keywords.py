"""Job-description keyword extraction and overlap-free keyword matching."""

from __future__ import annotations

import bisect
import logging
import re
from functools import lru_cache

from cv_arbiter.models.tailoring import KeywordMatch

logger = logging.getLogger(__name__)

# Multi-word phrases recognised verbatim in job descriptions
PHRASE_DICTIONARY: tuple[str, ...] = (
    "project management",
    "product management",
    "program management",
    "stakeholder management",
    "change management",
    "risk management",
    "people management",
    "agile methodology",
    "product strategy",
    "product roadmap",
    "roadmap planning",
    "go-to-market",
    "user research",
    "user experience",
    "customer success",
    "customer experience",
    "data analysis",
    "data analytics",
    "data visualization",
    "data-driven",
    "machine learning",
    "artificial intelligence",
    "a/b testing",
    "cross-functional",
    "continuous integration",
    "continuous delivery",
    "system design",
    "business development",
    "business intelligence",
    "growth strategy",
    "market research",
    "competitive analysis",
    "product discovery",
    "requirements gathering",
    "technical writing",
    "problem solving",
    "root cause analysis",
)

# Lowercase technical single-word terms
TECH_TERMS: tuple[str, ...] = (
    "python",
    "sql",
    "java",
    "javascript",
    "typescript",
    "react",
    "node",
    "golang",
    "rust",
    "kotlin",
    "swift",
    "aws",
    "gcp",
    "azure",
    "docker",
    "kubernetes",
    "terraform",
    "graphql",
    "rest",
    "api",
    "microservices",
    "jira",
    "confluence",
    "figma",
    "tableau",
    "looker",
    "amplitude",
    "mixpanel",
    "excel",
    "salesforce",
    "hubspot",
    "snowflake",
    "dbt",
    "spark",
    "kafka",
    "git",
    "agile",
    "scrum",
    "kanban",
    "roadmap",
    "analytics",
    "okrs",
    "kpis",
    "saas",
    "b2b",
    "b2c",
    "etl",
    "ci/cd",
)

# Capitalised words that are not tool or product names
GENERIC_CAPITALIZED: frozenset[str] = frozenset({
    "a", "a/b", "an", "and", "as", "at", "by", "for", "from", "in", "of", "on", "or",
    "the", "to", "with", "we", "you", "our", "your", "us", "i", "it", "this",
    "that", "they", "who", "what", "will", "must", "should", "can", "may",
    "experience", "experienced", "looking", "proficiency", "proficient",
    "required", "requirements", "preferred", "strong", "ability", "knowledge",
    "familiarity", "excellent", "responsibilities", "qualifications", "about",
    "role", "team", "job", "position", "company", "join", "work", "bonus",
    "nice", "plus", "senior", "junior", "lead", "manager", "engineer",
    "director", "head", "staff", "principal", "associate", "intern",
    "monday", "tuesday", "wednesday", "thursday", "friday",
})

_TOKEN = re.compile(r"[A-Za-z][A-Za-z0-9+#./\-]*")
_SENTENCE_BREAKS = ".!?:;\n•*-–|"


def _phrase_regex(term: str) -> str:
    return r"\s+".join(re.escape(part) for part in term.split())


@lru_cache(maxsize=512)
def _vocabulary_pattern(terms: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so alternation prefers "data-driven" over "data"
    ordered = sorted(terms, key=len, reverse=True)
    body = "|".join(_phrase_regex(t) for t in ordered)
    return re.compile(rf"(?<![a-z0-9])({body})(?:s|es)?(?![a-z0-9])")


@lru_cache(maxsize=2048)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(
        rf"(?<![A-Za-z0-9]){_phrase_regex(keyword)}(?![A-Za-z0-9])",
        re.IGNORECASE,
    )


def contains_terms(text: str, terms: tuple[str, ...]) -> list[str]:
    """Return the distinct vocabulary terms present in text, in declaration order.

    Matching is case-insensitive, respects word boundaries and tolerates a
    trailing plural suffix ("stakeholder" matches "stakeholders").
    """
    if not text or not terms:
        return []
    found = {
        " ".join(m.group(1).split())
        for m in _vocabulary_pattern(terms).finditer(text.lower())
    }
    return [t for t in terms if t in found]


def count_term_occurrences(text: str, terms: tuple[str, ...]) -> int:
    """Count every occurrence of any vocabulary term in text."""
    if not text or not terms:
        return 0
    return sum(1 for _ in _vocabulary_pattern(terms).finditer(text.lower()))


def _is_sentence_start(text: str, start: int) -> bool:
    before = text[:start].rstrip(" \t")
    return not before or before[-1] in _SENTENCE_BREAKS


def _capitalized_tools(text: str) -> list[str]:
    tools: list[str] = []
    for m in _TOKEN.finditer(text):
        token = m.group(0).rstrip(".-/")
        if not token[0].isupper() or len(token) < 2:
            continue
        if token.lower() in GENERIC_CAPITALIZED:
            continue
        if _is_sentence_start(text, m.start()):
            continue
        tools.append(token.lower())
    return tools


def extract_job_keywords(job_description_text: str) -> list[str]:
    """Extract lowercase keywords from a job description, longest first.

    Three sources are merged: curated multi-word phrases, capitalised
    tool names that are not sentence openers, and lowercase technical terms.
    """
    if not job_description_text or not job_description_text.strip():
        return []

    phrases = contains_terms(job_description_text, PHRASE_DICTIONARY)
    tools = _capitalized_tools(job_description_text)
    terms = contains_terms(job_description_text, TECH_TERMS)

    keywords = list(dict.fromkeys(phrases + tools + terms))
    keywords.sort(key=lambda k: (-len(k), k))
    logger.debug("Extracted %d keywords from job description", len(keywords))
    return keywords


def find_keyword_matches(text: str, keywords: list[str]) -> list[KeywordMatch]:
    """Locate keyword occurrences in text without overlaps.

    Candidate spans are visited longest first; a span is kept only if it does
    not overlap an already accepted one. The result is ordered by position.
    """
    if not text or not keywords:
        return []

    unique = dict.fromkeys(k.strip().lower() for k in keywords if k and k.strip())
    candidates: list[tuple[int, int]] = []
    for keyword in unique:
        for m in _keyword_pattern(keyword).finditer(text):
            candidates.append((m.start(), m.end()))

    candidates.sort(key=lambda span: (span[0] - span[1], span[0]))

    starts: list[int] = []
    ends: list[int] = []
    for start, end in candidates:
        i = bisect.bisect_left(starts, start)
        if i > 0 and ends[i - 1] > start:
            continue
        if i < len(starts) and starts[i] < end:
            continue
        starts.insert(i, start)
        ends.insert(i, end)

    return [
        KeywordMatch(keyword=text[s:e], start_index=s, end_index=e)
        for s, e in zip(starts, ends)
    ]
