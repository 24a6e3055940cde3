"""Narrative alignment: how well a bullet corpus tells the story a profile wants."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache

from cv_arbiter.models.narrative import (
    EvidenceItem,
    NarrativeAnalysisResult,
    NarrativeProfile,
)
from cv_arbiter.scoring.keywords import contains_terms, count_term_occurrences
from cv_arbiter.scoring.stages import analyze_cv_content, round_half_up
from cv_arbiter.scoring.vocabulary import DIGIT_PATTERN

logger = logging.getLogger(__name__)

UNKNOWN_ARCHETYPE = "Unknown"
FALLBACK_ARCHETYPE = "Versatile Contributor"
FALLBACK_DESCRIPTION = (
    "No dominant verb family yet; bullets describe activity without a clear leadership, "
    "delivery, efficiency or growth signature."
)


@dataclass(frozen=True)
class Archetype:
    name: str
    description: str
    verbs: tuple[str, ...]


# Order doubles as the tie-break order
ARCHETYPES: tuple[Archetype, ...] = (
    Archetype(
        name="Strategic Leader",
        description=(
            "Sets direction and moves organisations through influence; bullets emphasise vision, "
            "alignment and executive sponsorship."
        ),
        verbs=(
            "led", "directed", "championed", "influenced", "orchestrated", "spearheaded",
            "aligned", "envisioned", "drove", "established", "secured", "negotiated",
            "transformed", "shaped", "steered", "defined", "mentored",
        ),
    ),
    Archetype(
        name="Execution-Oriented Specialist",
        description=(
            "Gets things built and shipped; bullets emphasise hands-on delivery, tooling and "
            "technical execution."
        ),
        verbs=(
            "built", "shipped", "deployed", "implemented", "launched", "developed", "maintained",
            "coded", "engineered", "automated", "configured", "migrated", "tested", "debugged",
            "refactored", "integrated", "architected", "delivered",
        ),
    ),
    Archetype(
        name="Operational Optimizer",
        description=(
            "Makes existing systems run better; bullets emphasise efficiency, process and cost "
            "discipline."
        ),
        verbs=(
            "optimized", "streamlined", "reduced", "improved", "standardized", "coordinated",
            "managed", "consolidated", "restructured", "accelerated",
        ),
    ),
    Archetype(
        name="Growth Catalyst",
        description=(
            "Turns product work into commercial results; bullets emphasise revenue, acquisition "
            "and market expansion."
        ),
        verbs=(
            "grew", "generated", "increased", "monetized", "expanded", "acquired", "captured",
            "converted", "scaled", "doubled", "tripled",
        ),
    ),
)

SENIORITY_VERBS: dict[str, tuple[str, ...]] = {
    "junior": (
        "built", "developed", "supported", "implemented", "created", "analyzed", "assisted",
        "contributed",
    ),
    "mid": ("led", "owned", "launched", "delivered", "improved", "drove", "managed", "designed"),
    "senior": (
        "led", "drove", "architected", "spearheaded", "mentored", "established", "scaled",
        "influenced",
    ),
    "executive": (
        "directed", "championed", "orchestrated", "transformed", "envisioned", "influenced",
        "spearheaded", "established",
    ),
}

STRENGTH_VERBS: dict[str, tuple[str, ...]] = {
    "strategic-leadership": ("led", "aligned", "championed", "influenced", "directed", "secured"),
    "technical-mastery": ("architected", "engineered", "designed", "built", "optimized", "scaled"),
    "operational-excellence": (
        "streamlined", "optimized", "standardized", "reduced", "automated", "coordinated",
    ),
    "business-innovation": ("grew", "generated", "launched", "monetized", "expanded", "drove"),
}

STRENGTH_VOCABULARY: dict[str, tuple[str, ...]] = {
    "strategic-leadership": (
        "strategy", "strategic", "vision", "roadmap", "alignment", "stakeholder", "executive",
        "initiative", "transformation", "organization",
    ),
    "technical-mastery": (
        "architecture", "scalable", "platform", "performance", "latency", "reliability",
        "infrastructure", "system", "automation", "trade-off",
    ),
    "operational-excellence": (
        "efficiency", "process", "cost", "throughput", "quality", "workflow", "delivery",
        "compliance", "optimization", "operations",
    ),
    "business-innovation": (
        "revenue", "growth", "conversion", "market", "customer", "monetization", "acquisition",
        "retention", "experimentation", "pricing",
    ),
}

BRAND_STOPWORDS: frozenset[str] = frozenset({
    "about", "across", "after", "also", "around", "based", "been", "being", "from", "have",
    "into", "just", "like", "make", "makes", "more", "most", "only", "over", "should", "some",
    "than", "that", "their", "them", "then", "they", "this", "through", "very", "want", "what",
    "when", "where", "which", "while", "with", "within", "would", "your", "someone",
})

VERB_DIMENSION, VERB_MAX, VERB_SATURATION = "Action Verb Strength", 30.0, 4
IMPACT_DIMENSION, IMPACT_MAX, IMPACT_SATURATION = "Achievement & Impact Keywords", 25.0, 5
QUANT_DIMENSION, QUANT_MAX, QUANT_TARGET_SHARE = "Quantified Results", 25.0, 0.6
BRAND_DIMENSION, BRAND_MAX = "Brand-Aligned Language", 20.0

BRAND_OVERLAP_BONUS = 5.0
BRAND_OVERLAP_THRESHOLD = 0.5
SENIORITY_BONUS = 5.0

MAX_ALIGNED_KEYWORDS = 15
MAX_MISSING_KEYWORDS = 10
MIN_MISSING_KEYWORD_LENGTH = 4

_BRAND_TOKEN = re.compile(r"[a-z][a-z\-]*[a-z]")


def inflections(verb: str) -> tuple[str, ...]:
    """Past-tense verb plus its -ing form ("aligned" -> "aligning")."""
    if verb.endswith("ed") and len(verb) > 4:
        return (verb, verb[:-2] + "ing")
    return (verb,)


def _found_verbs(corpus: str, verbs: tuple[str, ...]) -> list[str]:
    forms: dict[str, str] = {}
    for verb in verbs:
        for form in inflections(verb):
            forms.setdefault(form, verb)
    hits = {forms[f] for f in contains_terms(corpus, tuple(forms))}
    return [v for v in verbs if v in hits]


@lru_cache(maxsize=1024)
def _stem_pattern(token: str) -> re.Pattern[str]:
    stem = token[: max(4, len(token) - 3)]
    return re.compile(rf"(?<![a-z0-9]){re.escape(stem)}[a-z\-]*")


def brand_terms(profile: NarrativeProfile) -> list[str]:
    """Tokens of the desired brand and target role worth looking for."""
    text = f"{profile.desired_brand} {profile.target_role}".lower()
    tokens = [
        t for t in _BRAND_TOKEN.findall(text)
        if len(t) >= MIN_MISSING_KEYWORD_LENGTH and t not in BRAND_STOPWORDS
    ]
    return list(dict.fromkeys(tokens))


def desired_verbs(profile: NarrativeProfile) -> list[str]:
    return list(dict.fromkeys(
        SENIORITY_VERBS[profile.seniority_level] + STRENGTH_VERBS[profile.core_strength]
    ))


def _exclusive_seniority_verbs(level: str) -> tuple[str, ...]:
    others = {v for lvl, verbs in SENIORITY_VERBS.items() if lvl != level for v in verbs}
    return tuple(v for v in SENIORITY_VERBS[level] if v not in others)


def detect_archetype(bullets: list[str]) -> tuple[str, str]:
    """Dominant verb family across the corpus; independent of any profile."""
    corpus = "\n".join(bullets)
    best: Archetype | None = None
    best_count = 0
    for archetype in ARCHETYPES:
        forms = tuple(f for verb in archetype.verbs for f in inflections(verb))
        count = count_term_occurrences(corpus, forms)
        if count > best_count:
            best, best_count = archetype, count
    if best is None:
        return FALLBACK_ARCHETYPE, FALLBACK_DESCRIPTION
    return best.name, best.description


def _saturating(found: int, saturation: int, maximum: float) -> float:
    if saturation <= 0:
        return 0.0
    return round(maximum * min(1.0, found / saturation), 1)


def _listing(items: list[str]) -> str:
    return ", ".join(items) if items else "none"


def analyze_narrative_gap(bullets: list[str], profile: NarrativeProfile) -> NarrativeAnalysisResult:
    """Measure how well bullets express the narrative a profile is aiming for.

    Four evidence dimensions contribute up to fixed maxima (verbs 30, impact
    vocabulary 25, quantification 25, brand language 20). Brand overlap and
    seniority-specific verbs add bounded bonuses; the result is clamped to
    0-100. Output depends only on the inputs and is stable across runs.
    """
    bullets = [b.strip() for b in bullets if b and b.strip()]
    if not bullets:
        return NarrativeAnalysisResult(detected_archetype=UNKNOWN_ARCHETYPE)

    corpus = "\n".join(bullets)
    archetype, archetype_description = detect_archetype(bullets)

    verbs = desired_verbs(profile)
    verbs_found = _found_verbs(corpus, tuple(verbs))
    verb_item = EvidenceItem(
        dimension=VERB_DIMENSION,
        desired=f"{profile.seniority_level}/{profile.core_strength} verbs: {', '.join(verbs)}",
        actual=f"Found: {_listing(verbs_found)}",
        contribution=_saturating(len(verbs_found), min(VERB_SATURATION, len(verbs)), VERB_MAX),
        max_contribution=VERB_MAX,
    )

    vocabulary = STRENGTH_VOCABULARY[profile.core_strength]
    vocabulary_found = contains_terms(corpus, vocabulary)
    impact_item = EvidenceItem(
        dimension=IMPACT_DIMENSION,
        desired=f"{profile.core_strength} vocabulary: {', '.join(vocabulary)}",
        actual=f"Found: {_listing(vocabulary_found)}",
        contribution=_saturating(
            len(vocabulary_found), min(IMPACT_SATURATION, len(vocabulary)), IMPACT_MAX
        ),
        max_contribution=IMPACT_MAX,
    )

    quantified = sum(1 for b in bullets if DIGIT_PATTERN.search(b))
    share = quantified / len(bullets)
    quant_item = EvidenceItem(
        dimension=QUANT_DIMENSION,
        desired=f"At least {int(QUANT_TARGET_SHARE * 100)}% of bullets carry a number (%, $, x, counts)",
        actual=f"{quantified} of {len(bullets)} bullets quantified",
        contribution=round(QUANT_MAX * min(1.0, share / QUANT_TARGET_SHARE), 1),
        max_contribution=QUANT_MAX,
    )

    brand = brand_terms(profile)
    lowered = corpus.lower()
    brand_found = [t for t in brand if _stem_pattern(t).search(lowered)]
    brand_item = EvidenceItem(
        dimension=BRAND_DIMENSION,
        desired=f"Brand terms: {', '.join(brand)}" if brand else "No brand statement provided",
        actual=f"Found: {_listing(brand_found)}",
        contribution=_saturating(len(brand_found), math.ceil(len(brand) / 2), BRAND_MAX),
        max_contribution=BRAND_MAX,
    )

    evidence = [verb_item, impact_item, quant_item, brand_item]
    total = sum(e.contribution for e in evidence)
    total_max = sum(e.max_contribution for e in evidence)
    percent = 100.0 * total / total_max

    if brand and len(brand_found) / len(brand) >= BRAND_OVERLAP_THRESHOLD:
        percent += BRAND_OVERLAP_BONUS
    if _found_verbs(corpus, _exclusive_seniority_verbs(profile.seniority_level)):
        percent += SENIORITY_BONUS
    percent = round(max(0.0, min(100.0, percent)), 1)

    desired_terms = list(dict.fromkeys(verbs + list(vocabulary) + brand))
    found_terms = set(verbs_found) | set(vocabulary_found) | set(brand_found)
    aligned = [t for t in desired_terms if t in found_terms][:MAX_ALIGNED_KEYWORDS]
    missing = [
        t for t in desired_terms
        if t not in found_terms and len(t) >= MIN_MISSING_KEYWORD_LENGTH
    ][:MAX_MISSING_KEYWORDS]

    scores = [analyze_cv_content(b).total_score for b in bullets]
    cv_score = float(round_half_up(sum(scores) / len(scores)))

    logger.debug("Narrative match %.1f%% (%s) for %s", percent, archetype, profile.target_role)
    return NarrativeAnalysisResult(
        detected_archetype=archetype,
        archetype_description=archetype_description,
        narrative_match_percent=percent,
        evidence=evidence,
        aligned_keywords=aligned,
        missing_keywords=missing,
        cv_score=cv_score,
    )
