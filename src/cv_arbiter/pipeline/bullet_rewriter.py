"""LLM rewrite step that proposes tailored versions of CV bullets."""

from __future__ import annotations

import logging
from typing import Protocol

from cv_arbiter.clients.llm_client import DEFAULT_MODEL, LLMClient
from cv_arbiter.scoring.principles import build_pm_coaching_context

logger = logging.getLogger(__name__)

REWRITE_SYSTEM = """\
You rewrite CV bullet points so they match a target job description.

Rules:
1. Keep every fact from the original; never invent numbers, employers or tools
2. Start with a strong past-tense action verb
3. Work in job-description keywords only where they are true for the candidate
4. Keep each bullet under 35 words, no markup characters
5. Return exactly one rewrite per input bullet, in the same order

Respond only with a JSON array of strings.
{coaching}"""


class BulletRewriter(Protocol):
    async def rewrite(
        self,
        bullets: list[str],
        keywords: list[str],
        job_title: str | None = None,
    ) -> list[str]: ...


class ClaudeBulletRewriter:
    """Rewrite bullets with Claude, coached by the CV-tailoring principles."""

    def __init__(self, llm: LLMClient, model: str = DEFAULT_MODEL, temperature: float = 0.3):
        self.llm = llm
        self.model = model
        self.temperature = temperature

    async def rewrite(
        self,
        bullets: list[str],
        keywords: list[str],
        job_title: str | None = None,
    ) -> list[str]:
        """Return one rewrite per bullet, or an empty list on any failure."""
        if not bullets:
            return []

        system = REWRITE_SYSTEM.replace("{coaching}", build_pm_coaching_context("cv_tailor"))
        numbered = "\n".join(f"{i + 1}. {b}" for i, b in enumerate(bullets))
        prompt = f"""Target role: {job_title or "not specified"}

Job description keywords:
{", ".join(keywords) if keywords else "(none extracted)"}

Original bullets:
{numbered}

Rewrite all {len(bullets)} bullets and answer with a JSON array of strings."""

        try:
            data = await self.llm.generate_json(
                prompt=prompt,
                system=system,
                model=self.model,
                temperature=self.temperature,
            )
        except Exception:
            logger.exception("Bullet rewrite LLM call failed")
            return []

        return self._parse_rewrites(data, len(bullets))

    @staticmethod
    def _parse_rewrites(data, max_count: int) -> list[str]:
        # Handle dict wrapper (e.g. {"bullets": [...]})
        if isinstance(data, dict):
            for key in ("bullets", "rewrites", "items"):
                if key in data and isinstance(data[key], list):
                    data = data[key]
                    break
            else:
                return []

        if not isinstance(data, list):
            return []

        rewrites = []
        for item in data[:max_count]:
            if isinstance(item, dict):
                item = item.get("bullet") or item.get("text") or ""
            rewrites.append(item.strip() if isinstance(item, str) else "")
        return rewrites
