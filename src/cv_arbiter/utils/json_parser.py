"""Pull a JSON value out of free-form LLM output."""

from __future__ import annotations

import json
import re

_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL)


def extract_json(text: str) -> dict | list:
    """Parse the first JSON object or array found in text.

    Accepts bare JSON, JSON inside a fenced code block, or JSON embedded in
    surrounding prose. Whichever of '[' or '{' appears first is tried first,
    so a list of rewrites is not mistaken for one of its items.
    """
    text = (text or "").strip()
    if not text:
        raise ValueError("Could not extract JSON from empty text")

    candidates = [text]
    fenced = _FENCE.search(text)
    if fenced:
        candidates.append(fenced.group(1).strip())

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            pass

        first_object = candidate.find("{")
        first_array = candidate.find("[")
        spans = [("[", "]"), ("{", "}")]
        if first_object != -1 and (first_array == -1 or first_object < first_array):
            spans.reverse()
        for opener, closer in spans:
            start = candidate.find(opener)
            end = candidate.rfind(closer)
            if start != -1 and end > start:
                try:
                    return json.loads(candidate[start : end + 1])
                except json.JSONDecodeError:
                    continue

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")
