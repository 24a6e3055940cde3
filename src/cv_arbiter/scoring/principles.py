"""Product-management principle catalogue and principle-coverage analysis.

The ten principles, six frameworks and two coaching contexts are static
tables. Scoring walks ``PRINCIPLE_SIGNALS``: each principle owns a weight and
a signal vocabulary, and a principle counts as present when any of its
signals appears in the text. Weights sum to 100.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cv_arbiter.models.analysis import PMAnalysis
from cv_arbiter.models.principles import (
    CoachingContext,
    ExampleFraming,
    PMFramework,
    PMPrinciple,
)
from cv_arbiter.scoring.keywords import contains_terms
from cv_arbiter.scoring.vocabulary import METRIC_PATTERN

logger = logging.getLogger(__name__)

METRIC_SIGNAL = "quantified metric"

PM_CORE_PRINCIPLES: tuple[PMPrinciple, ...] = (
    PMPrinciple(
        id="outcome-over-output",
        name="Outcome Over Output",
        description="Focus on the business impact and user value delivered, not just features shipped",
        key_questions=[
            "What problem did this solve for users?",
            "What business metric did this move?",
            "How did you measure success?",
            "What was the before/after state?",
        ],
        application_tips=[
            'Quantify the impact with metrics (e.g., "increased user retention by 25%")',
            'Connect features to business goals (e.g., "reduced churn" not "built a feature")',
            'Show the "so what?" - why did this matter to the business?',
            'Use outcome-oriented language: "enabled", "improved", "increased", "reduced"',
        ],
        example_framing=ExampleFraming(
            weak="Built a new dashboard for analytics",
            strong=(
                "Improved data-driven decision making by shipping analytics dashboard that reduced "
                "time-to-insight by 40%, enabling 15+ stakeholders to make faster product decisions"
            ),
        ),
    ),
    PMPrinciple(
        id="data-driven-decisions",
        name="Data-Driven Decision Making",
        description="Leverage data and metrics to inform product strategy and validate assumptions",
        key_questions=[
            "What data informed your decision?",
            "How did you validate your hypothesis?",
            "What metrics did you track?",
            "How did you measure the experiment results?",
        ],
        application_tips=[
            "Mention specific metrics and KPIs you tracked",
            "Describe A/B tests or experiments you ran",
            "Show how you used analytics tools to inform decisions",
            "Highlight instances where data changed your direction",
        ],
        example_framing=ExampleFraming(
            weak="Decided to build a new feature based on feedback",
            strong=(
                "Analyzed user behavior data showing 60% drop-off at checkout, ran A/B test on "
                "simplified flow, validated 23% conversion improvement before full rollout"
            ),
        ),
    ),
    PMPrinciple(
        id="user-centricity",
        name="User-Centricity",
        description="Deeply understand user needs and pain points to drive product decisions",
        key_questions=[
            "Who was the user and what problem did they have?",
            "How did you gather user insights?",
            "What research methods did you use?",
            "How did user feedback shape your approach?",
        ],
        application_tips=[
            "Specify the user persona or segment you focused on",
            "Mention research methods: interviews, surveys, usability tests",
            "Show empathy - describe the user pain point vividly",
            "Connect features back to solving real user problems",
        ],
        example_framing=ExampleFraming(
            weak="Added a feature users requested",
            strong=(
                "Conducted 12 user interviews revealing enterprise customers struggled with team "
                "collaboration, leading to a co-editing feature that addressed their #1 pain point "
                "and increased team plan adoption by 35%"
            ),
        ),
    ),
    PMPrinciple(
        id="strategic-thinking",
        name="Strategic Thinking",
        description="Align product decisions with broader business strategy and long-term vision",
        key_questions=[
            "How did this align with company strategy?",
            "What was the market opportunity?",
            "What trade-offs did you make and why?",
            "How did this fit into the product roadmap?",
        ],
        application_tips=[
            "Show how you balanced short-term wins with long-term strategy",
            "Mention competitive analysis or market research",
            "Describe prioritization frameworks you used",
            "Highlight strategic trade-offs and your reasoning",
        ],
        example_framing=ExampleFraming(
            weak="Prioritized features for the roadmap",
            strong=(
                "Prioritized mobile-first redesign using RICE framework, trading off 3 feature "
                "requests to capture growing mobile segment (40% of traffic), aligning with "
                "company's strategic shift to mobile-first product"
            ),
        ),
    ),
    PMPrinciple(
        id="cross-functional-leadership",
        name="Cross-Functional Leadership",
        description="Lead through influence, align stakeholders, and drive execution without formal authority",
        key_questions=[
            "Who did you work with across teams?",
            "How did you align stakeholders with competing priorities?",
            "How did you resolve conflicts or disagreements?",
            "How did you influence without authority?",
        ],
        application_tips=[
            "Mention specific teams you collaborated with (eng, design, marketing, sales)",
            "Describe stakeholder management and alignment tactics",
            "Show how you navigated organizational complexity",
            "Highlight leadership moments where you drove consensus",
        ],
        example_framing=ExampleFraming(
            weak="Worked with engineering and design teams",
            strong=(
                "Led cross-functional team of 8 (eng, design, marketing) through weekly syncs and "
                "stakeholder reviews, aligned C-suite on 6-month roadmap despite competing "
                "priorities, achieving 95% on-time delivery"
            ),
        ),
    ),
    PMPrinciple(
        id="problem-solving",
        name="Problem-Solving & Root Cause Analysis",
        description="Identify root causes, not symptoms, and solve problems systematically",
        key_questions=[
            "What was the underlying problem, not just the symptom?",
            "How did you diagnose the issue?",
            "What alternatives did you consider?",
            "Why did you choose this solution over others?",
        ],
        application_tips=[
            'Use frameworks like "5 Whys" or root cause analysis',
            "Show your analytical process",
            "Mention multiple solution paths you evaluated",
            "Explain your decision-making criteria",
        ],
        example_framing=ExampleFraming(
            weak="Fixed a bug that was causing user complaints",
            strong=(
                "Diagnosed 40% support ticket increase using 5 Whys analysis, uncovered onboarding "
                "flow confusion (not bug), redesigned first-run experience reducing tickets by 55% "
                "and improving activation rate"
            ),
        ),
    ),
    PMPrinciple(
        id="iterative-development",
        name="Iterative Development & MVP Mindset",
        description="Ship fast, learn, and iterate rather than pursuing perfection upfront",
        key_questions=[
            "How did you scope the MVP?",
            "What did you cut to ship faster?",
            "What did you learn from the first iteration?",
            "How did user feedback shape v2, v3, etc.?",
        ],
        application_tips=[
            "Show how you defined an MVP and why",
            "Describe what you learned from early versions",
            "Highlight iteration cycles and improvements",
            "Emphasize speed of learning over perfection",
        ],
        example_framing=ExampleFraming(
            weak="Launched a new feature after 6 months of development",
            strong=(
                "Shipped MVP in 3 weeks (vs. 6-month full build), gathered feedback from 500 beta "
                "users, iterated twice based on usage data, achieving 70% adoption within 2 months "
                "of full launch"
            ),
        ),
    ),
    PMPrinciple(
        id="communication-storytelling",
        name="Communication & Storytelling",
        description="Communicate vision clearly and tell compelling stories to inspire action",
        key_questions=[
            "How did you communicate the product vision?",
            "What story did you tell to get buy-in?",
            "How did you present to different audiences?",
            "How did you make complex ideas simple?",
        ],
        application_tips=[
            "Mention presentations, PRDs, or roadmap communications",
            "Show how you tailored messages for different audiences",
            "Describe how you built narrative around the product",
            "Highlight moments where communication drove action",
        ],
        example_framing=ExampleFraming(
            weak="Presented product updates to the team",
            strong=(
                "Crafted product vision narrative linking feature to customer success stories, "
                "presented to board securing $2M budget, and ran monthly all-hands demos that "
                "increased eng team product understanding by 45% (survey)"
            ),
        ),
    ),
    PMPrinciple(
        id="technical-aptitude",
        name="Technical Aptitude",
        description="Understand technical constraints and opportunities to make informed decisions",
        key_questions=[
            "What technical considerations influenced your decisions?",
            "How did you work with engineering on feasibility?",
            "What technical trade-offs did you navigate?",
            "How did you balance user needs with technical constraints?",
        ],
        application_tips=[
            "Show you understand technical concepts relevant to your product",
            "Mention technical constraints you worked within",
            "Describe how you collaborated with engineering on solutions",
            "Highlight technical decisions you influenced or made",
        ],
        example_framing=ExampleFraming(
            weak="Worked with engineers to build the feature",
            strong=(
                "Partnered with eng to evaluate API vs. webhook architecture, chose webhooks for "
                "real-time needs despite 2-week implementation overhead, reducing latency from 5min "
                "to 30sec and improving user satisfaction by 40%"
            ),
        ),
    ),
    PMPrinciple(
        id="business-acumen",
        name="Business Acumen",
        description="Understand the business model, revenue drivers, and market dynamics",
        key_questions=[
            "How did this impact revenue/growth/retention?",
            "What was the ROI or business case?",
            "How did you think about pricing or monetization?",
            "What market dynamics influenced your decisions?",
        ],
        application_tips=[
            "Quantify business impact in terms of revenue, growth, or cost savings",
            "Show understanding of unit economics or business model",
            "Mention competitive dynamics or market positioning",
            "Describe how you built business cases or ROI analyses",
        ],
        example_framing=ExampleFraming(
            weak="Launched a new pricing tier",
            strong=(
                "Analyzed competitor pricing and customer willingness-to-pay, designed middle tier "
                "that captured 30% of free users, generating $450K ARR in first quarter while "
                "improving customer LTV by 25%"
            ),
        ),
    ),
)

PRINCIPLES_BY_ID: dict[str, PMPrinciple] = {p.id: p for p in PM_CORE_PRINCIPLES}

PM_FRAMEWORKS: tuple[PMFramework, ...] = (
    PMFramework(
        name="RICE Prioritization",
        description="Reach x Impact x Confidence / Effort",
        when_to_use="When prioritizing features or initiatives across a roadmap",
        components=[
            "Reach (users affected)",
            "Impact (on goal)",
            "Confidence (in estimates)",
            "Effort (person-months)",
        ],
    ),
    PMFramework(
        name="AARRR (Pirate Metrics)",
        description="Acquisition, Activation, Retention, Referral, Revenue",
        when_to_use="When measuring product funnel and growth metrics",
        components=["Acquisition", "Activation", "Retention", "Referral", "Revenue"],
    ),
    PMFramework(
        name="Jobs-to-be-Done (JTBD)",
        description='Understanding what "job" users are hiring your product to do',
        when_to_use="When conducting user research or defining product positioning",
        components=["Functional job", "Emotional job", "Social job"],
    ),
    PMFramework(
        name="OKRs (Objectives & Key Results)",
        description="Objectives (what) + Key Results (how to measure)",
        when_to_use="When setting goals and measuring success",
        components=["Objective (qualitative goal)", "Key Results (quantitative measures)"],
    ),
    PMFramework(
        name="North Star Metric",
        description="The one metric that best captures the core value you deliver",
        when_to_use="When aligning team around product strategy",
        components=["Core value metric", "Leading indicators", "Supporting metrics"],
    ),
    PMFramework(
        name="Kano Model",
        description="Categorize features: Basic, Performance, Delighters",
        when_to_use="When deciding what features to build",
        components=[
            "Must-haves (Basic)",
            "Performance (linear satisfaction)",
            "Delighters (unexpected value)",
        ],
    ),
)

PM_COACHING_CONTEXTS: dict[str, CoachingContext] = {
    "cv_tailor": CoachingContext(
        primary_principles=[
            "outcome-over-output",
            "data-driven-decisions",
            "user-centricity",
            "business-acumen",
        ],
        guidance=[
            "Start each bullet with a strong action verb (Led, Drove, Launched, Increased)",
            "Use the formula: Action + Method + Outcome (with metrics)",
            "Quantify everything possible - percentages, dollar amounts, user counts",
            'Show the "so what?" - connect your work to business impact',
            "Tailor achievements to match the job description keywords",
        ],
        red_flags=[
            "Listing features built without outcomes",
            "Vague responsibilities without measurable impact",
            "Missing metrics and quantification",
            "No mention of user research or data",
            "Focusing on what you did vs. what changed because of what you did",
        ],
    ),
    "interview_coach": CoachingContext(
        primary_principles=[
            "problem-solving",
            "strategic-thinking",
            "cross-functional-leadership",
            "communication-storytelling",
        ],
        guidance=[
            "Use the STAR method: Situation, Task, Action, Result",
            "Be specific - use real examples with numbers",
            "Show your thinking process, not just the outcome",
            "Highlight collaboration and stakeholder management",
            "Prepare stories that demonstrate multiple principles",
            "Always circle back to impact and learnings",
        ],
        common_questions=[
            "Tell me about a time you had to prioritize competing features",
            "How do you decide what to build?",
            "Describe a product you shipped from 0 to 1",
            "Tell me about a time you used data to make a decision",
            "How do you handle disagreements with engineering/design?",
            "What's your process for user research?",
        ],
        star_template={
            "situation": "What was the context? What problem existed?",
            "task": "What was your goal? What were you responsible for?",
            "action": "What specific steps did you take? How did you approach it?",
            "result": "What was the outcome? What metrics improved? What did you learn?",
        },
    ),
}


@dataclass(frozen=True)
class PrincipleSignals:
    gap_name: str
    weight: int
    signals: tuple[str, ...]
    suggestion: str
    counts_metrics: bool = False


PRINCIPLE_SIGNALS: dict[str, PrincipleSignals] = {
    "outcome-over-output": PrincipleSignals(
        gap_name="Outcomes",
        weight=15,
        signals=(
            "increased", "increasing", "increase", "reduced", "reducing", "reduction",
            "improved", "improving", "improvement", "enabled", "enabling", "grew",
            "decreased", "decreasing", "achieved", "achieving", "resulting in",
            "resulted in", "leading to", "outcome",
        ),
        suggestion='State the outcome your work produced, e.g. "increased retention by 12%" instead of listing the task',
    ),
    "data-driven-decisions": PrincipleSignals(
        gap_name="Data & Metrics",
        weight=15,
        signals=(
            "data", "data-driven", "metric", "analytics", "kpi", "a/b test", "experiment",
            "a/b testing", "measured", "analyzed", "analysed", "insight", "hypothesis",
            "validated", "cohort",
        ),
        suggestion="Add a quantified metric (%, $, user count) or name the data and experiments behind the decision",
        counts_metrics=True,
    ),
    "user-centricity": PrincipleSignals(
        gap_name="User Focus",
        weight=12,
        signals=(
            "user", "customer", "client", "people", "persona", "pain point", "usability",
            "survey", "user research", "interview", "end user",
        ),
        suggestion="Name the users or customers you served and the pain point you addressed for them",
    ),
    "strategic-thinking": PrincipleSignals(
        gap_name="Strategy",
        weight=8,
        signals=(
            "strategy", "strategic", "roadmap", "vision", "prioritized", "prioritization",
            "prioritizing", "market", "competitive", "trade-off", "long-term", "okr", "north star",
        ),
        suggestion="Connect the work to company strategy or the roadmap, and mention the trade-off you made",
    ),
    "cross-functional-leadership": PrincipleSignals(
        gap_name="Leadership",
        weight=12,
        signals=(
            "led", "collaborated", "partnered", "aligned", "team", "cross-functional",
            "stakeholder", "influenced", "mentored", "coordinated", "directed",
        ),
        suggestion="Show who you led or aligned across functions (engineering, design, sales) and how",
    ),
    "problem-solving": PrincipleSignals(
        gap_name="Problem Solving",
        weight=12,
        signals=(
            "problem", "challenge", "issue", "solution", "solved", "solve", "solving",
            "root cause", "diagnosed", "resolved", "troubleshot",
        ),
        suggestion="Frame the bullet around the problem you solved and how you diagnosed its root cause",
    ),
    "iterative-development": PrincipleSignals(
        gap_name="Iteration",
        weight=6,
        signals=(
            "mvp", "iterated", "iterating", "iteration", "iterative", "prototype",
            "prototyped", "beta", "pilot", "shipped", "sprint", "agile", "feedback loop",
        ),
        suggestion="Mention how you scoped an MVP, piloted it and iterated on feedback",
    ),
    "communication-storytelling": PrincipleSignals(
        gap_name="Communication",
        weight=6,
        signals=(
            "presented", "communicated", "narrative", "storytelling", "prd", "pitched",
            "documented", "documentation", "demo", "presentation", "all-hands", "workshop",
        ),
        suggestion="Note how you communicated the work, e.g. a PRD, executive presentation or demo that won buy-in",
    ),
    "technical-aptitude": PrincipleSignals(
        gap_name="Technical Depth",
        weight=6,
        signals=(
            "api", "architecture", "technical", "infrastructure", "platform", "engineering",
            "latency", "scalable", "scalability", "integration", "sql", "machine learning",
            "webhook", "system",
        ),
        suggestion="Name a technical constraint or architecture decision you worked through with engineering",
    ),
    "business-acumen": PrincipleSignals(
        gap_name="Business Impact",
        weight=8,
        signals=(
            "revenue", "roi", "profit", "cost", "savings", "pricing", "monetization", "arr",
            "mrr", "ltv", "churn", "retention", "conversion", "margin", "growth",
            "business case", "market share", "budget",
        ),
        suggestion="Tie the result to a business lever such as revenue, cost savings, retention or conversion",
    ),
}


def principle_hits(text: str, principle_id: str) -> list[str]:
    """Distinct signals for one principle found in text."""
    signals = PRINCIPLE_SIGNALS[principle_id]
    hits = contains_terms(text, signals.signals)
    if signals.counts_metrics and text and METRIC_PATTERN.search(text):
        hits.append(METRIC_SIGNAL)
    return hits


def analyze_with_pm_principles(text: str) -> PMAnalysis:
    """Score principle coverage of a bullet and suggest fixes for each gap."""
    score = 0
    missing: list[PMPrinciple] = []
    suggestions: list[str] = []
    for principle in PM_CORE_PRINCIPLES:
        signals = PRINCIPLE_SIGNALS[principle.id]
        if principle_hits(text, principle.id):
            score += signals.weight
        else:
            missing.append(principle)
            suggestions.append(signals.suggestion)
    return PMAnalysis(score=float(score), missing_principles=missing, suggestions=suggestions)


def get_principles_for_context(context: str) -> list[PMPrinciple]:
    if context not in PM_COACHING_CONTEXTS:
        raise ValueError(f"Unknown coaching context: {context}")
    primary = PM_COACHING_CONTEXTS[context].primary_principles
    return [p for p in PM_CORE_PRINCIPLES if p.id in primary]


def build_pm_coaching_context(context: str) -> str:
    """Render the coaching guidance for a context as prompt text."""
    config = PM_COACHING_CONTEXTS.get(context)
    if config is None:
        raise ValueError(f"Unknown coaching context: {context}")

    subject = "CV/resume" if context == "cv_tailor" else "interview preparation"
    lines = [
        "## Product Manager Intelligence",
        "",
        f"You're helping the user with their {subject}. Apply these PM principles:",
        "",
        "### Key Principles to Emphasize:",
    ]
    for principle in get_principles_for_context(context):
        lines.append(f"**{principle.name}**: {principle.description}")
        lines.append(f"Key questions: {', '.join(principle.key_questions)}")
        lines.append(f"Weak: {principle.example_framing.weak}")
        lines.append(f"Strong: {principle.example_framing.strong}")
        lines.append("")

    lines.append("### Coaching Guidance:")
    lines.extend(f"- {tip}" for tip in config.guidance)

    if config.red_flags:
        lines.append("")
        lines.append("### Red Flags to Watch For:")
        lines.extend(f"- {flag}" for flag in config.red_flags)

    if config.star_template:
        lines.append("")
        lines.append("### STAR Method Template:")
        lines.extend(f"- **{k.capitalize()}**: {v}" for k, v in config.star_template.items())

    return "\n".join(lines) + "\n"
