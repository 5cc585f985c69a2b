"""Phrase tables for the local sentence scorer.

Each pattern counts at most once per sentence. The order and literals are
fixed; changing them changes every fallback score.
"""
import re

# ASCII word boundaries and case folding
_I = re.IGNORECASE | re.ASCII

# Formal, hedging and transition-heavy phrasing
AI_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bit is (important|essential|crucial|worth noting|noteworthy)\b", _I),
    re.compile(r"\bfurthermore\b", _I),
    re.compile(r"\bin conclusion\b", _I),
    re.compile(r"\bin summary\b", _I),
    re.compile(r"\bcomprehensive (understanding|approach|framework|analysis)\b", _I),
    re.compile(r"\bstakeholders\b", _I),
    re.compile(r"\bfundamentally\b", _I),
    re.compile(r"\bunprecedented\b", _I),
    re.compile(r"\bencompass(ing)?\b", _I),
    re.compile(r"\bimplications\b", _I),
    re.compile(r"\blandscape\b", _I),
    re.compile(r"\bleverage\b", _I),
    re.compile(r"\bmitigate\b", _I),
    re.compile(r"\bproactive(ly)?\b", _I),
    re.compile(r"\bsynerg", _I),
    re.compile(r"\bhave yielded\b", _I),
    re.compile(r"\bmust be carefully\b", _I),
    re.compile(r"\boptimal(ly)?\b", _I),
    re.compile(r"\brobust\b", _I),
    re.compile(r"\bdelve\b", _I),
    re.compile(r"\btailored\b", _I),
    re.compile(r"\bseamless(ly)?\b", _I),
    re.compile(r"\bin today's (world|society|landscape)\b", _I),
    re.compile(r"\bit is (clear|evident|apparent) that\b", _I),
    re.compile(r"\bplays? a (crucial|vital|key|important) role\b", _I),
)

# Contractions, fillers and first-person conversational phrasing
HUMAN_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\bI (remember|think|feel|can't|don't|was|tried|ll|mean|guess)\b", _I),
    re.compile(r"\bhonestly\b", _I),
    re.compile(r"\bkind of\b", _I),
    re.compile(r"right\?", _I),
    re.compile(r"\bweird\b", _I),
    re.compile(r"\bmaybe\b", _I),
    re.compile(r"\bactually\b", _I),
    re.compile(r"like,", _I),
    re.compile(r"\bgonna\b", _I),
    re.compile(r"\bbasically\b", _I),
    re.compile(r"'t\b", re.ASCII),  # case-sensitive
    re.compile(r"\bI'll\b", _I),
    re.compile(r"\bwe've\b", _I),
    re.compile(r"\bdoesn't\b", _I),
    re.compile(r"\bcan't\b", _I),
    re.compile(r"\bI'm\b", _I),
    re.compile(r"\bI'd\b", _I),
    re.compile(r"\btbh\b", _I),
    re.compile(r"\bngl\b", _I),
    re.compile(r"\bsorta\b", _I),
    re.compile(r"\bkinda\b", _I),
    re.compile(r"\byou know\b", _I),
    re.compile(r"\bI mean\b", _I),
)


def count_matches(patterns: tuple[re.Pattern[str], ...], sentence: str) -> int:
    """Number of patterns that match anywhere in the sentence."""
    return sum(1 for pattern in patterns if pattern.search(sentence))
