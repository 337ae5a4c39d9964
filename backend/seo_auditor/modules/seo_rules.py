# seo_auditor/modules/seo_rules.py

from typing import List

from seo_auditor.core.schemas import KeywordReport, MetaData, Suggestion


# ======================
# OPTIMAL RANGES
# ======================

TITLE_OPTIMAL_MIN = 50
TITLE_OPTIMAL_MAX = 60
DESC_OPTIMAL_MIN = 150
DESC_OPTIMAL_MAX = 160

# Response time thresholds (ms)
FAST_MAX_MS = 800
AVERAGE_MAX_MS = 1500

# Above this a single keyword starts to look stuffed
KEYWORD_DENSITY_MAX = 3.0

SEVERITY_PENALTIES = {
    "bad": 15,
    "warning": 5,
    "good": 0,
}


def length_status(length: int, minimum: int, maximum: int) -> str:
    if length == 0:
        return "bad"
    if length < minimum or length > maximum:
        return "warning"
    return "good"


def grade_load_time(load_time_ms: int) -> str:
    if load_time_ms > AVERAGE_MAX_MS:
        return "Slow"
    if load_time_ms > FAST_MAX_MS:
        return "Average"
    return "Fast"


def build_meta(title: str, description: str, headings) -> MetaData:
    """Attach length and status for title/description to the extracted tags."""
    return MetaData(
        title=title,
        description=description,
        title_length=len(title),
        title_status=length_status(len(title), TITLE_OPTIMAL_MIN, TITLE_OPTIMAL_MAX),
        description_length=len(description),
        description_status=length_status(len(description), DESC_OPTIMAL_MIN, DESC_OPTIMAL_MAX),
        headings=headings,
    )


# ============================
# PAGE RULES
# ============================

def evaluate_page(meta: MetaData, density: KeywordReport) -> List[Suggestion]:
    suggestions: List[Suggestion] = []

    # Title
    if meta.title_status == "bad":
        suggestions.append(Suggestion(type="bad", message="Page has no title"))
    elif meta.title_status == "warning":
        suggestions.append(Suggestion(
            type="warning",
            message=f"Title length is {meta.title_length} characters "
                    f"(optimal {TITLE_OPTIMAL_MIN}-{TITLE_OPTIMAL_MAX})",
        ))
    else:
        suggestions.append(Suggestion(
            type="good", message=f"Title length is optimal ({meta.title_length} characters)"
        ))

    # Meta description
    if meta.description_status == "bad":
        suggestions.append(Suggestion(type="bad", message="Meta description is missing"))
    elif meta.description_status == "warning":
        suggestions.append(Suggestion(
            type="warning",
            message=f"Meta description length is {meta.description_length} characters "
                    f"(optimal {DESC_OPTIMAL_MIN}-{DESC_OPTIMAL_MAX})",
        ))
    else:
        suggestions.append(Suggestion(
            type="good",
            message=f"Meta description is within recommended length ({meta.description_length} characters)",
        ))

    # H1
    h1_count = len(meta.headings.h1)
    if h1_count == 0:
        suggestions.append(Suggestion(type="bad", message="Page has no H1 tag"))
    elif h1_count > 1:
        suggestions.append(Suggestion(
            type="warning", message=f"Page has {h1_count} H1 tags, use exactly one"
        ))
    else:
        suggestions.append(Suggestion(type="good", message="Page has exactly one H1 tag"))

    # Keyword density (top single word only)
    if density.single:
        top = density.single[0]
        if top.density > KEYWORD_DENSITY_MAX:
            suggestions.append(Suggestion(
                type="warning",
                message=f"Keyword '{top.phrase}' density is high ({top.density:.1f}%). "
                        f"Aim for 2-{KEYWORD_DENSITY_MAX:g}%",
            ))

    return suggestions


# ======================
# SEO SCORING ENGINE
# ======================

class SEOScoringEngine:
    """Fixed heuristic: 100 minus a penalty per warning/bad suggestion."""

    def __init__(self, suggestions: List[Suggestion]):
        self.suggestions = suggestions

    def severity_count(self):
        sev = {"good": 0, "warning": 0, "bad": 0}
        for s in self.suggestions:
            sev[s.type] += 1
        return sev

    def score(self) -> int:
        penalty = sum(SEVERITY_PENALTIES.get(s.type, 0) for s in self.suggestions)
        return min(max(100 - penalty, 0), 100)
