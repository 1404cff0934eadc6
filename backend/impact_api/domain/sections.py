from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

# Fields the store owns; never accepted from a client payload.
IDENTITY_FIELDS = frozenset({"_id", "id", "slug", "updatedAt", "createdAt"})


@dataclass(frozen=True)
class SectionType:
    """
    A named content area of the report.

    `api_name` is the path segment under /api/impact, `collection` the
    logical collection its documents live in, `allowed_fields` the only
    top-level keys a PUT may write.
    """
    api_name: str
    collection: str
    allowed_fields: FrozenSet[str]

    def sanitize(self, candidate: dict) -> dict:
        return {
            key: value
            for key, value in candidate.items()
            if key in self.allowed_fields and key not in IDENTITY_FIELDS
        }


_VISIBILITY = ("visible", "animationsEnabled", "ariaLabel")

SECTION_TYPES = (
    SectionType("hero", "hero", frozenset({
        "backgroundColor", "backgroundImage", "backgroundImageAlt", "backgroundGradient",
        "title", "titleColor", "titleUnderlineColor",
        "subtitle", "subtitleColor",
        "year", "yearColor",
        "tagline", "taglineColor",
        "bubbles", "bubbleBgColor", "bubbleBorderColor", "bubbleTextColor",
        "primaryCta", "secondaryCta",
        "backgroundVideo", "overlay",
        "textAlign", "layoutVariant", "ariaLabel",
    })),
    SectionType("mission", "mission", frozenset({
        *_VISIBILITY,
        "title", "titleColor", "badgeText", "statementTitle", "statementText",
        "statementMeta", "serif", "stats", "statsTitle", "backgroundColor",
        "backgroundImage", "sectionBgGradient",
    })),
    SectionType("defaults", "defaults", frozenset({
        "sectionOrder", "disabledSections",
        "colorSwatches", "primaryColor", "secondaryColor", "accentColor",
        "fontFamily", "pageBackground",
    })),
    SectionType("population", "population", frozenset({
        *_VISIBILITY,
        "title", "titleColor", "sectionTitle", "sectionBgGradient",
        "demographicsTitle", "demographicsCaption", "demographicsData",
        "skillsTitle", "skillsList", "skillChipBgColor", "skillChipBorderColor",
        "skillChipTextColor", "infoCard", "stats",
    })),
    SectionType("financial", "financial", frozenset({
        *_VISIBILITY,
        "title", "subtitle", "sectionBgGradient",
        "revenueData", "expenseData",
        "comesFromTitle", "comesFromData", "goesToTitle", "goesToData",
        "kpiRevenueLabel", "kpiExpensesLabel", "kpiNetLabel", "kpiValueColor",
        "kpiNetPositiveColor", "kpiNetNegativeColor",
    })),
    SectionType("method", "method", frozenset({
        *_VISIBILITY,
        "title", "subtitle", "subtitleColor", "sectionBgGradient",
        "methodItems", "cardBgColor", "cardBorderColor", "cardTitleColor",
    })),
    SectionType("curriculum", "curriculum", frozenset({
        *_VISIBILITY,
        "title", "subtitle", "subtitleColor", "sectionBgGradient",
        "pedalCards", "timelineItems", "cardTitleColor", "cardTextColor",
        "timelineItemTitleColor", "timelineItemTextColor",
    })),
    SectionType("impact-section", "impactSection", frozenset({
        *_VISIBILITY,
        "title", "subtitle", "sectionBgGradient",
        "statsTitle", "statsTitleColor", "statCaptionColor", "turntableStats",
        "highlights", "highlightChips",
    })),
    SectionType("hear-our-impact", "hearOurImpact", frozenset({
        *_VISIBILITY,
        "title", "subtitle", "sectionBgGradient", "videos", "featuredVideo",
        "cardBgColor", "cardTitleColor",
    })),
    SectionType("testimonials", "testimonials", frozenset({
        *_VISIBILITY,
        "eyebrowText", "eyebrowColor", "name", "quoteText", "quoteTextColor",
        "quoteMarkColor", "attributionText", "attributionColor", "image",
        "imageAlt", "sectionBgGradient", "testimonials",
    })),
    SectionType("national-impact", "nationalImpact", frozenset({
        *_VISIBILITY,
        "title", "subtitle", "sectionBgGradient", "locations", "stats",
        "mapImage", "mapImageAlt",
    })),
    SectionType("flex-a", "flexA", frozenset({
        *_VISIBILITY,
        "label", "labelBgColor", "title", "copy", "subhead", "quote",
        "quoteAuthor", "stats", "image", "imageAlt", "sectionBgColor",
    })),
    SectionType("flex-b", "flexB", frozenset({
        *_VISIBILITY,
        "label", "labelBgColor", "title", "copy", "subhead", "quote",
        "quoteAuthor", "stats", "image", "imageAlt", "sectionBgColor",
    })),
    SectionType("flex-c", "flexC", frozenset({
        *_VISIBILITY,
        "label", "labelBgColor", "title", "copy", "subhead", "quote",
        "quoteAuthor", "stats", "image", "imageAlt", "sectionBgColor",
    })),
    SectionType("impact-levels", "impactLevels", frozenset({
        *_VISIBILITY,
        "header", "levels", "cta", "cardBgColor", "amountColor",
        "descriptionColor", "sectionBgGradient",
    })),
    SectionType("partners", "partners", frozenset({
        # Visibility
        "visible", "animationsEnabled",
        # Background
        "sectionBgGradient", "glowColor1", "glowColor2", "glowColor3",
        # Header
        "title", "titleGradient", "subtitle", "subtitleColor",
        # Grid label
        "gridLabel", "gridLabelColor",
        # Badge/card styling
        "badgeBgColor", "badgeHoverBgColor", "badgeBorderColor", "badgeHoverBorderColor",
        "badgeTitleColor", "badgeDescriptorColor", "badgeBorderRadius",
        "partners", "fallbackLink",
        "betweenNoteText", "betweenNoteColor",
        "carousel", "cta",
        "ariaLabel",
    })),
    SectionType("footer", "footer", frozenset({
        *_VISIBILITY,
        "description", "descriptionColor", "mailingAddress", "bottomBar",
        "socialLinks", "columns", "logo", "backgroundColor",
    })),
)

SECTIONS_BY_API_NAME: Dict[str, SectionType] = {s.api_name: s for s in SECTION_TYPES}


def get_section_type(api_name: str) -> Optional[SectionType]:
    return SECTIONS_BY_API_NAME.get(api_name)
