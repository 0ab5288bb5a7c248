"""Template registry for resume generation.

The catalog is one static table. Every style table is validated when this
module is imported, so a misconfigured template fails at startup rather
than during an export.
"""

from __future__ import annotations

from resume_layout.layout.styles import build_style_table, validate_style_table
from resume_layout.templates.base import ResumeTemplate

__all__ = [
    "DEFAULT_TEMPLATE_ID",
    "ResumeTemplate",
    "all_templates",
    "get_template",
    "list_templates",
]

DEFAULT_TEMPLATE_ID = "modern"

_CATALOG: tuple[ResumeTemplate, ...] = (
    ResumeTemplate(
        id="modern",
        name="Modern Professional",
        description=(
            "Clean single-column layout with modern typography. "
            "Perfect for tech and business roles."
        ),
        category="professional",
        styles=build_style_table("helvetica"),
    ),
    ResumeTemplate(
        id="classic",
        name="Classic ATS",
        description=(
            "Traditional format guaranteed to pass all ATS systems. Conservative and reliable."
        ),
        category="traditional",
        styles=build_style_table(
            "times", accent=(17, 24, 39), heading=(17, 24, 39), body=(31, 41, 55)
        ),
    ),
    ResumeTemplate(
        id="creative",
        name="Creative ATS",
        description=(
            "Balanced design with subtle creative elements while maintaining ATS compatibility."
        ),
        category="creative",
        styles=build_style_table("helvetica", accent=(124, 58, 237), title_size=22.0),
    ),
    ResumeTemplate(
        id="minimal",
        name="Minimalist",
        description="Ultra-clean design that lets your content shine. Great for any industry.",
        category="minimal",
        styles=build_style_table(
            "helvetica", accent=(75, 85, 99), title_size=18.0, section_size=12.0
        ),
    ),
    ResumeTemplate(
        id="executive",
        name="Executive",
        description=(
            "Sophisticated design for senior leadership positions. "
            "Emphasizes achievements and metrics."
        ),
        category="executive",
        styles=build_style_table("times", accent=(30, 58, 138), title_size=22.0),
    ),
    ResumeTemplate(
        id="tech",
        name="Tech Focused",
        description=(
            "Optimized for software engineers and tech professionals. "
            "Highlights technical skills."
        ),
        category="technology",
        styles=build_style_table("helvetica", accent=(5, 150, 105)),
    ),
    ResumeTemplate(
        id="academic",
        name="Academic",
        description="Structured format for researchers, professors, and academic professionals.",
        category="academic",
        styles=build_style_table("times", accent=(127, 29, 29), section_size=13.0),
    ),
    ResumeTemplate(
        id="international",
        name="Consultant",
        description=(
            "Professional layout ideal for consultants and business analysts. Results-focused."
        ),
        category="international",
        styles=build_style_table("helvetica", accent=(13, 148, 136)),
    ),
)

_REGISTRY: dict[str, ResumeTemplate] = {template.id: template for template in _CATALOG}

for _template in _CATALOG:
    validate_style_table(_template.styles)


def get_template(template_id: str) -> ResumeTemplate:
    """Return the template registered under *template_id*.

    Raises:
        ValueError: If no template with that id exists.
    """
    try:
        return _REGISTRY[template_id]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {template_id!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[str]:
    """Return sorted ids of all registered templates."""
    return sorted(_REGISTRY)


def all_templates() -> list[ResumeTemplate]:
    """Return every template in catalog order."""
    return list(_CATALOG)
