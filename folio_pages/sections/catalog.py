"""Built-in section types for the portfolio homepage."""

from __future__ import annotations

from .registry import SectionDescriptor, SectionRegistry

PLACEHOLDER_IMAGE = "https://placehold.co/{size}"

DATA_SECTIONS: tuple[SectionDescriptor, ...] = (
    SectionDescriptor("header", "Header"),
    SectionDescriptor("recent_projects", "Recent Projects"),
    SectionDescriptor("work_experience", "Work Experience"),
    SectionDescriptor("blog", "Blog"),
    SectionDescriptor("connect", "Connect"),
)

CONTENT_SECTIONS: tuple[SectionDescriptor, ...] = (
    SectionDescriptor(
        "hero_centered",
        "Hero (Centered)",
        editable=True,
        default_content={
            "headline": "Centered Hero Headline",
            "subtext": "A compelling subtext goes here.",
            "cta_text": "Get Started",
            "cta_link": "#",
        },
    ),
    SectionDescriptor(
        "hero_split",
        "Hero (Split)",
        editable=True,
        default_content={
            "headline": "Split Hero Headline",
            "subtext": "A compelling subtext.",
            "cta_text": "Learn More",
            "cta_link": "#",
            "image_url": PLACEHOLDER_IMAGE.format(size="600x400"),
        },
    ),
    SectionDescriptor(
        "features_grid",
        "Features Grid",
        editable=True,
        default_content={
            "title": "Our Features",
            "features": [
                {"icon": "✨", "name": "Feature One", "description": "Description one."},
                {"icon": "🚀", "name": "Feature Two", "description": "Description two."},
                {
                    "icon": "💡",
                    "name": "Feature Three",
                    "description": "Description three.",
                },
            ],
        },
    ),
    SectionDescriptor(
        "about_text_image",
        "About (Text & Image)",
        editable=True,
        default_content={
            "title": "About Us",
            "image_url": PLACEHOLDER_IMAGE.format(size="500x500"),
            "paragraph1": "Lorem ipsum dolor sit amet.",
            "paragraph2": "Consectetur adipiscing elit.",
        },
    ),
    SectionDescriptor(
        "testimonials_cards",
        "Testimonials",
        editable=True,
        default_content={
            "title": "What Our Clients Say",
            "testimonials": [
                {"quote": "Amazing work!", "name": "Jane Doe", "company": "Acme Inc."},
                {
                    "quote": "Highly recommended.",
                    "name": "John Smith",
                    "company": "Beta Corp.",
                },
            ],
        },
    ),
    SectionDescriptor(
        "team_cards",
        "Team Cards",
        editable=True,
        default_content={
            "title": "Our Team",
            "members": [
                {
                    "name": "Person 1",
                    "role": "CEO",
                    "image_url": PLACEHOLDER_IMAGE.format(size="200x200"),
                },
                {
                    "name": "Person 2",
                    "role": "CTO",
                    "image_url": PLACEHOLDER_IMAGE.format(size="200x200"),
                },
            ],
        },
    ),
    SectionDescriptor(
        "pricing_tiered",
        "Pricing Table",
        editable=True,
        default_content={
            "title": "Our Plans",
            "tiers": [
                {
                    "name": "Basic",
                    "price": 29,
                    "period": "/mo",
                    "features": ["Feature A", "Feature B"],
                    "cta_text": "Choose Plan",
                },
                {
                    "name": "Pro",
                    "price": 99,
                    "period": "/mo",
                    "features": ["Feature A", "Feature B", "Feature C"],
                    "cta_text": "Choose Plan",
                    "popular": True,
                },
            ],
        },
    ),
    SectionDescriptor(
        "footer_links",
        "Footer (with Links)",
        editable=True,
        multi_instance_allowed=True,
        default_content={
            "copyright": "Your Company Name",
            "columns": [
                {
                    "title": "Product",
                    "links": [
                        {"text": "Pricing", "href": "#"},
                        {"text": "Features", "href": "#"},
                    ],
                }
            ],
        },
    ),
    SectionDescriptor(
        "footer_newsletter",
        "Footer (Newsletter)",
        editable=True,
        multi_instance_allowed=True,
        default_content={
            "title": "Join Our Newsletter",
            "subtitle": "Get the latest updates.",
            "copyright": "Your Company Name",
        },
    ),
)


def build_default_registry() -> SectionRegistry:
    """Return the registry holding every built-in section type."""
    return SectionRegistry((*DATA_SECTIONS, *CONTENT_SECTIONS))


__all__ = ["CONTENT_SECTIONS", "DATA_SECTIONS", "build_default_registry"]
