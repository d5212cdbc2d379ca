"""Romantic: pro layout in dusty rose and mauve."""

from wedsite.template_types.base import BASE_DEFAULTS, TemplateType
from wedsite.utils.merge import deep_merge

TEMPLATE_TYPE = TemplateType(
    key="romantic",
    name="Romantic Pink Template",
    description="Pro template with romantic pink and rose color scheme",
    preview_image="/templates/romantic-preview.jpg",
    features=["Pro Template Layout", "Pink & Rose Color Scheme", "All Pro Features", "Fully Customizable"],
    defaults=deep_merge(
        BASE_DEFAULTS,
        {
            "theme": {
                "colors": {
                    "primary": "#9f1239",
                    "secondary": "#be123c",
                    "accent": "#a855f7",
                    "background": "#fdf2f8",
                },
            },
        },
    ),
)
