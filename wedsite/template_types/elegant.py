"""Elegant: pro layout in navy and silver."""

from wedsite.template_types.base import BASE_DEFAULTS, TemplateType
from wedsite.utils.merge import deep_merge

TEMPLATE_TYPE = TemplateType(
    key="elegant",
    name="Elegant Blue Template",
    description="Pro template with sophisticated blue and gold color scheme",
    preview_image="/templates/elegant-preview.jpg",
    features=["Pro Template Layout", "Blue & Gold Color Scheme", "All Pro Features", "Fully Customizable"],
    defaults=deep_merge(
        BASE_DEFAULTS,
        {
            "countdown": {"backgroundImage": ""},
            "theme": {
                "colors": {
                    "primary": "#1e3a8a",
                    "secondary": "#475569",
                    "accent": "#94a3b8",
                    "background": "#f1f5f9",
                },
            },
        },
    ),
)
