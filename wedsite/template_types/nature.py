"""Nature: pro layout in sage and forest tones."""

from wedsite.template_types.base import BASE_DEFAULTS, TemplateType
from wedsite.utils.merge import deep_merge

TEMPLATE_TYPE = TemplateType(
    key="nature",
    name="Nature Green Template",
    description="Pro template with natural green and earth tone color scheme",
    preview_image="/templates/nature-preview.jpg",
    features=["Pro Template Layout", "Green & Earth Tone Colors", "All Pro Features", "Fully Customizable"],
    defaults=deep_merge(
        BASE_DEFAULTS,
        {
            "theme": {
                "colors": {
                    "primary": "#166534",
                    "secondary": "#15803d",
                    "accent": "#a3a3a3",
                    "background": "#f7f8f7",
                },
            },
        },
    ),
)
