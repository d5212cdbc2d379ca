"""Classic: clean single-column design."""

from wedsite.template_types.base import BASE_DEFAULTS, TemplateType
from wedsite.utils.merge import deep_merge

TEMPLATE_TYPE = TemplateType(
    key="classic",
    name="Classic Wedding Template",
    description="Clean and simple design with elegant styling",
    preview_image="/templates/classic-preview.jpg",
    features=[
        "Clean Elegant Design",
        "Countdown Timer",
        "Wedding Details Section",
        "Timeline Schedule",
        "RSVP Form",
        "Multiple Color Themes",
    ],
    defaults=deep_merge(
        BASE_DEFAULTS,
        {
            "rsvp": {"maxGuests": 6},
            "theme": {
                "colors": {
                    "primary": "#831843",
                    "secondary": "#be185d",
                    "accent": "#6366f1",
                    "background": "#fef7ff",
                },
                "fonts": {"heading": "Playfair Display", "body": "Inter"},
            },
        },
    ),
)
