"""Pro: the full-featured layout every other type derives from."""

from wedsite.template_types.base import BASE_DEFAULTS, TemplateType
from wedsite.utils.merge import deep_merge

TEMPLATE_TYPE = TemplateType(
    key="pro",
    name="Pro Wedding Template",
    description="Elegant Armenian wedding template with full features",
    preview_image="/templates/pro-preview.jpg",
    features=[
        "Hero Section with Background Music",
        "Real-time Countdown Timer",
        "Interactive Calendar",
        "Locations with Map Integration",
        "Timeline/Schedule Display",
        "RSVP Form with Email Notifications",
        "Photo Gallery",
        "Armenian, English & Russian Support",
        "Maintenance Mode",
        "Admin Panel",
    ],
    # Blank colors resolve to the neutral palette
    defaults=deep_merge(
        BASE_DEFAULTS,
        {"theme": {"colors": {"primary": "", "secondary": "", "accent": "", "background": "", "textColor": ""}}},
    ),
)
