from .admin_user import AdminRole, AdminUser
from .image import ImageCategory, TemplateImage
from .pricing import PricingPlan, PricingPlanFeature
from .rsvp import Attendance, Rsvp, RsvpEmailClaim
from .template import Template
from .translation import TranslationKey, TranslationValue

__all__ = [
    "AdminRole",
    "AdminUser",
    "Attendance",
    "ImageCategory",
    "PricingPlan",
    "PricingPlanFeature",
    "Rsvp",
    "RsvpEmailClaim",
    "Template",
    "TemplateImage",
    "TranslationKey",
    "TranslationValue",
]
