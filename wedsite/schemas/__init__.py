from .auth import AdminCreate, AdminResponse, LoginRequest, Token
from .rsvp import RsvpAccepted, RsvpCreate, RsvpResponse
from .wedding_config import WeddingConfig

__all__ = [
    "AdminCreate",
    "AdminResponse",
    "LoginRequest",
    "RsvpAccepted",
    "RsvpCreate",
    "RsvpResponse",
    "Token",
    "WeddingConfig",
]
