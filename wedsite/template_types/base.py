"""
Base defaults shared by every template type.

Stored in wire form (camelCase keys) so they merge directly with tenant
JSON. Type modules deep-merge their own overrides on top.
"""

from dataclasses import dataclass, field
from typing import Any

# Last-resort theme colors when neither tenant nor type sets one
NEUTRAL_PALETTE: dict[str, str] = {
    "primary": "#374151",
    "secondary": "#6b7280",
    "accent": "#9ca3af",
    "background": "#ffffff",
    "textColor": "#1f2937",
}


@dataclass(frozen=True)
class TemplateType:
    key: str
    name: str
    description: str
    defaults: dict[str, Any]
    features: list[str] = field(default_factory=list)
    preview_image: str | None = None

    def summary(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "features": list(self.features),
            "previewImage": self.preview_image,
        }


ALL_SECTIONS_ENABLED = {
    name: {"enabled": True}
    for name in ("hero", "countdown", "calendar", "locations", "timeline", "rsvp", "photos")
}

BASE_DEFAULTS: dict[str, Any] = {
    "couple": {
        "groomName": "John",
        "brideName": "Jane",
        "combinedNames": "John & Jane",
    },
    "wedding": {
        "date": "2025-06-15T16:00:00",
        "displayDate": "June 15th, 2025",
        "month": "June",
        "day": "15",
        "venue": "Grand Ballroom",
    },
    "hero": {
        "invitation": "You're Invited to Our Wedding",
        "welcomeMessage": "We're getting married and we want you to celebrate with us!",
        "musicButton": "Play Music",
        "playIcon": "▶",
        "pauseIcon": "⏸",
        "images": [],
    },
    "countdown": {
        "subtitle": "Until our big day",
        "backgroundImage": "",
        "labels": {"days": "Days", "hours": "Hours", "minutes": "Minutes", "seconds": "Seconds"},
    },
    "calendar": {
        "title": "Mark Your Calendar",
        "description": "Save the date for our wedding",
        "monthTitle": "Wedding Date",
        "dayLabels": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    },
    "locations": {
        "sectionTitle": "Wedding Locations",
        "venues": [
            {
                "id": "ceremony",
                "title": "Ceremony",
                "name": "St. Mary's Church",
                "description": "Join us for our wedding ceremony.",
                "mapButton": "View on Map",
                "mapIcon": "📍",
            },
            {
                "id": "reception",
                "title": "Reception",
                "name": "Grand Ballroom",
                "description": "Celebrate with us at our reception with dinner and dancing.",
                "mapButton": "View on Map",
                "mapIcon": "📍",
            },
        ],
    },
    "timeline": {
        "title": "Wedding Day Schedule",
        "events": [
            {"time": "16:00", "title": "Wedding Ceremony", "description": "At St. Mary's Church"},
            {"time": "17:30", "title": "Cocktail Hour", "description": "Photos and drinks"},
            {"time": "19:00", "title": "Reception Dinner", "description": "At Grand Ballroom"},
        ],
        "afterMessage": {
            "thankYou": "Thank you for celebrating with us",
            "notes": "Your presence is the greatest gift",
        },
    },
    "rsvp": {
        "title": "Please RSVP",
        "description": "We hope you can join us on our special day.",
        "maxGuests": 10,
        "guestOptions": [
            {"value": "1", "label": "1 Guest"},
            {"value": "2", "label": "2 Guests"},
            {"value": "3", "label": "3 Guests"},
            {"value": "4", "label": "4 Guests"},
            {"value": "5", "label": "5+ Guests"},
        ],
    },
    "photos": {
        "title": "Our Photos",
        "description": "Share in our memories",
        "downloadButton": "Download",
        "uploadButton": "Upload Photo",
        "comingSoonMessage": "Photos coming soon",
        "images": [],
        "galleryImages": [],
    },
    "footer": {
        "thankYouMessage": "Thank you for being part of our love story.",
    },
    "email": {"recipients": []},
    "maintenance": {
        "enabled": False,
        "password": None,
        "title": "Under Maintenance",
        "subtitle": "We'll be back soon",
        "message": "Website under maintenance",
        "countdownText": "Estimated time",
    },
    "sections": ALL_SECTIONS_ENABLED,
    "theme": {
        "colors": {},
        "fonts": {"heading": "Playfair Display, serif", "body": "Inter, sans-serif"},
    },
}
