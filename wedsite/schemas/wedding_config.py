"""
Wedding Config Schema

Typed view of a template's composed configuration. Every section and
every field has a default, so a composed config never has a missing
section. Field names are snake_case in Python and camelCase on the wire.

Unknown keys are kept (``extra="allow"``); tenants store free-form JSON
and renderers may read keys this schema does not name.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConfigSection(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Couple(ConfigSection):
    groom_name: str = ""
    bride_name: str = ""
    combined_names: str = ""


class Wedding(ConfigSection):
    date: str = ""
    display_date: str = ""
    month: str = ""
    day: str = ""
    venue: str = ""


class Hero(ConfigSection):
    invitation: str = ""
    welcome_message: str = ""
    music_button: str = ""
    play_icon: str = "▶"
    pause_icon: str = "⏸"
    images: list[str] = Field(default_factory=list)


class CountdownLabels(ConfigSection):
    days: str = "Days"
    hours: str = "Hours"
    minutes: str = "Minutes"
    seconds: str = "Seconds"


class Countdown(ConfigSection):
    subtitle: str = ""
    background_image: str = ""
    labels: CountdownLabels = Field(default_factory=CountdownLabels)


class Calendar(ConfigSection):
    title: str = ""
    description: str = ""
    month_title: str = ""
    day_labels: list[str] = Field(default_factory=lambda: ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"])


class Venue(ConfigSection):
    id: str = ""
    title: str = ""
    name: str = ""
    description: str = ""
    map_button: str = ""
    map_icon: str = "📍"
    image: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None


class Locations(ConfigSection):
    section_title: str = ""
    venues: list[Venue] = Field(default_factory=list)


class TimelineEvent(ConfigSection):
    id: str | None = None
    time: str = ""
    title: str = ""
    description: str | None = None
    icon: str | None = None


class AfterMessage(ConfigSection):
    thank_you: str = ""
    notes: str = ""


class Timeline(ConfigSection):
    title: str = ""
    events: list[TimelineEvent] = Field(default_factory=list)
    after_message: AfterMessage = Field(default_factory=AfterMessage)


class RsvpForm(ConfigSection):
    first_name: str = ""
    first_name_placeholder: str = ""
    last_name: str = ""
    last_name_placeholder: str = ""
    email: str = ""
    email_placeholder: str = ""
    guest_count: str = ""
    guest_count_placeholder: str = ""
    guest_names: str = ""
    guest_names_placeholder: str = ""
    attendance: str = ""
    attending_yes: str = ""
    attending_no: str = ""
    submit_button: str = ""
    submitting_button: str = ""


class GuestOption(ConfigSection):
    value: str
    label: str


class RsvpMessages(ConfigSection):
    success: str = ""
    error: str = ""
    loading: str = ""
    required: str = ""


class Rsvp(ConfigSection):
    title: str = ""
    description: str = ""
    max_guests: int = Field(default=10, ge=1)
    form: RsvpForm = Field(default_factory=RsvpForm)
    guest_options: list[GuestOption] = Field(default_factory=list)
    messages: RsvpMessages = Field(default_factory=RsvpMessages)


class Photos(ConfigSection):
    title: str = ""
    description: str = ""
    download_button: str = ""
    upload_button: str = ""
    coming_soon_message: str = ""
    images: list[str] = Field(default_factory=list)
    gallery_images: list[str] = Field(default_factory=list)


class Navigation(ConfigSection):
    home: str = ""
    countdown: str = ""
    calendar: str = ""
    locations: str = ""
    timeline: str = ""
    rsvp: str = ""
    photos: str = ""


class Footer(ConfigSection):
    thank_you_message: str = ""


class EmailSettings(ConfigSection):
    recipients: list[str] = Field(default_factory=list)


class Maintenance(ConfigSection):
    enabled: bool = False
    password: str | None = None
    title: str = ""
    subtitle: str = ""
    message: str = ""
    countdown_text: str = ""
    password_prompt: str = ""
    wrong_password: str = ""
    enter_password: str = ""


class SectionToggle(ConfigSection):
    enabled: bool = True
    order: int | None = None


class Sections(ConfigSection):
    hero: SectionToggle = Field(default_factory=SectionToggle)
    countdown: SectionToggle = Field(default_factory=SectionToggle)
    calendar: SectionToggle = Field(default_factory=SectionToggle)
    locations: SectionToggle = Field(default_factory=SectionToggle)
    timeline: SectionToggle = Field(default_factory=SectionToggle)
    rsvp: SectionToggle = Field(default_factory=SectionToggle)
    photos: SectionToggle = Field(default_factory=SectionToggle)


class UiIcons(ConfigSection):
    heart: str = "🤍"
    infinity: str = "∞"
    music: str = "🎵"
    calendar: str = "📅"
    location: str = "📍"
    clock: str = "🕒"
    camera: str = "📷"
    email: str = "📧"
    phone: str = "📞"


class UiButtons(ConfigSection):
    loading: str = ""
    close: str = ""
    cancel: str = ""
    save: str = ""
    back: str = ""
    next: str = ""


class UiMessages(ConfigSection):
    loading: str = ""
    error: str = ""
    success: str = ""
    not_found: str = ""
    offline: str = ""


class Ui(ConfigSection):
    icons: UiIcons = Field(default_factory=UiIcons)
    buttons: UiButtons = Field(default_factory=UiButtons)
    messages: UiMessages = Field(default_factory=UiMessages)


class MapModal(ConfigSection):
    title: str = ""
    close_button: str = ""
    loading_message: str = ""
    error_message: str = ""


class ThemeColors(ConfigSection):
    primary: str = ""
    secondary: str = ""
    accent: str = ""
    background: str = ""
    text_color: str = ""


class ThemeFonts(ConfigSection):
    heading: str = "Playfair Display, serif"
    body: str = "Inter, sans-serif"


class Theme(ConfigSection):
    colors: ThemeColors = Field(default_factory=ThemeColors)
    fonts: ThemeFonts = Field(default_factory=ThemeFonts)


class WeddingConfig(ConfigSection):
    """A template's fully composed configuration."""

    couple: Couple = Field(default_factory=Couple)
    wedding: Wedding = Field(default_factory=Wedding)
    hero: Hero = Field(default_factory=Hero)
    countdown: Countdown = Field(default_factory=Countdown)
    calendar: Calendar = Field(default_factory=Calendar)
    locations: Locations = Field(default_factory=Locations)
    timeline: Timeline = Field(default_factory=Timeline)
    rsvp: Rsvp = Field(default_factory=Rsvp)
    photos: Photos = Field(default_factory=Photos)
    navigation: Navigation = Field(default_factory=Navigation)
    footer: Footer = Field(default_factory=Footer)
    email: EmailSettings = Field(default_factory=EmailSettings)
    maintenance: Maintenance = Field(default_factory=Maintenance)
    sections: Sections = Field(default_factory=Sections)
    ui: Ui = Field(default_factory=Ui)
    map_modal: MapModal = Field(default_factory=MapModal)
    theme: Theme = Field(default_factory=Theme)

    def to_public(self) -> dict:
        """Wire payload for guests: camelCase, maintenance password removed."""
        return self.model_dump(by_alias=True, exclude={"maintenance": {"password"}})


SECTION_NAMES: tuple[str, ...] = tuple(
    field.alias or name for name, field in WeddingConfig.model_fields.items()
)
