"""English bundle (default locale)."""

BUNDLE = {
    "navigation": {
        "home": "Home",
        "features": "Features",
        "templates": "Templates",
        "pricing": "Pricing",
        "contact": "Contact",
    },
    "hero": {
        "title": "Create Your Perfect Wedding Website",
        "subtitle": "Beautiful, customizable wedding invitation websites that capture your love story",
        "cta": "Get Started Today",
        "viewTemplates": "View All Templates",
    },
    "features": {
        "title": "Everything You Need for Your Wedding Website",
        "subtitle": "Professional features to make your special day unforgettable",
        "items": [
            {
                "title": "Beautiful Templates",
                "description": "Choose from stunning, professionally designed templates",
            },
            {
                "title": "RSVP Management",
                "description": "Easily collect and manage guest responses with our built-in RSVP system",
            },
            {
                "title": "Mobile Responsive",
                "description": "Perfect display on all devices",
            },
            {
                "title": "Photo Galleries",
                "description": "Upload and display beautiful wedding photos",
            },
        ],
    },
    "pricing": {
        "title": "Choose Your Perfect Wedding Website",
        "subtitle": "From intimate ceremonies to grand celebrations, we have the perfect template for your day.",
        "viewTemplate": "View Template",
        "comparisonTitle": "Detailed Feature Comparison",
    },
    "contact": {
        "title": "Ready to Create Your Wedding Website?",
        "subtitle": "Get started today and create a beautiful website for your special day",
        "cta": "Start Building Now",
    },
    "common": {
        "currency": "AMD",
        "learnMore": "Learn More",
        "getStarted": "Get Started",
        "viewMore": "View More",
        "included": "Included",
        "notIncluded": "Not Included",
    },
    "rsvp": {
        "messages": {
            "success": "Thank you! Your RSVP has been received.",
            "alreadySubmitted": "An RSVP has already been submitted with this email",
            "invalid": "Some fields are not filled in correctly",
            "maintenance": "RSVPs are temporarily closed",
        },
    },
    "errors": {
        "templateNotFound": "Template not found",
        "serverError": "Server error",
    },
    # Guest-facing strings overlaid onto every composed template config
    "template": {
        "countdown": {
            "subtitle": "Until our big day",
            "labels": {"days": "Days", "hours": "Hours", "minutes": "Minutes", "seconds": "Seconds"},
        },
        "calendar": {
            "dayLabels": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        },
        "rsvp": {
            "form": {
                "firstName": "First Name",
                "firstNamePlaceholder": "Your first name",
                "lastName": "Last Name",
                "lastNamePlaceholder": "Your last name",
                "email": "Email Address",
                "emailPlaceholder": "your@email.com",
                "guestCount": "Number of Guests",
                "guestCountPlaceholder": "Select number",
                "guestNames": "Guest Names",
                "guestNamesPlaceholder": "Names of all attendees",
                "attendance": "Will you attend?",
                "attendingYes": "Yes, I'll be there!",
                "attendingNo": "Sorry, can't make it",
                "submitButton": "Send RSVP",
                "submittingButton": "Sending...",
            },
            "messages": {
                "success": "Thank you! Your RSVP has been received.",
                "error": "There was an error submitting your RSVP. Please try again.",
                "loading": "Submitting your RSVP...",
                "required": "This field is required.",
            },
        },
        "navigation": {
            "home": "Home",
            "countdown": "Countdown",
            "calendar": "Calendar",
            "locations": "Locations",
            "timeline": "Schedule",
            "rsvp": "RSVP",
            "photos": "Photos",
        },
        "maintenance": {
            "passwordPrompt": "Enter password",
            "wrongPassword": "Incorrect password",
            "enterPassword": "Submit",
        },
        "ui": {
            "buttons": {
                "loading": "Loading...",
                "close": "Close",
                "cancel": "Cancel",
                "save": "Save",
                "back": "Back",
                "next": "Next",
            },
            "messages": {
                "loading": "Loading...",
                "error": "An error occurred",
                "success": "Successfully saved",
                "notFound": "Not found",
                "offline": "No internet connection",
            },
        },
        "mapModal": {
            "title": "Location",
            "closeButton": "Close",
            "loadingMessage": "Loading map...",
            "errorMessage": "Failed to load map",
        },
    },
}
