import re

from unidecode import unidecode

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


def slugify(text):
    text = unidecode(text).lower()
    text = re.sub(r'[^a-z0-9]+', '-', text).strip('-')
    return text


def is_valid_slug(value):
    return bool(value) and SLUG_PATTERN.match(value) is not None
