"""Length limits for text value objects."""

MIN_TITLE_LENGTH = 10
MAX_TITLE_LENGTH = 100

MAX_DESCRIPTION_LENGTH = 300

MIN_POST_CONTENT_LENGTH = 300
MAX_POST_CONTENT_LENGTH = 10000

MIN_CATEGORY_NAME_LENGTH = 1
MAX_CATEGORY_NAME_LENGTH = 100

MIN_TAG_NAME_LENGTH = 1
MAX_TAG_NAME_LENGTH = 50

MAX_FIRST_NAME_LENGTH = 50
MAX_LAST_NAME_LENGTH = 50

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 30

# Slugs leave room for transliterations that expand (e.g. "ß" -> "ss")
MAX_SLUG_LENGTH = MAX_TITLE_LENGTH + 10
