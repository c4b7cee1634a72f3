# Canonical AAT ids for the language codes recognised out of the box.
DEFAULT_LANGUAGE_LOOKUP = {
    "en": "http://vocab.getty.edu/aat/300388277",
    "es": "http://vocab.getty.edu/aat/300389311",
    "fr": "http://vocab.getty.edu/aat/300388306",
}

# Reserved value for fragments that declare no language at all.
NO_LANGUAGE = "NO_LANGUAGE"
