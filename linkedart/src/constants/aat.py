"""
Getty AAT (Art & Architecture Thesaurus) terms used by the Linked.Art helpers.

Keys are the symbolic names accepted anywhere a classification id is expected
(see normalize_aat_id), values are the fully-qualified vocabulary ids.
"""

AAT_PREFIX = "http://vocab.getty.edu/aat/"

AAT = {
    # identified_by
    "PRIMARY_NAME": AAT_PREFIX + "300404670",
    "ACCESSION_NUMBER": AAT_PREFIX + "300312355",
    "SORT_VALUE": AAT_PREFIX + "300456575",
    # referred_to_by
    "DESCRIPTION": AAT_PREFIX + "300435416",
    "BRIEF_TEXT": AAT_PREFIX + "300418049",
    "DIMENSIONS_DESCRIPTION": AAT_PREFIX + "300435430",
    "MATERIALS_STATEMENT": AAT_PREFIX + "300435429",
    "CREDIT_LINE": AAT_PREFIX + "300435418",
    "COPYRIGHT_LICENSING_STATEMENT": AAT_PREFIX + "300435434",
    "PROVENANCE_STATEMENT": AAT_PREFIX + "300444174",
    "INSCRIPTION": AAT_PREFIX + "300435414",
    "SIGNATURE": AAT_PREFIX + "300028705",
    "CULTURE_STATEMENT": AAT_PREFIX + "300055768",
    # classified_as
    "TYPE_OF_WORK": AAT_PREFIX + "300435443",
    # dimensions
    "HEIGHT": AAT_PREFIX + "300055644",
    "WIDTH": AAT_PREFIX + "300055647",
    "DEPTH": AAT_PREFIX + "300072633",
    # digital
    "DIGITAL_IMAGE": AAT_PREFIX + "300215302",
    "WEB_PAGE": AAT_PREFIX + "300264578",
    # languages
    "LANGUAGE_ENGLISH": AAT_PREFIX + "300388277",
    "LANGUAGE_SPANISH": AAT_PREFIX + "300389311",
    "LANGUAGE_FRENCH": AAT_PREFIX + "300388306",
    "LANGUAGE_DUTCH": AAT_PREFIX + "300388256",
}
