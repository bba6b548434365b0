"""Slug normalization for proposal filenames"""

import re


PREFIX_RE = re.compile(r'^[0-9]{4}-')

# Historical slug alphabet keeps only the digits 0 and 1.
LEGACY_RUN_RE = re.compile(r'[^a-z0-1-]+')
DIGIT_RUN_RE = re.compile(r'[^a-z0-9-]+')


def strip_prefix(name: str) -> str:
    """Remove a leading four-digit sequence prefix (e.g. '0007-') if present."""
    return PREFIX_RE.sub('', name, count=1)


def slugify(text: str, keep_all_digits: bool = False) -> str:
    """Collapse every run of characters outside the slug alphabet to a single hyphen.

    Unlike a URL slug, leading/trailing hyphens are kept so that a canonical
    name always maps to itself.
    """
    pattern = DIGIT_RUN_RE if keep_all_digits else LEGACY_RUN_RE
    return pattern.sub('-', text)
