"""Template fingerprints for log fields.

The compiled-template cache is keyed by the full source text; a fingerprint
only names a template in log output, where the text itself is too long.
"""

import xxhash

FINGERPRINT_LENGTH = 12


def template_fingerprint(source: str, length: int = FINGERPRINT_LENGTH) -> str:
    """
    Short xxhash64 identifier for a template source.

    Never used as a cache key: two different sources may share a fingerprint.

    Examples:
        >>> len(template_fingerprint("<p>{{ name }}</p>"))
        12
    """
    if length <= 0:
        raise ValueError(f"Fingerprint length must be positive: {length}")
    return xxhash.xxh64(source.encode("utf-8")).hexdigest()[:length]


__all__ = ["FINGERPRINT_LENGTH", "template_fingerprint"]
