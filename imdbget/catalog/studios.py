"""
Studio name to IMDB company identifier lookup.

Some studios are registered upstream under more than one company record;
those resolve to every identifier, in the order their passes should run.
"""
from __future__ import annotations

import re
from typing import Dict, List, Tuple

COMPANY_ID_PATTERN = re.compile(r"^co\d+$")
LIST_TERMINATOR = "END"

# Add production or distribution company codes here by looking at the
# companies= parameter of IMDB search URLs.
STUDIO_IDENTIFIERS: Dict[str, Tuple[str, ...]] = {
    # Sony is formerly Columbia; IMDB uses that designation
    "sony": ("columbia", "co0086397"),
    "cbs": ("co0274041",),
    "lucas": ("co0071326",),
    "ufc": ("co0147548",),
    "lionsgate": ("co0026995", "co0179392"),
    "hdnet": ("co0094788",),
    "own": ("co0229287",),
    "nbcu": ("co0095173", "co0022762", "co0005073", "co0022548"),
    "natgeo": ("co0139461",),
    "aetv": ("co0056790",),
    "pbs": ("co0039462",),
    "lfp": ("co0035870", "co0042788", "co0044807"),
}

# Accepted verbatim by the search endpoint.
PASSTHROUGH_STUDIOS: Tuple[str, ...] = (
    "warner",
    "fox",
    "universal",
    "dreamworks",
    "disney",
    "paramount",
    "mgm",
)

KNOWN_STUDIOS: Tuple[str, ...] = tuple(sorted(set(STUDIO_IDENTIFIERS) | set(PASSTHROUGH_STUDIOS)))


def _split_identifier_list(value: str) -> List[str]:
    identifiers: List[str] = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        if item.upper() == LIST_TERMINATOR:
            break
        identifiers.append(item)
    return identifiers


def resolve_identifiers(name: str) -> List[str]:
    """Map a studio name to the ordered list of identifiers to query.

    Unknown names are returned unchanged so the upstream service decides
    whether they are valid. The result is never empty.
    """

    key = name.strip().lower()
    if key in STUDIO_IDENTIFIERS:
        return list(STUDIO_IDENTIFIERS[key])
    if COMPANY_ID_PATTERN.match(key):
        return [key]
    if "," in key:
        identifiers = _split_identifier_list(key)
        if identifiers:
            return identifiers
    return [key or name]
