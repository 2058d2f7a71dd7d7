"""
File path to type identifier translation.

Identifiers are derived from paths only, never from file contents:

    root=/srv/project/  path=app  namespace=App
    /srv/project/app/Events/Foo.py  ->  App.Events.Foo
"""

import os
from pathlib import Path

from class_discovery.domain.exceptions import PathTranslationError
from class_discovery.domain.models import (
    IDENTIFIER_DELIMITER,
    SOURCE_SUFFIX,
    DiscoveryRequest,
    ucfirst,
)


def translate(request: DiscoveryRequest, candidate: str | Path) -> str:
    """
    Translate a candidate file into a type identifier.

    Args:
        request: Discovery request the candidate was enumerated for
        candidate: Absolute path of the source file

    Returns:
        Dotted type identifier

    Raises:
        PathTranslationError: If the candidate is not under ``request.root``
    """
    candidate = str(candidate)

    if not candidate.startswith(request.root):
        raise PathTranslationError(
            f"Candidate {candidate} is outside of the discovery root {request.root}",
            context={"candidate": candidate, "root": request.root},
        )

    relative = candidate[len(request.root):].strip(os.sep)

    if relative.endswith(SOURCE_SUFFIX):
        relative = relative[: -len(SOURCE_SUFFIX)]

    identifier = ucfirst(relative).replace(os.sep, IDENTIFIER_DELIMITER)

    if not request.path:
        if request.namespace:
            return request.namespace + IDENTIFIER_DELIMITER + identifier
        return identifier

    # Single literal substitution of the (already normalised) subpath.
    subpath = ucfirst(request.path).replace(os.sep, IDENTIFIER_DELIMITER)
    return identifier.replace(subpath, request.namespace, 1).strip(IDENTIFIER_DELIMITER)
