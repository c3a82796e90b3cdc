WILDCARD = "*"

# major, minor, patch
_SLOTS = 3


def get_sdk_version(version: str) -> str:
    """
    Relax an exact runtime version into an SDK constraint.

    The major and minor components are kept and the patch is wildcarded,
    so any SDK from the same feature line qualifies: "6.0.3" -> "6.0.*".
    Inputs without a minor component cannot pin a line and become "*";
    this deliberately departs from the plain padding walk, which would
    give "6.*" for "6".
    """
    if not version:
        return WILDCARD

    pieces = version.split(".", _SLOTS - 1)
    if len(pieces) < 2:
        return WILDCARD
    while len(pieces) < _SLOTS:
        pieces.append(WILDCARD)

    parts = []
    for i, part in enumerate(pieces):
        if i + 1 == len(pieces):
            part = WILDCARD
        parts.append(part)
        if part == WILDCARD:
            break

    return ".".join(parts)
