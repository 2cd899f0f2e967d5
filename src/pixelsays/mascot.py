MASCOT = r"""            _~^~^~_
        \) /  o o  \ (/
          '_   -   _'
          / '-----' \
"""


def mascot_lines() -> list[str]:
    """The fixed crab body drawn under the bubble when there's no image."""
    return MASCOT.splitlines()
