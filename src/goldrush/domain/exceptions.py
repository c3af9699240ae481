class MapTemplateError(Exception):
    """Raised at start-up when the map template or spawn point is malformed."""
