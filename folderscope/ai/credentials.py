def resolve_credentials(raw):
    """Normalize a raw config value into an ordered list of API keys.

    ``raw`` may be None, a single key, a comma-separated string of keys or a
    list of keys. Blank entries are dropped and order is kept. Duplicates are
    kept too, so a repeated key is simply tried more often.
    """
    if not raw:
        return []

    if isinstance(raw, str):
        parts = raw.split(",") if "," in raw else [raw]
    elif isinstance(raw, (list, tuple)):
        parts = [part for part in raw if isinstance(part, str)]
    else:
        return []

    return [part.strip() for part in parts if part.strip()]
