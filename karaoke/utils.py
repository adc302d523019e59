from titlecase import titlecase


def sanitize_name(name):
    """
    Collapse runs of whitespace, and titlecase names typed in all lowercase.
    Names with any capitals are kept as typed ("DJ McFly" stays "DJ McFly").
    """
    sanitized = ' '.join(name.split())
    return titlecase(sanitized) if sanitized.islower() else sanitized


def format_lineup(names):
    if not names:
        return 'nobody'
    if len(names) == 1:
        return names[0]
    else:
        return f"{', '.join(names[:-1])} and then {names[-1]}"
