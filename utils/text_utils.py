import re


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    # Replace all invalid filename chars with '_'
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    # Collapse consecutive underscores
    name = re.sub(r'_+', '_', name)
    # Trim leading/trailing underscores or dots
    name = name.strip('._')
    return name[:150]  # limit length to avoid OS path length issues
