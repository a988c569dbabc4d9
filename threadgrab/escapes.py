import re

# unicode escapes for "/" and "&" as they appear inside server-rendered payloads
_UNICODE_ESCAPE = re.compile(r"\\u(002[fF]|0026)")


def _clean_once(value: str) -> str:
    value = _UNICODE_ESCAPE.sub(lambda m: chr(int(m.group(1), 16)), value)
    value = value.replace("\\/", "/")
    return value.replace("&amp;", "&")


def clean_url(value: str) -> str:
    """Decode a transport-escaped URL literal into a plain URL.

    Repeats until nothing changes, so nested escapes such as ``&amp;amp;``
    are fully decoded and applying it twice is the same as applying it once.
    """
    if not value:
        return value
    while True:
        cleaned = _clean_once(value)
        if cleaned == value:
            return cleaned
        value = cleaned
