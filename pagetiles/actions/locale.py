"""Request locale negotiation from the Accept-Language header."""

from typing import Optional

from starlette.requests import Request


def normalize_locale(tag: str) -> str:
    """'en-us' -> 'en_US', 'zh-hant-tw' -> 'zh_Hant_TW'."""
    parts = [p for p in tag.strip().replace("-", "_").split("_") if p]
    if not parts:
        return ""
    normalized = [parts[0].lower()]
    for part in parts[1:]:
        if len(part) == 2:
            normalized.append(part.upper())
        elif len(part) == 4:
            normalized.append(part.title())
        else:
            normalized.append(part)
    return "_".join(normalized)


def parse_accept_language(header: Optional[str]) -> list[str]:
    """Return locales from an Accept-Language header, best first."""
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, item in enumerate(header.split(",")):
        tag, _, params = item.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        weighted.append((-quality, index, normalize_locale(tag)))

    return [locale for _, _, locale in sorted(weighted)]


def request_locale(request: Request, default: str = "en") -> str:
    """The request's preferred locale, or `default` if it states none."""
    locales = parse_accept_language(request.headers.get("accept-language"))
    return locales[0] if locales else default
