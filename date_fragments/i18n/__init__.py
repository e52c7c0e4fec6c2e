"""
Language-specific date parsers

Each locale module exposes its word recognizers and two bundles: bundle_dmy
(day first) and bundle_mdy (month first). There is no locale detection, the
caller picks the bundle explicitly.
"""

from typing import Callable, Dict, Tuple

from date_fragments.i18n import en, ru
from date_fragments.i18n.words import date_for_weekday

BUNDLES: Dict[Tuple[str, str], Callable] = {
    ("en", "dmy"): en.bundle_dmy,
    ("en", "mdy"): en.bundle_mdy,
    ("ru", "dmy"): ru.bundle_dmy,
    ("ru", "mdy"): ru.bundle_mdy,
}

LOCALES = sorted({locale for locale, _ in BUNDLES})
ORDERS = sorted({order for _, order in BUNDLES})


def get_bundle(locale: str, order: str = "dmy") -> Callable:
    """
    Return the bundle parser for a locale and field order

    Args:
        locale: "en" or "ru"
        order: "dmy" (day first) or "mdy" (month first)

    Raises:
        ValueError: If the combination is unknown
    """
    key = (locale.lower(), order.lower())
    if key not in BUNDLES:
        raise ValueError(f"No bundle for locale {locale!r} and order {order!r}; "
                         f"locales: {', '.join(LOCALES)}, orders: {', '.join(ORDERS)}")
    return BUNDLES[key]


__all__ = ["en", "ru", "BUNDLES", "LOCALES", "ORDERS", "date_for_weekday", "get_bundle"]
