"""
Field Resolution

Merges a document's personal-info fields (fixed, user-ordered and user-custom)
into one ordered, filtered list ready for display.
"""

from typing import Any, Callable, Iterator, List, Optional, Set

from folio.contexts.composition.document_data_structure import BasicInfo
from folio.contexts.composition.logger import _log_debug
from folio.contexts.composition.render_tree import FieldEntry
from folio.utils.timestamp import format_month_year

# Applies when the document has no field order of its own
FALLBACK_FIELD_KEYS = ("email", "phone", "location")

FALLBACK_FIELD_LABELS = {
    "en": {"email": "Email", "phone": "Phone", "location": "Location", "birthDate": "Birth Date"},
    "zh": {"email": "邮箱", "phone": "电话", "location": "所在地", "birthDate": "出生日期"},
}

# Shown separately as the page heading
HEADING_FIELD_KEYS = {"name", "title"}

DATE_FIELD_KEYS = {"birthDate"}

DateFormatter = Callable[[str, str], str]


def _labels_for(locale: str) -> dict:
    language = (locale or "en").replace("_", "-").split("-")[0].lower()
    return FALLBACK_FIELD_LABELS.get(language, FALLBACK_FIELD_LABELS["en"])


def _is_empty(value: Any) -> bool:
    return value is None or str(value).strip() == ""


class FieldResolver:
    """
    Resolves the displayable personal-info fields of a BasicInfo block.

    Ordering rules:
    1. basic.field_order when present (hidden and heading entries dropped),
       otherwise the fallback order email, phone, location
    2. visible custom fields, verbatim, after the ordered/fallback fields

    Date fields go through the date formatter; a formatter failure keeps the
    raw value. Empty values and repeated keys are dropped.
    """

    def __init__(self, date_formatter: Optional[DateFormatter] = None):
        """
        Args:
            date_formatter: format(iso_date, locale) -> str, may raise ValueError or TypeError.
                            Defaults to folio.utils.timestamp.format_month_year
        """
        self.date_formatter = date_formatter or format_month_year

    def resolve(self, basic: BasicInfo, locale: str = "en") -> List[FieldEntry]:
        """
        Resolve the ordered field list.

        Args:
            basic: Personal-info block
            locale: Locale for date formatting and fallback labels

        Returns:
            FieldEntry list; stable for identical input, no key twice, no empty value
        """
        resolved = []
        seen: Set[str] = set()

        for entry in self._candidate_fields(basic, locale):
            if entry.key in seen or _is_empty(entry.value):
                continue
            seen.add(entry.key)
            resolved.append(entry)

        return resolved

    def _candidate_fields(self, basic: BasicInfo, locale: str) -> Iterator[FieldEntry]:
        labels = _labels_for(locale)

        if basic.field_order is not None:
            for entry in basic.field_order:
                if not entry.visible or entry.key in HEADING_FIELD_KEYS:
                    continue
                raw_value = basic.get_field(entry.key)
                yield FieldEntry(
                    key=entry.key,
                    label=entry.label or labels.get(entry.key, entry.key),
                    value=self._format_value(entry.key, raw_value, locale),
                )
        else:
            for key in FALLBACK_FIELD_KEYS:
                yield FieldEntry(key=key, label=labels[key], value=basic.get_field(key) or "")

        for custom in basic.custom_fields:
            if custom.visible:
                yield FieldEntry(key=custom.id, label=custom.label, value=custom.value)

    def _format_value(self, key: str, raw_value: Any, locale: str) -> str:
        if _is_empty(raw_value):
            return ""
        if key not in DATE_FIELD_KEYS:
            return str(raw_value)
        try:
            return self.date_formatter(raw_value, locale)
        except (ValueError, TypeError, AttributeError) as e:
            _log_debug(f"Keeping raw value for '{key}' ({raw_value!r}): {e}")
            return str(raw_value)


def resolve_fields(basic: BasicInfo, locale: str = "en") -> List[FieldEntry]:
    """Resolve fields with the default date formatter."""
    return FieldResolver().resolve(basic, locale)
