from __future__ import annotations

import datetime
import secrets
from typing import Any, Dict, Mapping, Optional

from swiftcma.config.settings import get_settings
from swiftcma.errors import NoValidCompsError
from swiftcma.logging_config import get_logger
from .mapping import clean_mapping, suggest_mapping
from .normalize import normalize_rows
from .stats import compute_stats

logger = get_logger(__name__)

ID_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'
ID_LENGTH = 10


def new_id() -> str:
    return ''.join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def _subject(subject: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if not subject:
        return {'address': 'Unknown', 'beds': '', 'baths': '', 'sqft': ''}
    return dict(subject)


def _branding(subject: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    settings = get_settings()
    subject = subject or {}
    return {
        'agent_name': subject.get('agent_name') or settings.AGENT_NAME,
        'agent_phone': subject.get('agent_phone') or settings.AGENT_PHONE,
        'logo_url': subject.get('logo_url') or settings.LOGO_URL,
        'accent': subject.get('accent') or settings.ACCENT,
    }


def build_report(table, mapping: Optional[Mapping] = None, subject: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Assemble the flat report payload handed to the renderer.

    ``table`` needs ``headers`` and ``rows`` attributes (see
    :class:`swiftcma.ingest.Table`). A supplied mapping is used as-is (unknown
    field names demoted to unmapped); otherwise the suggested mapping is used.
    """
    final_map = clean_mapping(mapping) if mapping is not None else suggest_mapping(table.headers)
    comps = normalize_rows(table.rows, final_map)
    if not comps:
        raise NoValidCompsError(
            "No valid comps after mapping",
            hint="Map at least address and a price field (Sold or List).",
        )
    report_id = new_id()
    logger.info("Report %s: %d of %d rows kept as comps", report_id, len(comps), len(table.rows))
    return {
        'report_id': report_id,
        'share_slug': new_id(),
        'created_at': datetime.datetime.now(datetime.timezone.utc).isoformat(),
        'subject': _subject(subject),
        'mapping': final_map,
        'comps': comps,
        'market_stats': compute_stats(comps),
        'branding': _branding(subject),
    }
