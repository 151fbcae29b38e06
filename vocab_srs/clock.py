from datetime import date, datetime
from zoneinfo import ZoneInfo
from vocab_srs.config import settings

def today() -> date:
    """Current calendar date in the configured timezone (host local date if unset)"""
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone)).date()
    return date.today()
