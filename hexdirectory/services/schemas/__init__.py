from hexdirectory.services.schemas.people import (
    PersonRecordIn,
    PersonRead,
    SearchEntryRead,
)
__all__ = [
    "PersonRecordIn",
    "PersonRead",
    "SearchEntryRead",
]
