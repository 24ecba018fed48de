"""Resolution of symbolic write concern and read preference names."""

from pymongo.read_preferences import (
    Nearest,
    Primary,
    PrimaryPreferred,
    ReadPreference,
    Secondary,
    SecondaryPreferred,
)
from pymongo.write_concern import WriteConcern

from mongofactory.exceptions import InvalidPropertyValue

ReadMode = Primary | PrimaryPreferred | Secondary | SecondaryPreferred | Nearest

WRITE_CONCERNS: dict[str, WriteConcern] = {
    "ACKNOWLEDGED": WriteConcern(w=1),
    "W1": WriteConcern(w=1),
    "W2": WriteConcern(w=2),
    "W3": WriteConcern(w=3),
    "UNACKNOWLEDGED": WriteConcern(w=0),
    "JOURNALED": WriteConcern(w=1, j=True),
    "MAJORITY": WriteConcern(w="majority"),
    "REPLICA_ACKNOWLEDGED": WriteConcern(w=2),
    # Legacy aliases
    "NORMAL": WriteConcern(w=1),
    "SAFE": WriteConcern(w=1),
    "NONE": WriteConcern(w=0),
    "ERRORS_IGNORED": WriteConcern(w=0),
    "FSYNCED": WriteConcern(w=1, fsync=True),
    "FSYNC_SAFE": WriteConcern(w=1, fsync=True),
    "JOURNAL_SAFE": WriteConcern(w=1, j=True),
    "REPLICAS_SAFE": WriteConcern(w=2),
}

READ_PREFERENCES: dict[str, ReadMode] = {
    "primary": ReadPreference.PRIMARY,
    "primarypreferred": ReadPreference.PRIMARY_PREFERRED,
    "secondary": ReadPreference.SECONDARY,
    "secondarypreferred": ReadPreference.SECONDARY_PREFERRED,
    "nearest": ReadPreference.NEAREST,
}


def resolve_write_concern(name: str) -> WriteConcern:
    """Look up a write concern by name, ignoring case.

    Raises:
        InvalidPropertyValue: if the name is not a known write concern
    """
    try:
        return WRITE_CONCERNS[name.strip().upper()]
    except KeyError:
        raise InvalidPropertyValue("writeConcern", name, "write concern") from None


def resolve_read_preference(name: str) -> ReadMode:
    """Look up a read preference by name.

    Case and underscores are ignored, so ``secondaryPreferred`` and
    ``SECONDARY_PREFERRED`` are the same mode.

    Raises:
        InvalidPropertyValue: if the name is not a known read preference
    """
    key = name.strip().replace("_", "").lower()
    try:
        return READ_PREFERENCES[key]
    except KeyError:
        raise InvalidPropertyValue("readPreference", name, "read preference") from None
