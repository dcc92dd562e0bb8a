from enum import StrEnum


class KnownTaskType(StrEnum):
    # The store accepts any type string; these are the ones the bundled UI offers.
    UPDATE_CONFIG = "update_config"
