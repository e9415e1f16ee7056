from enum import Enum


class Mode(Enum):
    """
    Environment modes the navigator can be tuned for.
    """

    RSIM = "rsim"
    GRSIM = "grsim"
    REAL = "real"


mode_str_to_enum = {m.value: m for m in Mode}
