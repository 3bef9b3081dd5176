from .hint import DisabledHint
from .unit_input import UnitInputWidget
from .unit_toggle import UnitToggleWidget
from .unit_value import UnitValueWidget

__all__ = [
    "DisabledHint",
    "UnitInputWidget",
    "UnitToggleWidget",
    "UnitValueWidget",
]
