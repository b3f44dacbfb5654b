from enum import Enum

class PanelColor(Enum):
    SUCCESS = "green"
    INFO = "cyan"
    WARNING = "yellow"
    ERROR = "red"

    def __str__(self):
        return self.value

    @classmethod
    def for_result(cls, kind: str) -> "PanelColor":
        return cls[kind.upper()]
