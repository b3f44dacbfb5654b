from enum import Enum

class TaskKind(str, Enum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    def __str__(self):
        return self.value
