from typing import Protocol
from datetime import datetime

class DateFormat(Protocol):
    """Abstrakcja formatów daty: wejście użytkownika, wyświetlanie i zapis.

    Metody `parse_*` rzucają `ValueError`, gdy tekst nie pasuje do formatu.
    """
    def parse_input(self, raw: str) -> datetime:
        ...

    def parse_stored(self, raw: str) -> datetime:
        ...

    def format_display(self, value: datetime) -> str:
        ...

    def format_stored(self, value: datetime) -> str:
        ...
