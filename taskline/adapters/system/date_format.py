from taskline.ports.date_format import DateFormat
from datetime import date, datetime, time

INPUT_FORMATS = ("%Y-%m-%d", "%Y-%m-%d %H%M", "%d/%m/%Y %H%M")
INPUT_HINT = "yyyy-MM-dd, yyyy-MM-dd HHmm, or d/M/yyyy HHmm"


class LocalDateFormat(DateFormat):
    """Adapter systemowy: naiwne daty lokalne, zapis w ISO (`2019-12-02T18:00`)."""

    def parse_input(self, raw: str) -> datetime:
        """Parsuje datę wpisaną przez użytkownika; sama data oznacza północ."""
        text = raw.strip()
        if not text:
            raise ValueError("Date/time cannot be empty.")
        for fmt in INPUT_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        raise ValueError(f"Invalid date/time format '{text}'. Try {INPUT_HINT}.")

    def parse_stored(self, raw: str) -> datetime:
        text = raw.strip()
        if "T" in text:
            return datetime.fromisoformat(text)
        return datetime.combine(date.fromisoformat(text), time.min)

    def format_display(self, value: datetime) -> str:
        day = f"{value:%b} {value.day} {value.year}"
        if value.time() == time.min:
            return day
        hour = value.hour % 12 or 12
        suffix = "AM" if value.hour < 12 else "PM"
        return f"{day} {hour}:{value:%M}{suffix}"

    def format_stored(self, value: datetime) -> str:
        return value.isoformat(timespec="minutes")
