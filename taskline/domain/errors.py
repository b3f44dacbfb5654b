### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Parser:
#     * zły format linii komendy → ParseError (z podpowiedzią użycia)
#
# - Executor / TaskList:
#     * poprawna składnia, ale niepoprawna treść → ValidationError i podklasy
#     * TaskList rzuca wbudowany IndexError; executor waliduje numer wcześniej
#
# - Adaptery (TaskStore):
#     * uszkodzony rekord → CorruptedDataError (łapany w pętli load, linia pomijana)
#     * błędy techniczne (OSError, SQLAlchemyError) → StorageError ze ścieżką
#
# - UI (CLI):
#     * łapie DomainError przy każdej komendzie i wyświetla przyjazny komunikat
#     * wszystko inne traktuje jako błąd techniczny


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Nie powinna być rzucana bezpośrednio: używaj klas pochodnych.
    """


class ParseError(DomainError):
    """Rzucany przez parser, gdy linia komendy nie pasuje do gramatyki.
    `usage` (opcjonalnie) to poprawny wzorzec komendy, np. `mark <task number>`.
    """
    def __init__(self, message: str, usage: str | None = None):
        self.message = message
        self.usage = usage
        super().__init__(self.__str__())
    def __str__(self):
        if self.usage:
            return f"{self.message} Usage: {self.usage}"
        return self.message


class ValidationError(DomainError):
    """Składniowo poprawne, ale semantycznie błędne dane (zakres, duplikat, kolejność dat)."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return self.message


class DuplicateTaskError(ValidationError):
    """Rzucany przez `TaskList.add()`, gdy identyczne zadanie już istnieje."""
    def __init__(self, task):
        self.task = task
        super().__init__(f"This task already exists: {task.description}")


class InvalidTaskNumberError(ValidationError):
    """Numer zadania spoza zakresu listy (lub lista jest pusta)."""
    def __init__(self, action: str, size: int):
        self.action = action
        self.size = size
        if size == 0:
            message = f"There are no tasks to {action}."
        else:
            message = f"Please give a valid task number to {action} (1-{size})."
        super().__init__(message)


class InvalidEventRangeError(ValidationError):
    def __init__(self):
        super().__init__("Event end time must be after start time.")


class NothingToUndoError(ValidationError):
    def __init__(self):
        super().__init__("Nothing to undo.")


class CorruptedDataError(DomainError):
    """Rekord w pliku danych jest kompletny strukturalnie, ale nie da się go odczytać."""
    def __init__(self, line_no: int, reason: str):
        self.line_no = line_no
        self.reason = reason
        super().__init__(self.__str__())
    def __str__(self):
        return f"Line {self.line_no}: {self.reason}"


class StorageError(DomainError):
    """Plik (lub baza) niedostępny do odczytu/zapisu; zawiera ścieżkę."""
    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(self.__str__())
    def __str__(self):
        return f"Cannot access save file {self.path}: {self.reason}"
