# objmesh/loaders/errors.py
"""
Ошибки разбора OBJ.

Парсер работает по принципу fail‑fast: первая же структурная ошибка
прерывает разбор документа. Сообщение содержит номер строки (с 1)
и её исходный текст.
"""


class ObjParseError(ValueError):
    """Базовая ошибка разбора OBJ‑документа."""

    def __init__(self, message: str, line_number: int = None, line: str = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def locate(self, line_number: int, line: str) -> None:
        """Привязать ошибку к строке документа (если ещё не привязана)."""
        if self.line_number is None:
            self.line_number = line_number
            self.line = line

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message} ({self.line!r})"


class MalformedAttributeLine(ObjParseError):
    """В строке v / vn / vt не хватает чисел или число не разбирается."""


class UnresolvableIndex(ObjParseError):
    """Индекс группы вершины указывает за пределы пула атрибутов."""


class UnsupportedFaceArity(ObjParseError):
    """В строке f меньше трёх групп вершин."""


class MalformedVertexGroupToken(ObjParseError):
    """Группа вершины (например ``1/2/3``) содержит не‑целые части."""


__all__ = [
    "ObjParseError",
    "MalformedAttributeLine",
    "UnresolvableIndex",
    "UnsupportedFaceArity",
    "MalformedVertexGroupToken",
]
