class AnnotationError(Exception):
    """Base class for all errors raised on annotation records and documents."""


class GrammarError(AnnotationError, ValueError):
    def __init__(self, line: str, reason: str | None = None, line_num: int | None = None):
        """
        A line that cannot be parsed under any known record grammar.
        :param line: Offending line as read
        :param reason: Short description of what is malformed
        :param line_num: 1-based line number, if known
        """
        super().__init__(line, reason, line_num)
        self.line = line
        self.reason = reason
        self.line_num = line_num

    def with_line_num(self, line_num: int):
        return GrammarError(self.line, reason=self.reason, line_num=line_num)

    def __str__(self):
        where = f"line {self.line_num}" if self.line_num is not None else "line"
        message = f'Cannot parse {where}: "{self.line}"'
        if self.reason:
            message += f" ({self.reason})"
        return message


class DuplicateIdError(AnnotationError):
    def __init__(self, id: str, line_num: int | None = None):
        super().__init__(id, line_num)
        self.id = id
        self.line_num = line_num

    def __str__(self):
        if self.line_num is not None:
            return f"Duplicate annotation id {self.id} on line {self.line_num}"
        return f"Duplicate annotation id {self.id}"


class NotFoundError(AnnotationError, KeyError):
    def __init__(self, id: str, referrer: str | None = None):
        super().__init__(id, referrer)
        self.id = id
        self.referrer = referrer

    def __str__(self):
        if self.referrer is not None:
            return f"Could not find an annotation with id {self.id} (referenced by {self.referrer})"
        return f"Could not find an annotation with id {self.id}"


class TypeMismatchError(AnnotationError, TypeError):
    def __init__(self, id: str, expected: str, actual: str):
        super().__init__(id, expected, actual)
        self.id = id
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return f"{self.id} is not {self.expected} but {self.actual}"
