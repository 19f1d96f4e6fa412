from typing import List, Optional


class GrammarError(Exception):
    """Base class for everything that stops a grammar from being converted."""
    pass


class StructuralParseFailure(GrammarError):
    """The input does not match the expected production syntax."""

    def __init__(self, message: str, token=None, lineno: Optional[int] = None,
                 expected: Optional[List[str]] = None):
        self.message = message
        self.token = token
        if lineno is None and token is not None:
            lineno = getattr(token, 'lineno', None)
        self.lineno = lineno
        self.expected = sorted(expected or [])
        super().__init__(str(self))

    def __str__(self):
        text = self.message
        if self.expected:
            text += " (expected one of: " + ", ".join(self.expected) + ")"
        if self.lineno:
            return f"line {self.lineno}: {text}"
        return text


class DuplicateDefinition(GrammarError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"non-terminal '{name}' is defined more than once")


class MultipleEmptyAlternatives(GrammarError):
    def __init__(self, name: str, count: int):
        self.name = name
        self.count = count
        super().__init__(f"non-terminal '{name}' has {count} empty rules, at most one is allowed")


class IncompleteConsumption(GrammarError):
    """Not raised: describes input left over after a complete parse."""

    PREVIEW = 60

    def __init__(self, rest: str):
        self.rest = rest
        text = rest.strip()
        self.preview = text[:self.PREVIEW]
        if len(text) > self.PREVIEW:
            self.preview += "..."
        super().__init__(f"unparsed input remains: {self.preview!r}")


class ResourceFailure(GrammarError):
    """A grammar file could not be opened or decoded."""

    def __init__(self, path: str, error: OSError | UnicodeDecodeError):
        self.path = path
        self.error = error
        super().__init__(f"cannot read {path}: {getattr(error, 'strerror', None) or error}")
