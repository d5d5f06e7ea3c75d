import re
from dataclasses import dataclass, field

from .errors import GrammarError

ID_PATTERN = r"^{prefix}\d+$"


def split_fields(line: str, n_fields: int, maxsplit: int | None = None):
    """
    Split a standoff line into its tab-separated top-level fields.
    :param line: Raw line, trailing newline allowed
    :param n_fields: Number of fields the grammar requires
    :param maxsplit: Split at most this many times; the last field keeps remaining tabs.
        Without it, trailing empty fields (an empty brat tail) are dropped.
    """
    line = line.rstrip("\r\n")
    if maxsplit is None:
        fields = line.rstrip("\t").split("\t")
    else:
        fields = line.split("\t", maxsplit)
    if len(fields) != n_fields:
        raise GrammarError(line, reason=f"expected {n_fields} tab-separated fields, found {len(fields)}")
    return fields


def check_id(id: str, prefixes: str, line: str):
    if not re.match(ID_PATTERN.format(prefix=f"[{re.escape(prefixes)}]"), id):
        raise GrammarError(line, reason=f"invalid id {id!r}")
    return id


def parse_arguments(tokens: list[str], line: str):
    """
    Read role:id pairs into an insertion ordered mapping.
    :param tokens: Whitespace separated argument tokens
    :param line: Source line for error reporting
    """
    arguments = {}
    for token in tokens:
        role, sep, arg_id = token.partition(":")
        if not sep or not role or not arg_id or ":" in arg_id:
            raise GrammarError(line, reason=f"malformed argument {token!r}")
        if role in arguments:
            raise GrammarError(line, reason=f"repeated role {role!r}")
        arguments[role] = arg_id
    return arguments


def format_arguments(arguments: dict[str, str]):
    return " ".join(f"{role}:{arg_id}" for role, arg_id in arguments.items())


@dataclass(frozen=True)
class Entity:
    """
    Text-bound annotation over one or more (begin, end) character offset pairs.

    Represented in standoff as

    ID\tTYPE START END[;START END ...]\tTEXT
    """
    id: str
    type: str
    spans: list[tuple[int, int]]
    text: str

    @classmethod
    def parse(cls, line: str):
        id, type_offsets, text = split_fields(line, 3, maxsplit=2)
        check_id(id, "T", line)
        type_spans = type_offsets.split(None, 1)
        if len(type_spans) != 2:
            raise GrammarError(line, reason="missing offsets")
        type, offsets = type_spans
        spans = []
        for pair in offsets.split(";"):
            begin_end = pair.split()
            if len(begin_end) != 2:
                raise GrammarError(line, reason=f"malformed offsets {pair!r}")
            try:
                begin, end = int(begin_end[0]), int(begin_end[1])
            except ValueError:
                raise GrammarError(line, reason=f"non-numeric offsets {pair!r}")
            if not 0 <= begin < end:
                raise GrammarError(line, reason=f"invalid span {begin} {end}")
            spans.append((begin, end))
        return cls(id=id, type=type, spans=spans, text=text)

    @property
    def begin(self):
        return self.spans[0][0]

    @property
    def end(self):
        return self.spans[-1][1]

    def references(self):
        return []

    def same_span(self, other: "Entity"):
        return set(self.spans) == set(other.spans)

    def contains(self, other: "Entity"):
        """ Each span of other lies inside (or equals) at least one span of self."""
        return all(any(s_begin <= o_begin and o_end <= s_end for s_begin, s_end in self.spans)
                   for o_begin, o_end in other.spans)

    def overlaps(self, other: "Entity"):
        return any(s_begin < o_end and o_begin < s_end
                   for s_begin, s_end in self.spans
                   for o_begin, o_end in other.spans)

    def __str__(self):
        offsets = ";".join(f"{begin} {end}" for begin, end in self.spans)
        return f"{self.id}\t{self.type} {offsets}\t{self.text}"


@dataclass(frozen=True)
class Event:
    """
    Typed annotation anchored to a trigger entity, with ROLE:ID arguments.

    Represented in standoff as

    ID\tTYPE:TRIGGER [ROLE1:PART1 ROLE2:PART2 ...]
    """
    id: str
    type: str
    trigger: str
    arguments: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, line: str):
        id, data = split_fields(line, 2)
        check_id(id, "E", line)
        tokens = data.split()
        if not tokens:
            raise GrammarError(line, reason="missing type and trigger")
        type, sep, trigger = tokens[0].partition(":")
        if not sep or not type or not trigger or ":" in trigger:
            raise GrammarError(line, reason="missing trigger")
        return cls(id=id, type=type, trigger=trigger, arguments=parse_arguments(tokens[1:], line))

    def references(self):
        return [self.trigger] + list(self.arguments.values())

    def __str__(self):
        head = f"{self.id}\t{self.type}:{self.trigger}"
        if self.arguments:
            return f"{head} {format_arguments(self.arguments)}"
        return head


@dataclass(frozen=True)
class Relation:
    """
    Typed link between annotations, not anchored to text.

    Represented in standoff as

    ID\tTYPE ROLE1:ID1 ROLE2:ID2
    """
    id: str
    type: str
    arguments: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, line: str):
        id, data = split_fields(line, 2)
        check_id(id, "R", line)
        tokens = data.split()
        if len(tokens) < 2:
            raise GrammarError(line, reason="relation needs a type and at least one argument")
        return cls(id=id, type=tokens[0], arguments=parse_arguments(tokens[1:], line))

    def references(self):
        return list(self.arguments.values())

    def __str__(self):
        return f"{self.id}\t{self.type} {format_arguments(self.arguments)}"


@dataclass(frozen=True)
class Attribute:
    # A value of None marks a binary flag attribute
    id: str
    type: str
    ref_id: str
    value: str | None = None

    @classmethod
    def parse(cls, line: str):
        id, data = split_fields(line, 2)
        check_id(id, "AM", line)
        tokens = data.split()
        if len(tokens) == 2:
            type, ref_id = tokens
            value = None
        elif len(tokens) == 3:
            type, ref_id, value = tokens
        else:
            raise GrammarError(line, reason="attribute needs a type, a target and an optional value")
        return cls(id=id, type=type, ref_id=ref_id, value=value)

    def references(self):
        return [self.ref_id]

    def __str__(self):
        if self.value is None:
            return f"{self.id}\t{self.type} {self.ref_id}"
        return f"{self.id}\t{self.type} {self.ref_id} {self.value}"


@dataclass(frozen=True)
class Note:
    id: str
    type: str
    ref_id: str
    text: str

    @classmethod
    def parse(cls, line: str):
        id, type_target, text = split_fields(line, 3, maxsplit=2)
        check_id(id, "#", line)
        tokens = type_target.split()
        if len(tokens) != 2:
            raise GrammarError(line, reason="note needs a type and a target")
        type, ref_id = tokens
        return cls(id=id, type=type, ref_id=ref_id, text=text)

    def references(self):
        return [self.ref_id]

    def __str__(self):
        return f"{self.id}\t{self.type} {self.ref_id}\t{self.text}"


@dataclass(frozen=True)
class EquivalenceGroup:
    """
    Set of entities declared equivalent. Has no identifier of its own.

    Represented in standoff as

    *\tTYPE ID1 ID2 [...]
    """
    type: str
    members: list[str] = field(default_factory=list)

    id = "*"

    @classmethod
    def parse(cls, line: str):
        star, data = split_fields(line, 2)
        if star != "*":
            raise GrammarError(line, reason=f"invalid id {star!r}")
        tokens = data.split()
        if len(tokens) < 2:
            raise GrammarError(line, reason="equivalence needs a type and at least one member")
        return cls(type=tokens[0], members=tokens[1:])

    def references(self):
        return list(self.members)

    def __str__(self):
        return f"*\t{self.type} {' '.join(self.members)}"


Annotation = Entity | Event | Relation | Attribute | Note | EquivalenceGroup

# Leading character of a line -> record grammar
PARSER_BY_PREFIX = {
    "T": Entity.parse,
    "E": Event.parse,
    "R": Relation.parse,
    "#": Note.parse,
    "A": Attribute.parse,
    "M": Attribute.parse,
    "*": EquivalenceGroup.parse,
}


def parse_annotation(line: str) -> Annotation:
    """
    Parse one non-blank line into the record variant named by its first character.
    :param line: Standoff annotation line
    """
    line = line.rstrip("\r\n")
    try:
        parse_func = PARSER_BY_PREFIX[line[:1]]
    except KeyError:
        raise GrammarError(line, reason="unrecognized annotation prefix")
    return parse_func(line)
