# Typed Hacker News items and the schemas that decode them.
# Only the fields this client reads are declared; anything else upstream
# sends is ignored.
from dataclasses import dataclass
from typing import Tuple, Union

from hnitems.decoder import (
    ABSENT,
    Absent,
    ArrayOf,
    Boolean,
    Literal,
    NonEmptyString,
    Number,
    String,
    Struct,
    TaggedUnion,
    optional,
)

Ids = Tuple[int, ...]


@dataclass(frozen=True)
class Story:
    by: str
    id: int
    time: int
    score: int
    title: str
    descendants: int
    dead: Union[bool, Absent] = ABSENT
    deleted: Union[bool, Absent] = ABSENT
    kids: Union[Ids, Absent] = ABSENT
    text: Union[str, Absent] = ABSENT
    url: Union[str, Absent] = ABSENT
    type: str = "story"


@dataclass(frozen=True)
class Job:
    by: str
    id: int
    time: int
    score: int
    title: str
    dead: Union[bool, Absent] = ABSENT
    deleted: Union[bool, Absent] = ABSENT
    kids: Union[Ids, Absent] = ABSENT
    text: Union[str, Absent] = ABSENT
    url: Union[str, Absent] = ABSENT
    type: str = "job"


@dataclass(frozen=True)
class Poll:
    by: str
    id: int
    time: int
    score: int
    title: str
    descendants: int
    parts: Ids
    dead: Union[bool, Absent] = ABSENT
    deleted: Union[bool, Absent] = ABSENT
    kids: Union[Ids, Absent] = ABSENT
    type: str = "poll"


@dataclass(frozen=True)
class PollOpt:
    poll: int
    score: int
    text: str
    id: Union[int, Absent] = ABSENT
    by: Union[str, Absent] = ABSENT
    time: Union[int, Absent] = ABSENT
    type: str = "pollopt"


@dataclass(frozen=True)
class Comment:
    by: str
    id: int
    time: int
    parent: int
    text: str
    dead: Union[bool, Absent] = ABSENT
    deleted: Union[bool, Absent] = ABSENT
    kids: Union[Ids, Absent] = ABSENT
    type: str = "comment"


Item = Union[Story, Job, Poll, PollOpt, Comment]

item_id = Number()
id_list_schema = ArrayOf(item_id)

common_item_schema = Struct({
    "by": NonEmptyString(),
    "id": item_id,
    "time": Number(),
    "dead": optional(Boolean()),
    "deleted": optional(Boolean()),
    "kids": optional(id_list_schema),
})

top_level_schema = Struct({
    "score": Number(),
    "title": NonEmptyString(),
})

story_schema = Struct({
    "type": Literal("story"),
    "descendants": Number(),
    "text": optional(String()),
    "url": optional(String()),
}).merge(common_item_schema, top_level_schema).build(Story)

job_schema = Struct({
    "type": Literal("job"),
    "text": optional(String()),
    "url": optional(String()),
}).merge(common_item_schema, top_level_schema).build(Job)

poll_schema = Struct({
    "type": Literal("poll"),
    "descendants": Number(),
    "parts": id_list_schema,
}).merge(common_item_schema, top_level_schema).build(Poll)

pollopt_schema = Struct({
    "type": Literal("pollopt"),
    "poll": item_id,
    "score": Number(),
    "text": String(),
    "id": optional(item_id),
    "by": optional(NonEmptyString()),
    "time": optional(Number()),
}, PollOpt)

comment_schema = (Struct({
    "type": Literal("comment"),
    "parent": item_id,
    "text": String(),
}) & common_item_schema).build(Comment)

item_schema = TaggedUnion("type", [
    story_schema,
    job_schema,
    poll_schema,
    pollopt_schema,
    comment_schema,
])
