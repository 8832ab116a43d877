# src/objectlessons/registry.py
"""
Name -> lesson lookup table.
"""

from typing import Dict, List

from .enums import Topic
from .config import LessonInfo
from . import class_fields, conditionals, copying, exceptions, inheritance, references, strings


LESSONS: Dict[str, LessonInfo] = {}


def register(info: LessonInfo) -> LessonInfo:
    """Add a lesson to the table."""
    if info.name in LESSONS:
        raise ValueError(f"Lesson already registered: {info.name}")
    LESSONS[info.name] = info
    return info


def get_lesson(name: str) -> LessonInfo:
    """Look up a lesson by name."""
    try:
        return LESSONS[name]
    except KeyError:
        available = ", ".join(LESSONS)
        raise ValueError(f"Unknown lesson '{name}'. Available: {available}") from None


def lesson_names() -> List[str]:
    return list(LESSONS)


register(LessonInfo(
    name="list-of-objects",
    topic=Topic.CLASSES_AND_OBJECTS,
    summary="Aliases and shallow copies share elements; deep copies do not",
    func=lambda config: copying.list_of_objects(),
))
register(LessonInfo(
    name="tensor-view",
    topic=Topic.CLASSES_AND_OBJECTS,
    summary="Tensor views share storage with their base; clones do not",
    func=lambda config: copying.tensor_view(),
))
register(LessonInfo(
    name="object-reference",
    topic=Topic.CLASSES_AND_OBJECTS,
    summary="Mutation through an alias is shared; rebinding is not",
    func=lambda config: references.object_reference(),
))
register(LessonInfo(
    name="class-field",
    topic=Topic.CLASSES_AND_OBJECTS,
    summary="A name stored on the class is shared by every instance",
    func=lambda config: class_fields.class_field(),
))
register(LessonInfo(
    name="instance-field",
    topic=Topic.CLASSES_AND_OBJECTS,
    summary="A name stored on the instance belongs to that instance",
    func=lambda config: class_fields.instance_field(),
))
register(LessonInfo(
    name="shared-mutable-default",
    topic=Topic.CLASSES_AND_OBJECTS,
    summary="A mutable class attribute is shared until an instance rebinds it",
    func=lambda config: class_fields.shared_mutable_default(),
))
register(LessonInfo(
    name="if-without-block",
    topic=Topic.CONDITIONALS,
    summary="An empty or one-line if body guards less than it appears to",
    func=lambda config: conditionals.if_without_block(),
))
register(LessonInfo(
    name="string-identity",
    topic=Topic.STRINGS,
    summary="'is' compares objects, '==' compares content",
    func=lambda config: strings.string_identity(),
))
register(LessonInfo(
    name="string-hash",
    topic=Topic.STRINGS,
    summary="String hashes depend on content only; None has no hash",
    func=lambda config: strings.string_hash(),
    terminates=True,
))
register(LessonInfo(
    name="try-without-except",
    topic=Topic.EXCEPTIONS,
    summary="finally runs, then the error propagates",
    func=lambda config: exceptions.try_without_except(),
    terminates=True,
))
register(LessonInfo(
    name="exit-in-handler",
    topic=Topic.EXCEPTIONS,
    summary="sys.exit still runs finally; os._exit does not",
    func=lambda config: exceptions.exit_in_handler(config.hard_exit, config.exit_code),
    terminates=True,
))
register(LessonInfo(
    name="with-resource",
    topic=Topic.EXCEPTIONS,
    summary="with closes the resource even without an except clause",
    func=lambda config: exceptions.with_resource(config.resource_path or exceptions.__file__),
))
register(LessonInfo(
    name="field-not-polymorphic",
    topic=Topic.INHERITANCE,
    summary="Methods dispatch on the runtime class; private fields do not",
    func=lambda config: inheritance.field_not_polymorphic(),
))
