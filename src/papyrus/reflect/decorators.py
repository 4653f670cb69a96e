# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Any, Callable, Self, TypedDict, TypeVar, cast

DECORATED_T = TypeVar("DECORATED_T", bound="Callable[..., Any] | type")


class DecoratorMetadata(TypedDict):
    decorators_by_type: "dict[Any, list[StackableDecorator]]"


class StackableDecorator:
    """
    Decorator that records itself on the decorated function or class.

    Several decorators of the same kind may be stacked; ``get`` returns them
    in application order (bottom-most first).
    """

    _ATTR_NAME: str = "__papyrus_stackable_decorator__"

    def __call__(self, subject: DECORATED_T) -> DECORATED_T:
        self.register(subject, self)
        return subject

    @classmethod
    def decorator_key(cls) -> Any:
        return cls

    @classmethod
    def get_or_set_metadata(cls, subject: Any) -> DecoratorMetadata:
        # checks __dict__ so a subclass never shares the metadata of its base
        if cls._ATTR_NAME not in subject.__dict__:
            setattr(subject, cls._ATTR_NAME, DecoratorMetadata(decorators_by_type={}))
        return cast(DecoratorMetadata, getattr(subject, cls._ATTR_NAME))

    @classmethod
    def register(cls, subject: Any, decorator: "StackableDecorator") -> None:
        metadata = cls.get_or_set_metadata(subject)
        metadata["decorators_by_type"].setdefault(cls.decorator_key(), []).append(
            decorator
        )

    @classmethod
    def get(cls, subject: Any) -> list[Self]:
        metadata = subject.__dict__.get(cls._ATTR_NAME)
        if metadata is None:
            return []
        return cast(
            list[Self], metadata["decorators_by_type"].get(cls.decorator_key(), [])
        )

    @classmethod
    def get_last(cls, subject: Any) -> Self | None:
        decorators = cls.get(subject)
        if decorators:
            return decorators[-1]
        return None

    @classmethod
    def get_all_from_type(cls, subject_type: type) -> list[Self]:
        """
        Retrieve the decorators of this type from a class and its bases,
        base classes first.
        """
        collected: list[Self] = []
        for base in reversed(subject_type.mro()):
            collected.extend(cls.get(base))
        return collected

    @classmethod
    def get_bound_from_type(cls, subject_type: type) -> Self | None:
        decorators = cls.get_all_from_type(subject_type)
        if not decorators:
            return None
        return decorators[-1]
