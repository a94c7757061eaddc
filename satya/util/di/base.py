"""Provider metadata shared by every DI layer."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Infrastructure that tests swap for in-memory fakes
Component = Literal["persistence", "platform"]
COMPONENTS: frozenset[str] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Provider tagged with swap metadata.

    A base that sets ``__mock_component__`` is swappable: its subclasses are
    the production (``__is_mock__ = False``) and mock implementations. A
    provider without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
