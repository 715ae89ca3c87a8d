"""Provider base class shared by every Devnovate provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-process fakes
Component = Literal["notification", "persistence"]


class ProviderBase(Provider):
    """Dishka provider tagged with its mock metadata.

    A component base sets `__mock_component__`; its implementations set
    `__is_mock__`. Concrete providers (config, domain, application) leave
    both at their defaults.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
