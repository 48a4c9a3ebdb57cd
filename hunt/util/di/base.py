"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for in-memory versions
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider with no subclasses is concrete and used as-is. A provider
    that names a ``__mock_component__`` is a component base: its subclasses
    are the production and mock implementations, told apart by
    ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this is a component base with swappable implementations."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Provider class to instantiate for this base.

        Args:
            use_mock: Pick the mock implementation of a component base

        Returns:
            The class itself for concrete providers, otherwise the matching
            subclass

        Raises:
            ValueError: If the component has no such implementation
        """
        if not cls.is_mockable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} provider for {cls.__mock_component__}")
