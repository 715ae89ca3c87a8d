"""Test container builder with selective unmocking."""

from dishka import AsyncContainer

from devnovate.util.di import Component, mockable_components
from devnovate.util.di.container import build_container


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked unless unmocked.

    Unmocked components need their services running (postgres for
    persistence, the webhook receiver for notification). Settings are read
    from the environment.

    Examples:
        # Unit and e2e tests - in-memory store, recording notifier
        container = build_test_container()

        # Integration tests - real postgres
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return build_container(mocked=mockable_components() - unmock)
