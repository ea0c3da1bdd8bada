# client/admin.py
import logging
from dataclasses import dataclass

from client.resources import RESOURCES, resource_for_endpoint

logger = logging.getLogger(__name__)

TABS = tuple(RESOURCES)  # products, qna, awards, media, requests, applications


@dataclass(frozen=True)
class PendingDeletion:
    item: dict
    endpoint: str


class DeletionGate:
    """Holds at most one item waiting for delete confirmation."""

    def __init__(self):
        self.pending = None

    @property
    def is_pending(self):
        return self.pending is not None

    def request(self, item, endpoint):
        self.pending = PendingDeletion(item=item, endpoint=endpoint)

    def cancel(self):
        self.pending = None

    def confirm(self, sync):
        """Close the gate, then delete the pending item.

        The gate is idle again before the delete is sent and stays idle
        whatever the outcome; errors land in the resource's state.
        """
        pending, self.pending = self.pending, None
        if pending is None:
            return False
        resource = resource_for_endpoint(pending.endpoint)
        return sync.delete_item(resource.key, pending.item["id"])


class TabController:
    def __init__(self, sync, initial="products"):
        if initial not in TABS:
            raise ValueError(f"Unknown tab: {initial}")
        self.sync = sync
        self.active = initial

    def mount(self):
        """Load the initial tab."""
        return self.sync.fetch(self.active)

    def activate(self, tab):
        """Switch to ``tab`` and always refetch it, loaded or not."""
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        logger.debug("Tab %s -> %s", self.active, tab)
        self.active = tab
        return self.sync.fetch(tab)
