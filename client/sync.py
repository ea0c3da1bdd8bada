# client/sync.py
"""One fetch/save/delete protocol shared by every admin resource.

Each resource owns a :class:`ResourceState` (last fetched list plus an
explicit status) and, when editable, a form buffer. Mutations always
finish with a full refetch of the same resource; lists are never patched
in place.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config import ConfigurationError
from client.api import ApiError
from client.resources import RESOURCES, get_resource

logger = logging.getLogger(__name__)

IDLE = "idle"
LOADING = "loading"
LOADED = "loaded"
FAILED = "failed"


@dataclass
class ResourceState:
    status: str = IDLE
    items: List[dict] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def loading(self):
        return self.status == LOADING

    def start(self):
        self.status = LOADING
        self.error = None

    def loaded(self, items):
        self.status = LOADED
        self.items = items
        self.error = None

    def failed(self, message):
        # items are kept from the last successful fetch
        self.status = FAILED
        self.error = message


class SyncService:
    def __init__(self, api, resources=None):
        self.api = api
        self.resources = resources or RESOURCES
        self.states = {key: ResourceState() for key in self.resources}
        self.forms = {key: r.empty_form() for key, r in self.resources.items() if r.editable}

    def state(self, key):
        return self.states[key]

    def _fail(self, key, action, error):
        logger.error("Error %s %s: %s", action, key, error)
        self.states[key].failed(str(error))

    def fetch(self, key):
        """Replace the resource's list with the backend's. Returns True on success."""
        resource = get_resource(key)
        state = self.states[key]
        state.start()
        try:
            data = self.api.get(resource.endpoint)
        except (ApiError, ConfigurationError) as e:
            self._fail(key, "fetching", e)
            return False
        if not isinstance(data, list):
            self._fail(key, "fetching", f"Expected a list from /api/{resource.endpoint}, got {type(data).__name__}")
            return False
        state.loaded(data)
        logger.debug("Fetched %d %s", len(state.items), key)
        return True

    def save(self, key, form=None):
        """POST (no id) or PUT (with id) the form, then refetch.

        On failure the form buffer is left as it was so the user can retry.
        """
        resource = get_resource(key)
        if form is not None:
            self.forms[key] = form
        form = self.forms[key]
        payload = resource.encode(form)
        item_id = form.get("id")

        self.states[key].start()
        try:
            if item_id is not None:
                self.api.put(f"{resource.endpoint}/{item_id}", payload)
            else:
                self.api.post(resource.endpoint, payload)
        except (ApiError, ConfigurationError) as e:
            self._fail(key, "saving", e)
            return False

        logger.info("Saved %s %s", key, "(new)" if item_id is None else item_id)
        self.fetch(key)
        self.forms[key] = resource.empty_form()
        return True

    def delete_item(self, key, item_id):
        resource = get_resource(key)
        self.states[key].start()
        try:
            self.api.delete(f"{resource.endpoint}/{item_id}")
        except (ApiError, ConfigurationError) as e:
            self._fail(key, "deleting", e)
            return False

        logger.info("Deleted %s %s", key, item_id)
        self.fetch(key)
        return True

    def edit(self, key, row):
        self.forms[key] = get_resource(key).decode(row)

    def cancel_edit(self, key):
        self.forms[key] = get_resource(key).empty_form()
