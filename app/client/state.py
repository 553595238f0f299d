from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Union
import logging

import httpx

from app.client.api import ConfessionsAPI
from app.data_schemas import Confession

logger = logging.getLogger(__name__)

# Network failures and unparseable responses
FETCH_ERRORS = (httpx.HTTPError, ValueError)


class LandingView(BaseModel):
    kind: Literal["landing"] = "landing"


class FormView(BaseModel):
    kind: Literal["form"] = "form"
    draft: str = ""
    submitting: bool = False


class FeedView(BaseModel):
    kind: Literal["feed"] = "feed"


class DetailView(BaseModel):
    kind: Literal["detail"] = "detail"
    confession: Confession


View = Annotated[
    Union[LandingView, FormView, FeedView, DetailView], Field(discriminator="kind")
]


class InvalidTransition(Exception):
    """Raised when an event is not available from the current view."""


class ConfessionWall:
    """
    Client state for the confession wall.

    One view is active at a time. Entering the feed always reloads the
    list from the server, and likes are applied locally only after the
    server has accepted them.
    """

    def __init__(self, api: ConfessionsAPI):
        self.api = api
        self.view: View = LandingView()
        self.confessions: List[Confession] = []
        self.loading = False

    def _require(self, event: str, *kinds: str) -> None:
        if self.view.kind not in kinds:
            raise InvalidTransition(f"Cannot {event} from the {self.view.kind} view")

    async def _enter_feed(self) -> None:
        self.view = FeedView()
        await self.fetch_confessions()

    async def fetch_confessions(self) -> None:
        """Replace the in-memory list with a fresh copy from the server."""
        self.loading = True
        try:
            self.confessions = await self.api.list_confessions()
        except FETCH_ERRORS as e:
            logger.error(f"Failed to fetch confessions: {e}")
        finally:
            self.loading = False

    def start(self) -> None:
        self._require("start", "landing")
        self.view = FormView()

    async def browse(self) -> None:
        self._require("browse", "landing")
        await self._enter_feed()

    async def back(self) -> None:
        self._require("go back", "form", "feed", "detail")
        if self.view.kind == "detail":
            await self._enter_feed()
        else:
            self.view = LandingView()

    def add(self) -> None:
        self._require("add", "feed")
        self.view = FormView()

    def select(self, confession: Confession) -> None:
        self._require("select", "feed")
        self.view = DetailView(confession=confession)

    async def refresh(self) -> None:
        self._require("refresh", "feed")
        await self.fetch_confessions()

    def edit(self, draft: str) -> None:
        self._require("edit", "form")
        self.view.draft = draft

    @property
    def can_submit(self) -> bool:
        return (
            self.view.kind == "form"
            and bool(self.view.draft)
            and not self.view.submitting
        )

    async def submit(self) -> bool:
        """Post the draft; move to the feed on success. Returns whether it was stored."""
        self._require("submit", "form")
        if not self.can_submit:
            return False

        form = self.view
        form.submitting = True
        try:
            await self.api.create_confession(form.draft)
        except FETCH_ERRORS as e:
            logger.error(f"Failed to submit confession: {e}")
            return False
        finally:
            form.submitting = False

        await self._enter_feed()
        return True

    async def like(self, confession_id: int) -> bool:
        self._require("like", "feed", "detail")
        try:
            await self.api.like_confession(confession_id)
        except FETCH_ERRORS as e:
            logger.error(f"Failed to like confession {confession_id}: {e}")
            return False

        self.confessions = [
            c.model_copy(update={"likes": c.likes + 1}) if c.id == confession_id else c
            for c in self.confessions
        ]
        # The view may have changed while the request was in flight
        if self.view.kind == "detail" and self.view.confession.id == confession_id:
            selected = self.view.confession
            self.view = DetailView(
                confession=selected.model_copy(update={"likes": selected.likes + 1})
            )
        return True

    def find(self, confession_id: int) -> Confession:
        for confession in self.confessions:
            if confession.id == confession_id:
                return confession
        raise KeyError(confession_id)
