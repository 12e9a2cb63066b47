"""Iterator - traverse a collection without exposing how it is stored.

Problem:
    A collection may be a plain list, a tree or a remote graph. Clients that
    walk it should not depend on that structure, and the same collection often
    needs more than one way of being walked.

Solution:
    Move traversal into a separate iterator object. The iterator knows the
    collection's internals and keeps its own cursor, so several traversals can
    run over the same collection at once without interfering.

Structure:
    - ``ProfileIterator`` declares the traversal operations (``has_more``,
      ``get_next``) and plugs into Python's iterator protocol.
    - ``FacebookIterator`` implements one traversal over a ``Facebook`` network,
      selected by a traversal kind and a subject profile id.
    - ``SocialNetwork`` declares the factory methods that hand out iterators.
    - ``Facebook`` is the concrete collection; contact lists come from an
      injected ``SocialGraphSource``.
    - ``SocialSpammer`` is a client that only ever sees ``ProfileIterator``.

Usage:
    - The collection has a complex internal structure that should stay hidden.
    - Traversal code would otherwise be duplicated across the application.
    - Clients must work with collections whose type is not known up front.

Advantages:
    - Traversal logic lives in one place (single responsibility).
    - New collections and iterators plug in without touching clients (open/closed).
    - Independent cursors allow parallel or paused traversals.

Disadvantages:
    - Overkill for simple collections a plain loop handles.
    - A specialised iterator can be slower than direct access to the storage.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from pydantic import BaseModel, ConfigDict

from src.domain.core.exceptions import (
    IteratorExhaustedError,
    ProfileNotFoundError,
    UnsupportedTraversalError,
)
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

FRIENDS = "friends"
COWORKERS = "coworkers"
TRAVERSAL_KINDS = (FRIENDS, COWORKERS)


class Profile(BaseModel):
    """A member of the social network."""
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str

    def __str__(self) -> str:
        return f"Profile: {self.name} ({self.email})"


class SocialGraphSource(Protocol):
    """Backing data source for contact lists."""

    def fetch(self, profile_id: int, kind: str) -> Optional[List[int]]:
        """Return the ordered contact ids for the key, or None when absent."""
        ...


class InMemorySocialGraph:
    """Social graph held in a dictionary keyed by (kind, profile id)."""

    def __init__(self):
        self._edges: Dict[Tuple[str, int], List[int]] = {}

    def connect(self, profile_id: int, kind: str, contact_ids: List[int]) -> None:
        """Append contacts to a profile's list for the given traversal kind."""
        self._edges.setdefault((kind, profile_id), []).extend(contact_ids)

    def fetch(self, profile_id: int, kind: str) -> Optional[List[int]]:
        contact_ids = self._edges.get((kind, profile_id))
        if contact_ids is None:
            return None
        return list(contact_ids)


class ProfileIterator(ABC):
    """Traversal over a sequence of profiles."""

    @abstractmethod
    def has_more(self) -> bool:
        """Whether another profile is available. Never moves the cursor."""

    @abstractmethod
    def get_next(self) -> Profile:
        """Return the next profile and advance the cursor.

        Raises:
            IteratorExhaustedError: if there is no next profile
        """

    def __iter__(self) -> "ProfileIterator":
        return self

    def __next__(self) -> Profile:
        if not self.has_more():
            raise StopIteration
        return self.get_next()


class SocialNetwork(ABC):
    """Collection interface: hands out iterators, hides storage."""

    @abstractmethod
    def create_friends_iterator(self, profile_id: int) -> ProfileIterator:
        pass

    @abstractmethod
    def create_coworkers_iterator(self, profile_id: int) -> ProfileIterator:
        pass


class Facebook(SocialNetwork):
    """Concrete social network holding profiles and a social graph."""

    def __init__(self, graph: Optional[SocialGraphSource] = None):
        self._profiles: Dict[int, Profile] = {}
        self._graph = graph if graph is not None else InMemorySocialGraph()

    @property
    def graph(self) -> SocialGraphSource:
        return self._graph

    def add_profile(self, profile: Profile) -> None:
        if profile.id in self._profiles:
            raise ValueError(f"Profile {profile.id} is already registered")
        self._profiles[profile.id] = profile

    def get_profile(self, profile_id: int) -> Optional[Profile]:
        return self._profiles.get(profile_id)

    def social_graph_request(self, profile_id: int, kind: str) -> List[Profile]:
        """
        Resolve the contact list for a subject into profiles.

        The order is the one the social graph returns for the key.

        Raises:
            ProfileNotFoundError: if the graph names a profile this network does not hold
        """
        logger.debug("Social graph request", profile_id=profile_id, kind=kind)
        contact_ids = self._graph.fetch(profile_id, kind)
        if contact_ids is None:
            return []

        profiles = []
        for contact_id in contact_ids:
            profile = self.get_profile(contact_id)
            if profile is None:
                raise ProfileNotFoundError(contact_id)
            profiles.append(profile)
        return profiles

    def create_iterator(self, kind: str, profile_id: int) -> "FacebookIterator":
        if kind not in TRAVERSAL_KINDS:
            raise UnsupportedTraversalError(kind, TRAVERSAL_KINDS)
        return FacebookIterator(self, kind, profile_id)

    def create_friends_iterator(self, profile_id: int) -> "FacebookIterator":
        return self.create_iterator(FRIENDS, profile_id)

    def create_coworkers_iterator(self, profile_id: int) -> "FacebookIterator":
        return self.create_iterator(COWORKERS, profile_id)


class FacebookIterator(ProfileIterator):
    """
    Iterator over one subject's contacts of one kind.

    The contact list is fetched on the first ``has_more``/``get_next`` call
    and cached for the lifetime of the iterator. A failed fetch propagates and
    leaves the iterator uninitialized.
    """

    def __init__(self, facebook: Facebook, kind: str, profile_id: int):
        self._facebook = facebook
        self._kind = kind
        self._profile_id = profile_id
        self._current_position = 0
        self._cache: Optional[List[Profile]] = None

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def profile_id(self) -> int:
        return self._profile_id

    @property
    def position(self) -> int:
        return self._current_position

    @property
    def is_initialized(self) -> bool:
        return self._cache is not None

    def _lazy_init(self) -> List[Profile]:
        if self._cache is None:
            self._cache = self._facebook.social_graph_request(self.profile_id, self.kind)
        return self._cache

    def has_more(self) -> bool:
        return self._current_position < len(self._lazy_init())

    def get_next(self) -> Profile:
        if not self.has_more():
            raise IteratorExhaustedError("No more profiles", position=self._current_position)

        profile = self._cache[self._current_position]
        self._current_position += 1
        return profile


class SocialSpammer:
    """Client that messages every profile an iterator yields."""

    def __init__(self, output: Callable[[str], None] = print):
        self._output = output

    def send(self, iterator: ProfileIterator, message: str) -> int:
        """Send ``message`` to each remaining profile; return how many were sent."""
        sent = 0
        while iterator.has_more():
            profile = iterator.get_next()
            self._output(f"Sending message to {profile.name}: {message}")
            sent += 1
        return sent


def run_demo(output: Callable[[str], None] = print) -> None:
    graph = InMemorySocialGraph()
    facebook = Facebook(graph)
    for profile_id, name in enumerate(["John", "Jane", "Jack", "Jill", "Jim"], start=1):
        facebook.add_profile(
            Profile(id=profile_id, name=f"{name} Doe", email=f"{name.lower()}@facebook.com")
        )

    graph.connect(1, FRIENDS, [2, 3, 4, 5])
    graph.connect(1, COWORKERS, [4, 2])

    spammer = SocialSpammer(output)
    output("Friends of John:")
    spammer.send(facebook.create_friends_iterator(1), "Hello from John")
    output("Coworkers of John:")
    spammer.send(facebook.create_coworkers_iterator(1), "Meeting at 10")

    # Two cursors over the same contacts stay independent.
    first = facebook.create_friends_iterator(1)
    second = facebook.create_friends_iterator(1)
    first.get_next()
    first.get_next()
    output(f"First iterator next: {first.get_next().name}")
    output(f"Second iterator next: {second.get_next().name}")
