from typing import Dict, List, Optional
from uuid import uuid4

from caddie.session import RoundSession
from models import Hole


class RoundRegistry:
    """In-process store of rounds in progress, keyed by id.

    Handlers mutate sessions synchronously on the event loop, so each
    session sees one writer at a time.
    """

    def __init__(self):
        self._rounds: Dict[str, RoundSession] = {}

    def create(self, holes: List[Hole]) -> RoundSession:
        session = RoundSession(id=str(uuid4()), holes=holes)
        self._rounds[session.id] = session
        return session

    def get(self, round_id: str) -> Optional[RoundSession]:
        return self._rounds.get(round_id)

    def delete(self, round_id: str) -> bool:
        return self._rounds.pop(round_id, None) is not None
