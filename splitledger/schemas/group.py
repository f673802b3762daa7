from typing import List, Optional
from pydantic import BaseModel, field_validator
from splitledger.core.config import settings

class Participant(BaseModel):
    participant_id: str
    name: str
    user_id: Optional[str] = None
    color: Optional[str] = None

    class Config:
        frozen = True
        from_attributes = True

class Group(BaseModel):
    group_id: str
    name: str
    participants: List[Participant] = []

    class Config:
        frozen = True
        from_attributes = True

    @field_validator("participants")
    @classmethod
    def check_roster(cls, participants: List[Participant]) -> List[Participant]:
        if len(participants) > settings.MAX_GROUP_PARTICIPANTS:
            raise ValueError(
                f"A group can have a maximum of {settings.MAX_GROUP_PARTICIPANTS} participants"
            )

        ids = [p.participant_id for p in participants]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate participants found in group")

        return participants

    def has_participant(self, participant_id: str) -> bool:
        return any(p.participant_id == participant_id for p in self.participants)
