from typing import NewType

ClubId = NewType("ClubId", str)
PodiumId = NewType("PodiumId", str)
OwnerId = NewType("OwnerId", str)
