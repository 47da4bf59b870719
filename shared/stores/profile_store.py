"""모포타입 프로필 저장소"""

from typing import Dict, Optional, Protocol

from shared.models.morphotype import MorphotypeProfile, normalize_profile


class ProfileStore(Protocol):
    """사용자당 1개 프로필 (재응답 시 전체 덮어쓰기)"""

    def get(self, user_id: str) -> Optional[MorphotypeProfile]:
        ...

    def upsert(self, user_id: str, profile: MorphotypeProfile) -> MorphotypeProfile:
        ...


class InMemoryProfileStore:
    """메모리 프로필 저장소 (테스트, 단일 프로세스 실행용)"""

    def __init__(self):
        self._profiles: Dict[str, MorphotypeProfile] = {}

    def get(self, user_id: str) -> Optional[MorphotypeProfile]:
        return self._profiles.get(user_id)

    def upsert(self, user_id: str, profile: MorphotypeProfile) -> MorphotypeProfile:
        # 부분 병합 없이 통째로 교체
        stored = normalize_profile(profile).model_copy(update={"user_id": user_id})
        self._profiles[user_id] = stored
        return stored
