"""모포타입(체형 구조) 프로필 모델 (공유)

질문지로 생성되고, 재응답 시 전체 덮어쓰기 된다.
점수 엔진/프로그램 생성기는 항상 정규화된 현재 구조 모델만 사용한다.
"""

import logging
from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

GlobalType = Literal["longiligne", "breviligne", "balanced"]
FrameSize = Literal["fine", "medium", "large"]
SegmentWidth = Literal["narrow", "medium", "wide"]
RibcageDepth = Literal["narrow", "medium", "deep"]
SegmentLength = Literal["short", "medium", "long"]
ValgusLevel = Literal["none", "slight", "pronounced"]
MobilityLevel = Literal["limited", "average", "good"]
InsertionLevel = Literal["low", "medium", "high"]
WeightTendency = Literal["lean", "balanced", "gain-prone"]
NaturalStrength = Literal["below-average", "average", "above-average"]


class CamelModel(BaseModel):
    """camelCase 와이어 포맷 + snake_case 입력 허용"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StructureProfile(CamelModel):
    """골격 구조"""

    frame_size: FrameSize = "medium"
    shoulder_to_hip: SegmentWidth = "medium"
    ribcage_depth: RibcageDepth = "medium"


class ProportionsProfile(CamelModel):
    """분절 비율"""

    torso_length: SegmentLength = "medium"
    arm_length: SegmentLength = "medium"
    femur_length: SegmentLength = "medium"
    knee_valgus: ValgusLevel = "none"


class MobilityProfile(CamelModel):
    """가동성"""

    ankle_dorsiflexion: MobilityLevel = "average"
    posterior_chain: MobilityLevel = "average"
    wrist_mobility: MobilityLevel = "average"


class InsertionsProfile(CamelModel):
    """근육 부착 위치 (건 길이/레버리지)"""

    biceps: InsertionLevel = "medium"
    calves: InsertionLevel = "medium"
    chest: InsertionLevel = "medium"


class MetabolismProfile(CamelModel):
    """대사 성향"""

    weight_tendency: WeightTendency = "balanced"
    natural_strength: NaturalStrength = "average"
    best_responders: str = "none"


class SomatotypeScores(CamelModel):
    """구 체형 분류(ecto/meso/endo) 점수"""

    ecto: int = 0
    meso: int = 0
    endo: int = 0


class MobilityWork(CamelModel):
    """가동성 보완 작업"""

    area: str
    priority: Literal["high", "medium", "low"]
    exercises: List[str] = Field(default_factory=list)


class LiftAnalysis(CamelModel):
    """주요 리프트(스쿼트/데드리프트/벤치/컬) 분석 블록"""

    score: int = 50
    advantages: List[str] = Field(default_factory=list)
    disadvantages: List[str] = Field(default_factory=list)
    variants: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)


class MorphotypeProfile(CamelModel):
    """사용자 모포타입 프로필

    사용자당 1개 (upsert). 구조 모델 필드 + 하위 호환용 레거시 필드.
    """

    user_id: Optional[str] = Field(default=None, description="사용자 ID")
    global_type: GlobalType = "balanced"

    structure: StructureProfile = Field(default_factory=StructureProfile)
    proportions: ProportionsProfile = Field(default_factory=ProportionsProfile)
    mobility: MobilityProfile = Field(default_factory=MobilityProfile)
    insertions: InsertionsProfile = Field(default_factory=InsertionsProfile)
    metabolism: MetabolismProfile = Field(default_factory=MetabolismProfile)
    mobility_work: List[MobilityWork] = Field(default_factory=list)
    lift_analysis: Dict[str, LiftAnalysis] = Field(
        default_factory=dict,
        description="리프트별 분석 (squat, deadlift, bench, curls)",
    )

    # === 레거시 필드 (구 분류 체계) ===
    primary: Optional[str] = Field(default=None, description="구 체형 (ectomorph 등)")
    secondary: Optional[str] = None
    scores: SomatotypeScores = Field(default_factory=SomatotypeScores)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommended_exercises: List[str] = Field(default_factory=list)
    exercises_to_avoid: List[str] = Field(default_factory=list)

    def dimension_values(self) -> Dict[str, str]:
        """점수 엔진용 차원 → 값 평탄화"""
        return {
            "global_type": self.global_type,
            "frame_size": self.structure.frame_size,
            "shoulder_to_hip": self.structure.shoulder_to_hip,
            "ribcage_depth": self.structure.ribcage_depth,
            "torso_length": self.proportions.torso_length,
            "arm_length": self.proportions.arm_length,
            "femur_length": self.proportions.femur_length,
            "knee_valgus": self.proportions.knee_valgus,
            "ankle_dorsiflexion": self.mobility.ankle_dorsiflexion,
            "posterior_chain": self.mobility.posterior_chain,
            "wrist_mobility": self.mobility.wrist_mobility,
            "biceps_insertion": self.insertions.biceps,
            "calves_insertion": self.insertions.calves,
            "chest_insertion": self.insertions.chest,
            "weight_tendency": self.metabolism.weight_tendency,
            "natural_strength": self.metabolism.natural_strength,
        }


# =============================================================================
# 정규화
# =============================================================================

# (섹션, 필드) → (허용 값, 중립 기본값)
FIELD_SPECS: Dict[Tuple[str, str], Tuple[Tuple[str, ...], str]] = {
    ("structure", "frame_size"): (("fine", "medium", "large"), "medium"),
    ("structure", "shoulder_to_hip"): (("narrow", "medium", "wide"), "medium"),
    ("structure", "ribcage_depth"): (("narrow", "medium", "deep"), "medium"),
    ("proportions", "torso_length"): (("short", "medium", "long"), "medium"),
    ("proportions", "arm_length"): (("short", "medium", "long"), "medium"),
    ("proportions", "femur_length"): (("short", "medium", "long"), "medium"),
    ("proportions", "knee_valgus"): (("none", "slight", "pronounced"), "none"),
    ("mobility", "ankle_dorsiflexion"): (("limited", "average", "good"), "average"),
    ("mobility", "posterior_chain"): (("limited", "average", "good"), "average"),
    ("mobility", "wrist_mobility"): (("limited", "average", "good"), "average"),
    ("insertions", "biceps"): (("low", "medium", "high"), "medium"),
    ("insertions", "calves"): (("low", "medium", "high"), "medium"),
    ("insertions", "chest"): (("low", "medium", "high"), "medium"),
    ("metabolism", "weight_tendency"): (("lean", "balanced", "gain-prone"), "balanced"),
    ("metabolism", "natural_strength"): (
        ("below-average", "average", "above-average"),
        "average",
    ),
}

# 구 어휘 → 현재 어휘
LEGACY_VALUE_MAP: Dict[Tuple[str, str], Dict[str, str]] = {
    ("structure", "ribcage_depth"): {"wide": "deep"},
    ("mobility", "wrist_mobility"): {
        "none": "good",
        "slight": "average",
        "pronounced": "limited",
    },
    ("metabolism", "weight_tendency"): {
        "fast": "lean",
        "slow": "gain-prone",
        "gain_prone": "gain-prone",
    },
    ("metabolism", "natural_strength"): {
        "low": "below-average",
        "high": "above-average",
        "below_average": "below-average",
        "above_average": "above-average",
    },
}

# 구 DB 평탄 컬럼 → (섹션, 필드)
LEGACY_COLUMNS = {
    "torsoProportion": ("proportions", "torso_length"),
    "armProportion": ("proportions", "arm_length"),
    "legProportion": ("proportions", "femur_length"),
}

SOMATOTYPE_GLOBAL_TYPE = {
    "ectomorph": "longiligne",
    "ecto_meso": "longiligne",
    "ecto_endo": "balanced",
    "mesomorph": "balanced",
    "meso_endo": "breviligne",
    "endomorph": "breviligne",
}

SOMATOTYPE_WEIGHT_TENDENCY = {
    "ectomorph": "lean",
    "ecto_meso": "lean",
    "endomorph": "gain-prone",
    "meso_endo": "gain-prone",
}

ProfileInput = Union[MorphotypeProfile, Dict[str, Any], None]


def _pick(data: Dict[str, Any], snake: str) -> Any:
    """snake_case / camelCase 키 모두 조회"""
    if snake in data:
        return data[snake]
    return data.get(to_camel(snake))


def _coerce(section: str, field: str, raw: Any) -> str:
    """단일 열거형 값 정규화 (인식 불가 → 중립 기본값)"""
    allowed, default = FIELD_SPECS[(section, field)]
    if raw is None or raw == "":
        return default

    value = str(raw).strip().lower()
    value = LEGACY_VALUE_MAP.get((section, field), {}).get(value, value)
    if value in allowed:
        return value

    logger.warning(f"인식할 수 없는 값 {section}.{field}={raw!r}. 기본값 '{default}' 사용")
    return default


def _as_dict(value: Any) -> Dict[str, Any]:
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value if isinstance(value, dict) else {}


def normalize_profile(raw: ProfileInput) -> MorphotypeProfile:
    """프로필 정규화 - 부분/레거시/누락 데이터를 현재 구조 모델로 변환

    처리 케이스:
    1. None → 전 필드 중립 기본값
    2. 현재 구조 (camelCase/snake_case) → 값 검증 후 그대로
    3. 구 DB 행 (morphotypeScore + 평탄 컬럼) → 구조 모델로 매핑
    4. 구 체형(primary)만 존재 → global_type / weight_tendency 유도

    절대 예외를 던지지 않는다.
    """
    if isinstance(raw, MorphotypeProfile):
        raw = raw.model_dump()
    data: Dict[str, Any] = dict(raw) if isinstance(raw, dict) else {}

    # 구 DB 행: 구조 데이터가 morphotypeScore 안에 중첩
    stored_scores = _as_dict(_pick(data, "morphotype_score"))
    if stored_scores:
        merged = dict(stored_scores)
        merged.update({k: v for k, v in data.items() if k not in ("morphotypeScore", "morphotype_score")})
        data = merged

    sections: Dict[str, Dict[str, str]] = {}
    for (section, field) in FIELD_SPECS:
        section_data = _as_dict(_pick(data, section))
        sections.setdefault(section, {})[field] = _coerce(
            section, field, _pick(section_data, field)
        )

    # 평탄 컬럼은 구조 데이터가 없을 때만 사용
    for column, (section, field) in LEGACY_COLUMNS.items():
        section_data = _as_dict(_pick(data, section))
        if _pick(section_data, field) is None and data.get(column):
            sections[section][field] = _coerce(section, field, data[column])

    primary = _optional_str(_pick(data, "primary") or data.get("primaryMorphotype"))
    secondary = _optional_str(_pick(data, "secondary") or data.get("secondaryMorphotype"))
    has_structural = any(_as_dict(_pick(data, s)) for s in ("structure", "proportions"))

    global_type = str(_pick(data, "global_type") or "").strip().lower()
    if global_type not in ("longiligne", "breviligne", "balanced"):
        if global_type:
            logger.warning(f"인식할 수 없는 globalType={global_type!r}. 기본값 사용")
        global_type = "balanced"
        if not has_structural and primary in SOMATOTYPE_GLOBAL_TYPE:
            global_type = SOMATOTYPE_GLOBAL_TYPE[primary]

    metabolism_data = _as_dict(_pick(data, "metabolism"))
    if _pick(metabolism_data, "weight_tendency") is None and primary in SOMATOTYPE_WEIGHT_TENDENCY:
        sections["metabolism"]["weight_tendency"] = SOMATOTYPE_WEIGHT_TENDENCY[primary]
    best_responders = _pick(metabolism_data, "best_responders")

    legacy_scores = _as_dict(_pick(data, "scores")) or stored_scores
    scores = SomatotypeScores(
        ecto=_to_int(legacy_scores.get("ecto")),
        meso=_to_int(legacy_scores.get("meso")),
        endo=_to_int(legacy_scores.get("endo")),
    )

    mobility_work = []
    items = _pick(data, "mobility_work")
    if not isinstance(items, (list, tuple)):
        items = []
    for item in items:
        try:
            mobility_work.append(MobilityWork.model_validate(_as_dict(item)))
        except ValueError:
            logger.warning(f"잘못된 mobilityWork 항목 무시: {item!r}")

    lift_analysis = {}
    for lift, block in _as_dict(_pick(data, "lift_analysis")).items():
        try:
            lift_analysis[str(lift)] = LiftAnalysis.model_validate(_as_dict(block))
        except ValueError:
            logger.warning(f"잘못된 liftAnalysis 항목 무시: {lift}={block!r}")

    user_id = _pick(data, "user_id")

    return MorphotypeProfile(
        user_id=str(user_id) if user_id is not None else None,
        global_type=global_type,
        structure=StructureProfile(**sections["structure"]),
        proportions=ProportionsProfile(**sections["proportions"]),
        mobility=MobilityProfile(**sections["mobility"]),
        insertions=InsertionsProfile(**sections["insertions"]),
        metabolism=MetabolismProfile(
            **sections["metabolism"],
            best_responders=str(best_responders) if best_responders else "none",
        ),
        mobility_work=mobility_work,
        lift_analysis=lift_analysis,
        primary=primary,
        secondary=secondary,
        scores=scores,
        strengths=_str_list(_pick(data, "strengths")),
        weaknesses=_str_list(_pick(data, "weaknesses")),
        recommended_exercises=_str_list(_pick(data, "recommended_exercises")),
        exercises_to_avoid=_str_list(_pick(data, "exercises_to_avoid")),
    )


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _optional_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list, tuple)):
        return None
    return str(value).strip().lower() or None


def _str_list(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v) for v in value if v is not None]
